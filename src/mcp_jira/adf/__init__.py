"""Markdown to Atlassian Document Format (ADF) conversion."""

import logging
from typing import Any

from .blocks import parse_blocks
from .detect import looks_like_markdown
from .inline import parse_inline
from .nodes import (
    CODE,
    EM,
    STRIKE,
    STRONG,
    UNDERLINE,
    AnyMark,
    Block,
    Blockquote,
    BulletList,
    CodeBlock,
    Doc,
    Heading,
    LinkMark,
    ListItem,
    Mark,
    MarkType,
    Node,
    NodeType,
    OrderedList,
    Paragraph,
    Rule,
    Table,
    TableCell,
    TableHeader,
    TableRow,
    Text,
    TextColorMark,
)

logger = logging.getLogger("mcp-jira.adf")


def markdown_to_adf(markdown: str) -> Doc:
    """Convert Markdown into an ADF document tree."""
    return Doc(tuple(parse_blocks(markdown)))


def plain_text_to_adf(text: str) -> Doc:
    """Wrap text verbatim as a single unformatted paragraph."""
    return Doc((Paragraph((Text(text),)),))


def text_to_adf(text: str) -> dict[str, Any]:
    """
    Build the ADF body Jira Cloud expects for a user-supplied text field.

    Text that looks like Markdown is converted; anything else is sent as
    one plain paragraph so that prose is never reinterpreted.

    Args:
        text: Description, comment or worklog text

    Returns:
        ADF document as a JSON-compatible dict
    """
    if looks_like_markdown(text):
        doc = markdown_to_adf(text)
        logger.debug(f"Converted Markdown into {len(doc.content)} ADF blocks")
    else:
        doc = plain_text_to_adf(text)
    return doc.to_adf()


__all__ = [
    "AnyMark",
    "Block",
    "Blockquote",
    "BulletList",
    "CODE",
    "CodeBlock",
    "Doc",
    "EM",
    "Heading",
    "LinkMark",
    "ListItem",
    "Mark",
    "MarkType",
    "Node",
    "NodeType",
    "OrderedList",
    "Paragraph",
    "Rule",
    "STRIKE",
    "STRONG",
    "Table",
    "TableCell",
    "TableHeader",
    "TableRow",
    "Text",
    "TextColorMark",
    "UNDERLINE",
    "looks_like_markdown",
    "markdown_to_adf",
    "parse_blocks",
    "parse_inline",
    "plain_text_to_adf",
    "text_to_adf",
]
