"""
Block-level Markdown scanner.

The scanner walks the input once, line by line. At each non-blank line
the recognizers below are tried in priority order; the first one that
accepts the line builds its block and returns the index of the first
line it did not consume. Anything unrecognized ends up in a paragraph,
so every input produces a valid block sequence.
"""

import logging
import re
from collections.abc import Callable

from .inline import parse_inline
from .nodes import (
    Block,
    Blockquote,
    BulletList,
    CodeBlock,
    Heading,
    ListItem,
    OrderedList,
    Paragraph,
    Rule,
    Table,
    TableCell,
    TableHeader,
    TableRow,
)

logger = logging.getLogger("mcp-jira.adf")

HEADING_RE = re.compile(r"(#{1,6})\s+(.+)$")
RULE_RE = re.compile(r"-{3,}|\*{3,}|_{3,}")
FENCE = "```"
QUOTE_PREFIX_RE = re.compile(r">\s?")
BULLET_RE = re.compile(r"[-*]\s+")
ORDERED_RE = re.compile(r"\d+\.\s+")
TABLE_SEPARATOR_RE = re.compile(r"\|[\s|:-]*\|")

# (lines, index) -> (block or None, next index), or None if the line is not ours
Recognizer = Callable[[list[str], int], "tuple[Block | None, int] | None"]


def split_lines(markdown: str) -> list[str]:
    """Split text into lines, accepting ``\\n``, ``\\r\\n`` and ``\\r`` endings."""
    return markdown.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def _is_heading(line: str) -> bool:
    return HEADING_RE.match(line) is not None


def _is_rule(line: str) -> bool:
    return RULE_RE.fullmatch(line.strip()) is not None


def _is_fence(line: str) -> bool:
    return line.strip().startswith(FENCE)


def _is_quote(line: str) -> bool:
    return line.strip().startswith(">")


def _is_bullet(line: str) -> bool:
    return BULLET_RE.match(line.strip()) is not None


def _is_ordered(line: str) -> bool:
    return ORDERED_RE.match(line.strip()) is not None


def _is_table_row(line: str) -> bool:
    stripped = line.strip()
    return stripped.startswith("|") and stripped.endswith("|")


def _paragraph(text: str) -> Paragraph:
    return Paragraph(tuple(parse_inline(text)))


def _heading(lines: list[str], i: int) -> tuple[Block | None, int] | None:
    match = HEADING_RE.match(lines[i])
    if not match:
        return None
    level = len(match.group(1))
    return Heading(level, tuple(parse_inline(match.group(2)))), i + 1


def _rule(lines: list[str], i: int) -> tuple[Block | None, int] | None:
    if not _is_rule(lines[i]):
        return None
    return Rule(), i + 1


def _code_block(lines: list[str], i: int) -> tuple[Block | None, int] | None:
    if not _is_fence(lines[i]):
        return None
    language = lines[i].strip()[len(FENCE) :].strip() or "text"
    code_lines: list[str] = []
    i += 1
    while i < len(lines) and not _is_fence(lines[i]):
        code_lines.append(lines[i])
        i += 1
    if i >= len(lines):
        logger.debug(f"Unterminated code fence, consumed {len(code_lines)} lines")
    # Step over the closing fence, if there is one
    return CodeBlock("\n".join(code_lines), language), i + 1


def _blockquote(lines: list[str], i: int) -> tuple[Block | None, int] | None:
    if not _is_quote(lines[i]):
        return None
    quoted: list[str] = []
    while i < len(lines) and _is_quote(lines[i]):
        quoted.append(QUOTE_PREFIX_RE.sub("", lines[i].strip(), count=1))
        i += 1
    return Blockquote(_paragraph(" ".join(quoted))), i


def _list_items(
    lines: list[str], i: int, marker: re.Pattern[str]
) -> tuple[tuple[ListItem, ...], int]:
    items: list[ListItem] = []
    while i < len(lines):
        stripped = lines[i].strip()
        match = marker.match(stripped)
        if not match:
            break
        items.append(ListItem(_paragraph(stripped[match.end() :])))
        i += 1
    return tuple(items), i


def _bullet_list(lines: list[str], i: int) -> tuple[Block | None, int] | None:
    if not _is_bullet(lines[i]):
        return None
    items, i = _list_items(lines, i, BULLET_RE)
    return BulletList(items), i


def _ordered_list(lines: list[str], i: int) -> tuple[Block | None, int] | None:
    if not _is_ordered(lines[i]):
        return None
    items, i = _list_items(lines, i, ORDERED_RE)
    return OrderedList(items), i


def _table(lines: list[str], i: int) -> tuple[Block | None, int] | None:
    if not _is_table_row(lines[i]):
        return None
    rows: list[list[str]] = []
    header_rows = 0
    separator_seen = False
    while i < len(lines) and _is_table_row(lines[i]):
        stripped = lines[i].strip()
        i += 1
        if TABLE_SEPARATOR_RE.fullmatch(stripped):
            if not separator_seen:
                separator_seen = True
                header_rows = len(rows)
            continue
        cells = [cell.strip() for cell in stripped.split("|")[1:-1]]
        if cells:
            rows.append(cells)

    if not rows:
        return None, i

    table_rows = []
    for index, cells in enumerate(rows):
        cell_type = TableHeader if index < header_rows else TableCell
        table_rows.append(
            TableRow(tuple(cell_type(_paragraph(cell)) for cell in cells))
        )
    return Table(tuple(table_rows)), i


def _starts_block(line: str) -> bool:
    return (
        _is_heading(line)
        or _is_rule(line)
        or _is_fence(line)
        or _is_quote(line)
        or _is_bullet(line)
        or _is_ordered(line)
        or _is_table_row(line)
    )


def _paragraph_block(lines: list[str], i: int) -> tuple[Block | None, int] | None:
    collected = [lines[i]]
    i += 1
    while i < len(lines) and lines[i].strip() and not _starts_block(lines[i]):
        collected.append(lines[i])
        i += 1
    return _paragraph(" ".join(collected)), i


RECOGNIZERS: tuple[Recognizer, ...] = (
    _heading,
    _rule,
    _code_block,
    _blockquote,
    _bullet_list,
    _ordered_list,
    _table,
    _paragraph_block,
)


def parse_blocks(markdown: str) -> list[Block]:
    """
    Convert Markdown into a flat list of ADF block nodes.

    Never raises: malformed constructs degrade to paragraphs, and an
    unterminated code fence runs to the end of the input.

    Args:
        markdown: Markdown source

    Returns:
        Block nodes in document order (empty for blank input)
    """
    lines = split_lines(markdown)
    blocks: list[Block] = []
    i = 0

    while i < len(lines):
        if not lines[i].strip():
            i += 1
            continue
        for recognize in RECOGNIZERS:
            result = recognize(lines, i)
            if result is None:
                continue
            block, i = result
            if block is not None:
                blocks.append(block)
            break

    return blocks
