"""
Atlassian Document Format (ADF) node types.

Each node kind is its own frozen dataclass, so a tree can only hold the
shapes Jira accepts: a heading always has a level, only text runs carry
marks, list items and table cells always wrap exactly one paragraph.
Every node knows how to render itself as the JSON structure the Jira
Cloud REST API (v3) expects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Union

ADF_VERSION = 1


class NodeType(str, Enum):
    """Node kinds, valued by their ADF wire name."""

    DOC = "doc"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    BULLET_LIST = "bulletList"
    ORDERED_LIST = "orderedList"
    LIST_ITEM = "listItem"
    CODE_BLOCK = "codeBlock"
    BLOCKQUOTE = "blockquote"
    TABLE = "table"
    TABLE_ROW = "tableRow"
    TABLE_HEADER = "tableHeader"
    TABLE_CELL = "tableCell"
    RULE = "rule"
    TEXT = "text"


class MarkType(str, Enum):
    """Inline mark kinds, valued by their ADF wire name."""

    STRONG = "strong"
    EM = "em"
    UNDERLINE = "underline"
    CODE = "code"
    STRIKE = "strike"
    LINK = "link"
    TEXT_COLOR = "textColor"


# ---------------------------------------------------------------------------
# Marks
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Mark:
    """A formatting mark without attributes (strong, em, code, ...)."""

    type: MarkType

    def __post_init__(self) -> None:
        if self.type in (MarkType.LINK, MarkType.TEXT_COLOR):
            raise ValueError(
                f"Mark '{self.type.value}' carries attributes; "
                "use LinkMark or TextColorMark"
            )

    def to_adf(self) -> dict[str, Any]:
        return {"type": self.type.value}


@dataclass(frozen=True)
class LinkMark:
    """Hyperlink mark."""

    href: str
    type: ClassVar[MarkType] = MarkType.LINK

    def to_adf(self) -> dict[str, Any]:
        return {"type": self.type.value, "attrs": {"href": self.href}}


@dataclass(frozen=True)
class TextColorMark:
    """Text colour mark; ``color`` is a hex string such as ``#ff5630``."""

    color: str
    type: ClassVar[MarkType] = MarkType.TEXT_COLOR

    def to_adf(self) -> dict[str, Any]:
        return {"type": self.type.value, "attrs": {"color": self.color}}


AnyMark = Union[Mark, LinkMark, TextColorMark]

STRONG = Mark(MarkType.STRONG)
EM = Mark(MarkType.EM)
UNDERLINE = Mark(MarkType.UNDERLINE)
CODE = Mark(MarkType.CODE)
STRIKE = Mark(MarkType.STRIKE)


# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------


class Node:
    """Behaviour shared by every node kind."""

    type: ClassVar[NodeType]

    @property
    def attrs(self) -> dict[str, Any]:
        return {}

    @property
    def children(self) -> tuple[Node, ...]:
        return ()

    def to_adf(self) -> dict[str, Any]:
        """Render the node and its subtree as an ADF JSON-compatible dict."""
        data: dict[str, Any] = {"type": self.type.value}
        attrs = self.attrs
        if attrs:
            data["attrs"] = attrs
        content = [
            child.to_adf()
            for child in self.children
            if not (isinstance(child, Text) and not child.text)
        ]
        data["content"] = content
        return data


@dataclass(frozen=True)
class Text(Node):
    """A run of literal text with its marks, in the order they were applied."""

    text: str
    marks: tuple[AnyMark, ...] = ()
    type: ClassVar[NodeType] = NodeType.TEXT

    @property
    def mark_types(self) -> tuple[MarkType, ...]:
        return tuple(mark.type for mark in self.marks)

    def to_adf(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type.value, "text": self.text}
        if self.marks:
            data["marks"] = [mark.to_adf() for mark in self.marks]
        return data


@dataclass(frozen=True)
class Paragraph(Node):
    content: tuple[Text, ...] = ()
    type: ClassVar[NodeType] = NodeType.PARAGRAPH

    @property
    def children(self) -> tuple[Node, ...]:
        return self.content


@dataclass(frozen=True)
class Heading(Node):
    level: int
    content: tuple[Text, ...] = ()
    type: ClassVar[NodeType] = NodeType.HEADING

    def __post_init__(self) -> None:
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be between 1 and 6, got {self.level}")

    @property
    def attrs(self) -> dict[str, Any]:
        return {"level": self.level}

    @property
    def children(self) -> tuple[Node, ...]:
        return self.content


@dataclass(frozen=True)
class ListItem(Node):
    paragraph: Paragraph
    type: ClassVar[NodeType] = NodeType.LIST_ITEM

    @property
    def children(self) -> tuple[Node, ...]:
        return (self.paragraph,)


@dataclass(frozen=True)
class BulletList(Node):
    items: tuple[ListItem, ...]
    type: ClassVar[NodeType] = NodeType.BULLET_LIST

    @property
    def children(self) -> tuple[Node, ...]:
        return self.items


@dataclass(frozen=True)
class OrderedList(Node):
    items: tuple[ListItem, ...]
    type: ClassVar[NodeType] = NodeType.ORDERED_LIST

    @property
    def children(self) -> tuple[Node, ...]:
        return self.items


@dataclass(frozen=True)
class CodeBlock(Node):
    """Fenced code; the text is kept verbatim and never carries marks."""

    code: str
    language: str = "text"
    type: ClassVar[NodeType] = NodeType.CODE_BLOCK

    @property
    def attrs(self) -> dict[str, Any]:
        return {"language": self.language}

    @property
    def children(self) -> tuple[Node, ...]:
        return (Text(self.code),)


@dataclass(frozen=True)
class Blockquote(Node):
    paragraph: Paragraph
    type: ClassVar[NodeType] = NodeType.BLOCKQUOTE

    @property
    def children(self) -> tuple[Node, ...]:
        return (self.paragraph,)


@dataclass(frozen=True)
class TableHeader(Node):
    paragraph: Paragraph
    type: ClassVar[NodeType] = NodeType.TABLE_HEADER

    @property
    def children(self) -> tuple[Node, ...]:
        return (self.paragraph,)


@dataclass(frozen=True)
class TableCell(Node):
    paragraph: Paragraph
    type: ClassVar[NodeType] = NodeType.TABLE_CELL

    @property
    def children(self) -> tuple[Node, ...]:
        return (self.paragraph,)


@dataclass(frozen=True)
class TableRow(Node):
    cells: tuple[TableHeader | TableCell, ...]
    type: ClassVar[NodeType] = NodeType.TABLE_ROW

    @property
    def children(self) -> tuple[Node, ...]:
        return self.cells


@dataclass(frozen=True)
class Table(Node):
    rows: tuple[TableRow, ...]
    number_column_enabled: bool = False
    layout: str = "default"
    type: ClassVar[NodeType] = NodeType.TABLE

    @property
    def attrs(self) -> dict[str, Any]:
        return {"isNumberColumnEnabled": self.number_column_enabled, "layout": self.layout}

    @property
    def children(self) -> tuple[Node, ...]:
        return self.rows


@dataclass(frozen=True)
class Rule(Node):
    type: ClassVar[NodeType] = NodeType.RULE

    def to_adf(self) -> dict[str, Any]:
        return {"type": self.type.value}


Block = Union[
    Paragraph,
    Heading,
    BulletList,
    OrderedList,
    CodeBlock,
    Blockquote,
    Table,
    Rule,
]


@dataclass(frozen=True)
class Doc(Node):
    """Document root: one flat sequence of block nodes."""

    content: tuple[Block, ...] = ()
    type: ClassVar[NodeType] = NodeType.DOC

    @property
    def children(self) -> tuple[Node, ...]:
        return self.content

    def to_adf(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "version": ADF_VERSION,
            "content": [block.to_adf() for block in self.content],
        }
