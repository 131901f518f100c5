"""Tests for the block-level Markdown scanner."""

import pytest

from mcp_jira.adf.blocks import parse_blocks
from mcp_jira.adf.nodes import (
    STRONG,
    Blockquote,
    BulletList,
    CodeBlock,
    Heading,
    OrderedList,
    Paragraph,
    Rule,
    Table,
    TableCell,
    TableHeader,
    Text,
)


def _texts(paragraph):
    return [node.text for node in paragraph.content]


class TestParagraphs:
    def test_empty_input(self):
        assert parse_blocks("") == []

    def test_blank_lines_only(self):
        assert parse_blocks("\n  \n\n") == []

    def test_plain_text_is_single_paragraph(self):
        blocks = parse_blocks("just a plain sentence with no symbols")
        assert blocks == [
            Paragraph((Text("just a plain sentence with no symbols"),))
        ]

    def test_consecutive_lines_are_joined_with_spaces(self):
        blocks = parse_blocks("first line\nsecond line")
        assert blocks == [Paragraph((Text("first line second line"),))]

    def test_blank_line_splits_paragraphs(self):
        blocks = parse_blocks("one\n\ntwo")
        assert blocks == [Paragraph((Text("one"),)), Paragraph((Text("two"),))]

    def test_paragraph_stops_at_block_start(self):
        blocks = parse_blocks("Intro text\n- item")
        assert isinstance(blocks[0], Paragraph)
        assert _texts(blocks[0]) == ["Intro text"]
        assert isinstance(blocks[1], BulletList)


class TestHeadings:
    @pytest.mark.parametrize("level", range(1, 7))
    def test_levels(self, level):
        blocks = parse_blocks("#" * level + " Title")
        assert blocks == [Heading(level, (Text("Title"),))]

    def test_seven_hashes_is_paragraph(self):
        blocks = parse_blocks("####### Title")
        assert isinstance(blocks[0], Paragraph)

    def test_hash_without_space_is_paragraph(self):
        blocks = parse_blocks("#Title")
        assert blocks == [Paragraph((Text("#Title"),))]

    def test_heading_inline_marks(self):
        blocks = parse_blocks("## **Alert**")
        assert blocks == [Heading(2, (Text("Alert", (STRONG,)),))]


class TestCodeBlocks:
    def test_fence_with_language(self):
        blocks = parse_blocks("```python\nprint(1)\n```")
        assert blocks == [CodeBlock("print(1)", "python")]

    def test_fence_without_language_defaults_to_text(self):
        blocks = parse_blocks("```\nx\n```")
        assert blocks == [CodeBlock("x", "text")]

    def test_content_is_verbatim(self):
        blocks = parse_blocks("```\n**not bold**\n```")
        assert blocks == [CodeBlock("**not bold**")]
        (child,) = blocks[0].children
        assert child == Text("**not bold**")
        assert child.marks == ()

    def test_blank_lines_inside_fence_are_kept(self):
        blocks = parse_blocks("```\na\n\nb\n```")
        assert blocks == [CodeBlock("a\n\nb")]

    def test_unterminated_fence_consumes_rest(self):
        blocks = parse_blocks("intro\n\n```sh\nline1\n# not a heading\nline3")
        assert blocks[0] == Paragraph((Text("intro"),))
        assert blocks[1] == CodeBlock("line1\n# not a heading\nline3", "sh")
        assert len(blocks) == 2

    def test_text_after_closing_fence(self):
        blocks = parse_blocks("```\ncode\n```\nafter")
        assert blocks == [CodeBlock("code"), Paragraph((Text("after"),))]


class TestListsAndQuotes:
    def test_bullet_list(self):
        blocks = parse_blocks("- Item 1\n* Item 2")
        assert isinstance(blocks[0], BulletList)
        assert [_texts(item.paragraph) for item in blocks[0].items] == [
            ["Item 1"],
            ["Item 2"],
        ]

    def test_ordered_list(self):
        blocks = parse_blocks("1. First\n2. Second\n10. Tenth")
        assert isinstance(blocks[0], OrderedList)
        assert len(blocks[0].items) == 3
        assert _texts(blocks[0].items[2].paragraph) == ["Tenth"]

    def test_bullet_then_ordered_are_separate_lists(self):
        blocks = parse_blocks("- a\n1. b")
        assert [type(b) for b in blocks] == [BulletList, OrderedList]

    def test_blockquote_lines_are_joined(self):
        blocks = parse_blocks("> line one\n>line two")
        assert blocks == [Blockquote(Paragraph((Text("line one line two"),)))]

    @pytest.mark.parametrize("marker", ["---", "***", "___", "-----"])
    def test_rule(self, marker):
        assert parse_blocks(marker) == [Rule()]


class TestTables:
    def test_header_separator_and_data(self):
        blocks = parse_blocks("| A | B | C |\n|---|:---:|---|\n| 1 | 2 | 3 |")
        (table,) = blocks
        assert isinstance(table, Table)
        header, data = table.rows
        assert len(header.cells) == 3
        assert len(data.cells) == 3
        assert all(isinstance(cell, TableHeader) for cell in header.cells)
        assert all(isinstance(cell, TableCell) for cell in data.cells)
        assert _texts(data.cells[1].paragraph) == ["2"]

    def test_without_separator_every_row_is_data(self):
        (table,) = parse_blocks("| a | b |\n| c | d |")
        assert all(
            isinstance(cell, TableCell) for row in table.rows for cell in row.cells
        )

    def test_only_first_separator_marks_headers(self):
        (table,) = parse_blocks("| h |\n|---|\n| a |\n|---|\n| b |")
        assert len(table.rows) == 3
        assert isinstance(table.rows[0].cells[0], TableHeader)
        assert isinstance(table.rows[2].cells[0], TableCell)

    def test_empty_cell_produces_empty_paragraph(self):
        (table,) = parse_blocks("| a |  |")
        assert len(table.rows[0].cells) == 2
        assert _texts(table.rows[0].cells[1].paragraph) == [""]

    def test_separator_only_produces_no_block(self):
        assert parse_blocks("|---|---|") == []

    def test_blank_separator_marks_header(self):
        (table,) = parse_blocks("| H |\n| |\n| d |")
        header, data = table.rows
        assert isinstance(header.cells[0], TableHeader)
        assert isinstance(data.cells[0], TableCell)
        assert _texts(data.cells[0].paragraph) == ["d"]

    def test_indented_rows_with_trailing_spaces(self):
        (table,) = parse_blocks("  | A | B |  \n  |:--|--:| \n  | 1 | 2 |")
        assert len(table.rows) == 2
        assert all(isinstance(cell, TableHeader) for cell in table.rows[0].cells)


def test_example_scenario():
    markdown = (
        "## Finding\n"
        "\n"
        "| Field | Value |\n"
        "|-------|-------|\n"
        "| Severity | **CRITICAL** |\n"
        "\n"
        "- Item 1\n"
        "- Item 2\n"
    )
    heading, table, bullets = parse_blocks(markdown)

    assert heading == Heading(2, (Text("Finding"),))

    header_row, data_row = table.rows
    assert [type(c) for c in header_row.cells] == [TableHeader, TableHeader]
    assert [_texts(c.paragraph) for c in header_row.cells] == [["Field"], ["Value"]]
    assert [type(c) for c in data_row.cells] == [TableCell, TableCell]
    assert _texts(data_row.cells[0].paragraph) == ["Severity"]
    assert data_row.cells[1].paragraph.content == (Text("CRITICAL", (STRONG,)),)

    assert isinstance(bullets, BulletList)
    assert [_texts(i.paragraph) for i in bullets.items] == [["Item 1"], ["Item 2"]]


def test_crlf_input():
    blocks = parse_blocks("# Title\r\n\r\n- a\r\n- b\r\n")
    assert [type(b) for b in blocks] == [Heading, BulletList]
    assert blocks[0] == Heading(1, (Text("Title"),))
