"""
Atlassian Document Format (ADF) utilities.

Flattens ADF bodies returned by Jira Cloud (descriptions, comments,
worklog comments) into readable plain text.
"""

from typing import Any

_INLINE_TYPES = {"text", "hardBreak", "mention", "emoji", "inlineCard", "date", "status"}


def _inline_text(node: dict[str, Any]) -> str:
    node_type = node.get("type")
    if node_type == "text":
        return node.get("text", "")
    if node_type == "hardBreak":
        return "\n"
    attrs = node.get("attrs") or {}
    if node_type in ("mention", "emoji", "status"):
        return str(attrs.get("text") or attrs.get("shortName") or "")
    if node_type == "inlineCard":
        return str(attrs.get("url", ""))
    if node_type == "date":
        return str(attrs.get("timestamp", ""))
    return ""


def _block_text(node: dict[str, Any]) -> str | None:
    node_type = node.get("type")
    content = node.get("content") or []

    if node_type in _INLINE_TYPES:
        return _inline_text(node)

    if node_type == "rule":
        return "---"

    if node_type == "codeBlock":
        code = "".join(_inline_text(child) for child in content if isinstance(child, dict))
        return f"```\n{code}\n```"

    if node_type in ("bulletList", "orderedList"):
        lines = []
        for index, item in enumerate(content, start=1):
            marker = f"{index}." if node_type == "orderedList" else "-"
            item_text = adf_to_text(item) or ""
            lines.append(f"{marker} {item_text}")
        return "\n".join(lines) if lines else None

    if node_type == "tableRow":
        cells = [adf_to_text(cell) or "" for cell in content]
        return "| " + " | ".join(cells) + " |"

    if content and all(
        isinstance(child, dict) and child.get("type") in _INLINE_TYPES
        for child in content
    ):
        # paragraph, heading and other inline containers
        return "".join(_inline_text(child) for child in content)

    if content:
        return adf_to_text(content)

    return None


def adf_to_text(adf_content: dict | list | str | None) -> str | None:
    """
    Convert Atlassian Document Format (ADF) content to plain text.

    Inline runs inside a block are concatenated; blocks are separated by
    newlines. Lists keep ``-`` / ``1.`` markers, code blocks keep their
    fences and table rows are rendered as ``| a | b |``.

    Args:
        adf_content: ADF document (dict), content list, string, or None

    Returns:
        Plain text string or None if no content
    """
    if adf_content is None:
        return None

    if isinstance(adf_content, str):
        return adf_content

    if isinstance(adf_content, list):
        texts = []
        for item in adf_content:
            text = adf_to_text(item)
            if text:
                texts.append(text)
        return "\n".join(texts) if texts else None

    if isinstance(adf_content, dict):
        return _block_text(adf_content)

    return None
