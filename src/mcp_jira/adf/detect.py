"""Heuristic check for Markdown formatting in free-form text."""

import re

# Each probe stands alone; the text counts as Markdown if any of them hits.
MARKDOWN_PROBES: tuple[re.Pattern[str], ...] = (
    re.compile(r"^#{1,6}\s+", re.MULTILINE),  # heading
    re.compile(r"\*\*[^*]+\*\*"),  # bold
    re.compile(r"\*[^*]+\*"),  # italic
    re.compile(r"`[^`]+`"),  # inline code
    re.compile(r"```"),  # fenced code block
    re.compile(r"^\s*[-*]\s+", re.MULTILINE),  # bullet item
    re.compile(r"^\s*\d+\.\s+", re.MULTILINE),  # ordered item
    re.compile(r"\[.+\]\(.+\)"),  # link
    re.compile(r"^[ \t]*\|.*\|[ \t]*$", re.MULTILINE),  # table row, trimmed
    re.compile(r"^>", re.MULTILINE),  # blockquote
)


def looks_like_markdown(text: str) -> bool:
    """
    Guess whether ``text`` uses Markdown formatting.

    False positives and negatives are acceptable: the answer only decides
    whether the text is converted or sent as a single plain paragraph.

    Args:
        text: Raw user-supplied text

    Returns:
        True if any Markdown probe matches anywhere in the text
    """
    if not text:
        return False
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    return any(probe.search(normalized) for probe in MARKDOWN_PROBES)
