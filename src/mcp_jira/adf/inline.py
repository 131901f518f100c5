"""Inline Markdown scanner producing ADF text runs."""

import re
from collections.abc import Callable

from .nodes import CODE, EM, STRIKE, STRONG, LinkMark, Text

InlineRule = tuple[re.Pattern[str], Callable[[re.Match[str]], Text]]

LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
STRONG_EM_RE = re.compile(r"(\*{3}|_{3})([^*_]+)\1")
STRONG_RE = re.compile(r"(\*{2}|_{2})([^*_]+)\1")
EM_RE = re.compile(r"([*_])([^*_]+)\1")
CODE_RE = re.compile(r"`([^`]+)`")
STRIKE_RE = re.compile(r"~~([^~]+)~~")
SPECIAL_CHAR_RE = re.compile(r"[\[*_`~]")

# Tried in order at the scan position; the first match wins.
INLINE_RULES: tuple[InlineRule, ...] = (
    (LINK_RE, lambda m: Text(m.group(1), (LinkMark(m.group(2)),))),
    (STRONG_EM_RE, lambda m: Text(m.group(2), (STRONG, EM))),
    (STRONG_RE, lambda m: Text(m.group(2), (STRONG,))),
    (EM_RE, lambda m: Text(m.group(2), (EM,))),
    (CODE_RE, lambda m: Text(m.group(1), (CODE,))),
    (STRIKE_RE, lambda m: Text(m.group(1), (STRIKE,))),
)


def parse_inline(text: str) -> list[Text]:
    """
    Split a line of Markdown into marked ADF text runs.

    Patterns are only tried at the current position. When none matches,
    everything up to the next special character becomes a plain run, and
    a special character that opens nothing is emitted on its own.

    Args:
        text: Inline Markdown (a single joined line)

    Returns:
        Text runs in source order; ``[Text("")]`` for empty input
    """
    nodes: list[Text] = []
    pos = 0
    end = len(text)

    while pos < end:
        for pattern, build in INLINE_RULES:
            match = pattern.match(text, pos)
            if match:
                nodes.append(build(match))
                pos = match.end()
                break
        else:
            special = SPECIAL_CHAR_RE.search(text, pos)
            if special is None:
                nodes.append(Text(text[pos:]))
                break
            if special.start() == pos:
                # Unpaired delimiter, keep it literally
                nodes.append(Text(text[pos]))
                pos += 1
            else:
                nodes.append(Text(text[pos : special.start()]))
                pos = special.start()

    return nodes or [Text("")]
