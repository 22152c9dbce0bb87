"""Inline tokenizer for bold, code, and link markup.

The scanner walks the text once, left to right. At each position it tries the
opener found there (``**``, a backtick, or ``[``); the first construct that
closes successfully wins and its content is taken literally, so markup never
nests. Characters that do not open a complete construct are kept as text.

Example
-------
>>> from topic_pages.document.inline import tokenize_inline
>>> tokenize_inline("Use `foo()` now")
(Text(value='Use '), Code(value='foo()'), Text(value=' now'))
"""

from __future__ import annotations

from .models import Bold, Code, InlineSegment, InlineText, Link, Text

LINK_SCHEMES = ("http://", "https://")


def _match_bold(text: str, start: int) -> tuple[InlineSegment, int] | None:
    if not text.startswith("**", start):
        return None
    close = text.find("*", start + 2)
    if close <= start + 2 or not text.startswith("**", close):
        return None
    return Bold(text[start + 2 : close]), close + 2


def _match_code(text: str, start: int) -> tuple[InlineSegment, int] | None:
    if text[start] != "`":
        return None
    close = text.find("`", start + 1)
    if close <= start + 1:
        return None
    return Code(text[start + 1 : close]), close + 1


def _valid_href(href: str) -> bool:
    """Accept absolute http(s) URLs and in-page fragments only."""
    if not href or any(char.isspace() for char in href):
        return False
    if href.startswith("#"):
        return True
    return any(
        href.startswith(scheme) and len(href) > len(scheme) for scheme in LINK_SCHEMES
    )


def _match_link(text: str, start: int) -> tuple[InlineSegment, int] | None:
    if text[start] != "[":
        return None
    label_end = text.find("]", start + 1)
    if label_end <= start + 1 or not text.startswith("(", label_end + 1):
        return None
    href_end = text.find(")", label_end + 2)
    if href_end == -1:
        return None
    href = text[label_end + 2 : href_end]
    if not _valid_href(href):
        return None
    return Link(text[start + 1 : label_end], href), href_end + 1


_MATCHERS = (_match_bold, _match_code, _match_link)


def tokenize_inline(text: str) -> tuple[InlineSegment, ...]:
    """Split ``text`` into ordered, non-overlapping inline segments.

    Parameters
    ----------
    text : str
        Span of prose, possibly spanning several lines.

    Returns
    -------
    tuple[InlineSegment, ...]
        ``Text``, ``Bold``, ``Code`` and ``Link`` segments in source order.
        Joining every ``value`` yields ``text`` minus the recognized markup.
    """
    segments: list[InlineSegment] = []
    pending: list[str] = []
    index = 0
    while index < len(text):
        matched = None
        for matcher in _MATCHERS:
            matched = matcher(text, index)
            if matched:
                break
        if matched is None:
            pending.append(text[index])
            index += 1
            continue
        if pending:
            segments.append(Text("".join(pending)))
            pending = []
        segment, index = matched
        segments.append(segment)
    if pending:
        segments.append(Text("".join(pending)))
    return tuple(segments)


def parse_inline(text: str) -> InlineText:
    """Return ``text`` paired with its inline segments."""
    return InlineText(source=text, segments=tokenize_inline(text))


__all__ = ["parse_inline", "tokenize_inline"]
