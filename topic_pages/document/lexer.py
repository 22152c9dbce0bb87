"""Line-oriented lexer for the learning topic dialect.

Every line is classified exactly once into a :class:`LineKind`; the section
extractor and block parser then work on the token stream instead of running
competing regular expressions over raw text. Precedence lives in
:func:`classify_line` and nowhere else.

Example
-------
>>> from topic_pages.document.lexer import LineKind, scan_lines
>>> [line.kind for line in scan_lines("**1. Flow:**\\n- a\\n\\ntext")]
[<LineKind.SECTION: 'section'>, <LineKind.BULLET: 'bullet'>, <LineKind.BLANK: 'blank'>, <LineKind.TEXT: 'text'>]
"""

from __future__ import annotations

import dataclasses as dc
import enum
import re

SECTION_PATTERN = re.compile(
    r"^\*\*(?P<ordinal>\d{1,9})\.\s*(?P<title>[^*\n]*?)(?P<inner>:?)\*\*(?P<outer>:?)\s*$"
)
CALLOUT_PATTERN = re.compile(r"^\*\*(?P<kind>tip|note|important):\*\*", re.IGNORECASE)
BULLET_PATTERN = re.compile(r"^\s*[-*•]\s+")
NUMBERED_PATTERN = re.compile(r"^\s*(?:\((?P<paren>\d{1,9})\)|(?P<dot>\d{1,9})\.)\s+")
INDENT_PATTERN = re.compile(r"^\s*")


class LineKind(enum.Enum):
    """Structural role of a single source line."""

    BLANK = "blank"
    SECTION = "section"
    CALLOUT = "callout"
    BULLET = "bullet"
    NUMBERED = "numbered"
    TEXT = "text"


@dc.dataclass(frozen=True, slots=True)
class Line:
    """One classified source line.

    Attributes
    ----------
    kind : LineKind
        Structural role of the line.
    raw : str
        The line exactly as authored, without its newline.
    indent : int
        Count of leading whitespace characters.
    content : str
        Text after the list or callout marker; the stripped line otherwise.
    ordinal : int | None
        Section number for ``SECTION`` lines.
    title : str
        Author title for ``SECTION`` lines, callout kind for ``CALLOUT`` lines.
    """

    kind: LineKind
    raw: str
    indent: int = 0
    content: str = ""
    ordinal: int | None = None
    title: str = ""


def classify_line(raw: str) -> Line:
    """Return the :class:`Line` token for ``raw``."""
    if not raw.strip():
        return Line(LineKind.BLANK, raw)

    indent = len(INDENT_PATTERN.match(raw).group(0))
    section = SECTION_PATTERN.match(raw)
    if section and (section.group("inner") or section.group("outer")):
        return Line(
            LineKind.SECTION,
            raw,
            indent=indent,
            content=raw.strip(),
            ordinal=int(section.group("ordinal")),
            title=section.group("title").strip(),
        )

    stripped = raw.strip()
    callout = CALLOUT_PATTERN.match(stripped)
    if callout:
        return Line(
            LineKind.CALLOUT,
            raw,
            indent=indent,
            content=stripped[callout.end() :].strip(),
            title=callout.group("kind").lower(),
        )

    bullet = BULLET_PATTERN.match(raw)
    if bullet:
        return Line(
            LineKind.BULLET, raw, indent=indent, content=raw[bullet.end() :].strip()
        )

    numbered = NUMBERED_PATTERN.match(raw)
    if numbered:
        return Line(
            LineKind.NUMBERED,
            raw,
            indent=indent,
            content=raw[numbered.end() :].strip(),
            ordinal=int(numbered.group("paren") or numbered.group("dot")),
            title="paren" if numbered.group("paren") else "dot",
        )

    return Line(LineKind.TEXT, raw, indent=indent, content=stripped)


def scan_lines(text: str) -> list[Line]:
    """Classify every line of ``text``, normalising CRLF line endings."""
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    return [classify_line(raw) for raw in normalized.split("\n")]


def split_chunks(lines: list[Line]) -> list[list[Line]]:
    """Group lines into blank-line-delimited chunks, dropping empty chunks."""
    chunks: list[list[Line]] = [[]]
    for line in lines:
        if line.kind is LineKind.BLANK:
            if chunks[-1]:
                chunks.append([])
            continue
        chunks[-1].append(line)
    return [chunk for chunk in chunks if chunk]


def join_raw(lines: list[Line]) -> str:
    """Rebuild the source text of ``lines``."""
    return "\n".join(line.raw for line in lines)


__all__ = [
    "Line",
    "LineKind",
    "classify_line",
    "join_raw",
    "scan_lines",
    "split_chunks",
]
