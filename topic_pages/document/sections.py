r"""Split learning topic content into its eight numbered sections.

Section markers are bold, numbered lines such as ``**3. Explanation:**``. The
body of a section runs until the next recognised marker or the end of the
content. Markers numbered outside ``1..8`` are ordinary body text.

Example
-------
>>> from topic_pages.document.sections import extract_sections
>>> sections = extract_sections("**1. Learning flow:**\nDo X first.\n\n**2. Material:**\nRead Y.")
>>> [(section.ordinal, section.body) for section in sections]
[(1, 'Do X first.'), (2, 'Read Y.')]
"""

from __future__ import annotations

import logging

from topic_pages._constants import FIRST_ORDINAL, LAST_ORDINAL, SECTION_LABELS

from .lexer import Line, LineKind, join_raw, scan_lines
from .models import Section

logger = logging.getLogger(__name__)


def _is_boundary(line: Line) -> bool:
    return (
        line.kind is LineKind.SECTION
        and line.ordinal is not None
        and FIRST_ORDINAL <= line.ordinal <= LAST_ORDINAL
    )


def is_structured(content: str) -> bool:
    """Return True when ``content`` contains a section-1 marker."""
    return any(
        _is_boundary(line) and line.ordinal == FIRST_ORDINAL
        for line in scan_lines(content)
    )


def extract_sections(content: str) -> tuple[Section, ...]:
    """Return the sections of ``content`` ordered by ordinal.

    Parameters
    ----------
    content : str
        Raw topic content.

    Returns
    -------
    tuple[Section, ...]
        One section per ordinal found, sorted ascending. When an ordinal is
        repeated the later body replaces the earlier one. Text before the
        first marker is discarded.
    """
    lines = scan_lines(content)
    boundaries = [idx for idx, line in enumerate(lines) if _is_boundary(line)]
    if not boundaries:
        return ()

    preamble = join_raw(lines[: boundaries[0]]).strip()
    if preamble:
        logger.debug("Discarding %d characters before the first section", len(preamble))

    by_ordinal: dict[int, Section] = {}
    for position, start in enumerate(boundaries):
        end = boundaries[position + 1] if position + 1 < len(boundaries) else len(lines)
        marker = lines[start]
        ordinal = marker.ordinal
        if ordinal in by_ordinal:
            logger.debug("Section %d appears more than once; keeping the last", ordinal)
        by_ordinal[ordinal] = Section(
            ordinal=ordinal,
            label=SECTION_LABELS[ordinal],
            title=marker.title,
            body=join_raw(lines[start + 1 : end]).strip(),
        )
    return tuple(by_ordinal[ordinal] for ordinal in sorted(by_ordinal))


__all__ = ["extract_sections", "is_structured"]
