r"""Assemble parsed sections and the code example into a renderable document.

Display order is fixed: sections 1-6, the external code example, then
sections 7 and 8. Sections that were never authored are skipped; sections
authored with an empty body keep their heading and show a placeholder. A
table of contents is attached once the document has more parts than the
threshold.

Example
-------
>>> from topic_pages.document import parse_topic
>>> document = parse_topic("**1. Flow:**\nStart.", "print(1)", "python")
>>> [part.label for part in document.parts]
['Learning flow', 'Code example']
>>> document.toc is None
True
"""

from __future__ import annotations

import re

from topic_pages._constants import (
    ANCHOR_TEMPLATE,
    CODE_PART_KEY,
    CODE_SECTION_LABEL,
    DEFAULT_CODE_LANGUAGE,
    EMPTY_SECTION_HINT,
    EXAMPLE_ORDINAL,
    FIRST_ORDINAL,
    LEADING_ORDINALS,
    TOC_THRESHOLD,
    TRAILING_ORDINALS,
)

from .blocks import parse_blocks, split_example
from .inline import parse_inline
from .models import Block, CodeBlock, Document, Paragraph, Part, Placeholder, Section, TocEntry
from .sections import extract_sections, is_structured

PARAGRAPH_BREAK = re.compile(r"\n\s*\n")


def anchor_for(key: str) -> str:
    """Return the heading id used for the part ``key``."""
    return ANCHOR_TEMPLATE.format(key=key)


def build_code_block(code: str | None, language: str | None = None) -> CodeBlock | None:
    """Return a :class:`CodeBlock` for non-blank ``code``, else None."""
    if not code or not code.strip():
        return None
    return CodeBlock(code=code, language=language or DEFAULT_CODE_LANGUAGE)


def section_blocks(section: Section) -> tuple[Block, ...]:
    """Return the blocks for ``section``, or a placeholder for an empty body."""
    if not section.body.strip():
        return (Placeholder(message=EMPTY_SECTION_HINT),)
    if section.ordinal == EXAMPLE_ORDINAL:
        return split_example(section.body)
    return parse_blocks(section.body, inline_steps=section.ordinal == FIRST_ORDINAL)


def _section_part(section: Section, number: int) -> Part:
    return Part(
        key=f"s{section.ordinal}",
        label=section.label,
        number=number,
        blocks=section_blocks(section),
    )


def assemble_parts(
    sections: tuple[Section, ...], code_example: CodeBlock | None
) -> tuple[Part, ...]:
    """Order sections and the code example for display, numbering from 1."""
    by_ordinal = {section.ordinal: section for section in sections}
    parts: list[Part] = []
    for ordinal in LEADING_ORDINALS:
        if ordinal in by_ordinal:
            parts.append(_section_part(by_ordinal[ordinal], len(parts) + 1))
    if code_example is not None:
        parts.append(
            Part(
                key=CODE_PART_KEY,
                label=CODE_SECTION_LABEL,
                number=len(parts) + 1,
                blocks=(code_example,),
            )
        )
    for ordinal in TRAILING_ORDINALS:
        if ordinal in by_ordinal:
            parts.append(_section_part(by_ordinal[ordinal], len(parts) + 1))
    return tuple(parts)


def build_toc(
    parts: tuple[Part, ...], threshold: int = TOC_THRESHOLD
) -> tuple[TocEntry, ...] | None:
    """Return one entry per part when there are more than ``threshold`` parts."""
    if len(parts) <= threshold:
        return None
    return tuple(TocEntry(anchor_key=anchor_for(part.key), label=part.label) for part in parts)


def plain_paragraphs(content: str) -> tuple[Block, ...]:
    """Split unstructured content into paragraphs on blank lines."""
    return tuple(
        Paragraph(text=parse_inline(chunk.strip()))
        for chunk in PARAGRAPH_BREAK.split(content)
        if chunk.strip()
    )


def parse_topic(
    content: str | None,
    code_example: str | None = None,
    code_language: str | None = None,
    *,
    toc_threshold: int = TOC_THRESHOLD,
) -> Document:
    """Parse topic content and an optional code example into a document.

    Parameters
    ----------
    content : str or None
        Raw topic content; ``None`` is treated as empty.
    code_example : str, optional
        Externally supplied code shown as its own part.
    code_language : str, optional
        Highlighter language for ``code_example``; defaults to ``"text"``.
    toc_threshold : int, optional
        Part count that must be exceeded before a table of contents is built.

    Returns
    -------
    Document
        The structured document, or the unstructured fallback when the content
        carries no section-1 marker. This function never raises for any
        string input.
    """
    text = content or ""
    code = build_code_block(code_example, code_language)
    if not is_structured(text):
        return Document(structured=False, blocks=plain_paragraphs(text), code_example=code)

    sections = extract_sections(text)
    parts = assemble_parts(sections, code)
    return Document(
        structured=True,
        sections=sections,
        parts=parts,
        code_example=code,
        toc=build_toc(parts, toc_threshold),
    )


__all__ = [
    "anchor_for",
    "assemble_parts",
    "build_code_block",
    "build_toc",
    "parse_topic",
    "plain_paragraphs",
    "section_blocks",
]
