"""Classify blank-line-delimited chunks into typed blocks.

A section body is lexed once, cut into chunks at blank lines, and each chunk
is parsed on its own. The first line decides callouts; otherwise the chunk is
a bullet list, a numbered list, or a paragraph depending on whether every line
carries the matching marker. Section 7 bodies may additionally be split into
problem and solution panels by :func:`split_example`.

Example
-------
>>> from topic_pages.document.blocks import parse_blocks
>>> [block.kind for block in parse_blocks("Intro\\n\\n- a\\n  - a1\\n- b")]
['paragraph', 'bullet_list']
"""

from __future__ import annotations

import logging
import re

from .inline import parse_inline
from .lexer import Line, LineKind, join_raw, scan_lines, split_chunks
from .models import (
    Block,
    BulletList,
    Callout,
    CalloutKind,
    ExampleSplit,
    InlineText,
    ListItem,
    NumberedList,
    Paragraph,
)

logger = logging.getLogger(__name__)

CHILD_INDENT = 2
PROBLEM_MARKER = "Problem:"
SOLUTION_MARKER = "Solution:"
INLINE_STEP_PATTERN = re.compile(r"\s\((\d{1,9})\)\s+")
PARAGRAPH_BREAK = re.compile(r"\n\s*\n")


def normalize_bullets(lines: list[Line]) -> tuple[ListItem, ...]:
    """Fold bullet lines into top-level items with one level of children.

    A line indented by two or more whitespace characters belongs to the most
    recent top-level item. Child lines seen before any top-level item are
    dropped and logged.
    """
    items: list[tuple[InlineText, list[InlineText]]] = []
    for line in lines:
        if line.kind is not LineKind.BULLET:
            continue
        text = parse_inline(line.content)
        if line.indent < CHILD_INDENT:
            items.append((text, []))
        elif items:
            items[-1][1].append(text)
        else:
            logger.warning("Dropping nested bullet without a parent: %r", line.raw)
    return tuple(ListItem(text=text, children=tuple(children)) for text, children in items)


def _split_inline_steps(content: str, first: int) -> list[str]:
    """Split ``(1) a (2) b`` runs authored on a single line into items.

    Only markers that count up by one from ``first`` split the line, so a
    stray parenthesised number inside prose stays put.
    """
    steps: list[str] = []
    expected = first + 1
    cursor = 0
    for match in INLINE_STEP_PATTERN.finditer(content):
        if int(match.group(1)) != expected:
            continue
        steps.append(content[cursor : match.start()].strip())
        cursor = match.end()
        expected += 1
    steps.append(content[cursor:].strip())
    return [step for step in steps if step]


def _numbered_items(lines: list[Line], *, inline_steps: bool) -> tuple[InlineText, ...]:
    items: list[InlineText] = []
    for line in lines:
        if inline_steps and line.title == "paren" and line.ordinal is not None:
            texts = _split_inline_steps(line.content, line.ordinal)
        else:
            texts = [line.content]
        items.extend(parse_inline(text) for text in texts)
    return tuple(items)


def _callout(lines: list[Line]) -> Callout:
    opener = lines[0]
    body = "\n".join([opener.content, *(line.raw for line in lines[1:])]).strip()
    paragraphs = tuple(
        parse_inline(part.strip()) for part in PARAGRAPH_BREAK.split(body) if part.strip()
    )
    return Callout(callout_kind=CalloutKind(opener.title), paragraphs=paragraphs)


def classify_chunk(lines: list[Line], *, inline_steps: bool = False) -> Block:
    """Return the block for one non-empty chunk; the first matching rule wins.

    With ``inline_steps`` a numbered line such as ``(1) a (2) b`` is split
    into one item per counted marker.
    """
    if lines[0].kind is LineKind.CALLOUT:
        return _callout(lines)
    if all(line.kind is LineKind.BULLET for line in lines):
        return BulletList(items=normalize_bullets(lines))
    if all(line.kind is LineKind.NUMBERED for line in lines):
        return NumberedList(items=_numbered_items(lines, inline_steps=inline_steps))
    return Paragraph(text=parse_inline(join_raw(lines).strip()))


def parse_blocks(body: str, *, inline_steps: bool = False) -> tuple[Block, ...]:
    """Parse a section body into blocks, one per blank-line-delimited chunk."""
    return tuple(
        classify_chunk(chunk, inline_steps=inline_steps)
        for chunk in split_chunks(scan_lines(body))
    )


def _find_split_point(body: str, problem_at: int) -> int | None:
    """Return the offset of the ``Solution:`` marker that ends the problem."""
    anchored = body.find("\n" + SOLUTION_MARKER, problem_at)
    if anchored != -1:
        return anchored + 1
    search_from = problem_at + len(PROBLEM_MARKER)
    while True:
        found = body.find(SOLUTION_MARKER, search_from)
        if found == -1:
            return None
        if found > 0 and body[found - 1].isspace():
            return found
        search_from = found + 1


def split_example(body: str) -> tuple[Block, ...]:
    """Parse a section 7 body, splitting problem and solution when marked.

    Parameters
    ----------
    body : str
        Raw body of the example section.

    Returns
    -------
    tuple[Block, ...]
        A single :class:`ExampleSplit` when a ``Problem:`` marker is followed
        by a ``Solution:`` marker at a line start or after whitespace;
        otherwise the plain blocks of ``body``.
    """
    problem_at = body.find(PROBLEM_MARKER)
    if problem_at == -1 or body.find(SOLUTION_MARKER, problem_at) == -1:
        return parse_blocks(body)
    split_at = _find_split_point(body, problem_at)
    if split_at is None:
        logger.debug("Example markers present but no split point found")
        return parse_blocks(body)

    problem = body[:split_at].strip()
    problem = problem.removeprefix(PROBLEM_MARKER).strip()
    solution = body[split_at:].removeprefix(SOLUTION_MARKER).strip()
    return (ExampleSplit(problem=parse_blocks(problem), solution=parse_blocks(solution)),)


__all__ = [
    "classify_chunk",
    "normalize_bullets",
    "parse_blocks",
    "split_example",
]
