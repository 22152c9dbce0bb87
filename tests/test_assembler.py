"""Unit tests for document assembly and table-of-contents generation.

These tests cover the fixed display order around the external code example,
skipped versus empty sections, section 7 example splitting, the TOC threshold,
the unstructured fallback, and parse idempotence.
"""

from __future__ import annotations

import json

import pytest

from topic_pages._constants import EMPTY_SECTION_HINT
from topic_pages.document import (
    CodeBlock,
    ExampleSplit,
    Paragraph,
    Placeholder,
    TocEntry,
    parse_topic,
    to_data,
)


def _content(*ordinals: int, body: str = "Body text.") -> str:
    return "\n\n".join(f"**{n}. Title {n}:**\n{body}" for n in ordinals)


def test_sections_then_code_example_with_toc() -> None:
    """Sections 1-4 plus a code example assemble into five parts with a TOC."""
    document = parse_topic(_content(1, 2, 3, 4), "print('hi')", "python")
    assert document.structured
    assert [part.key for part in document.parts] == ["s1", "s2", "s3", "s4", "code"]
    assert [part.number for part in document.parts] == [1, 2, 3, 4, 5]
    assert document.parts[-1].blocks == (CodeBlock(code="print('hi')", language="python"),)
    assert document.toc is not None
    assert len(document.toc) == 5, f"expected five TOC entries, got {document.toc!r}"
    assert document.toc[-1] == TocEntry(anchor_key="detail-heading-code", label="Code example")


def test_code_example_sits_between_sections_six_and_seven() -> None:
    """The code example follows section 6 and precedes sections 7 and 8."""
    document = parse_topic(_content(8, 7, 6, 1), "x = 1")
    assert [part.key for part in document.parts] == ["s1", "s6", "code", "s7", "s8"]
    assert [part.label for part in document.parts][2] == "Code example"
    assert document.parts[2].blocks[0].language == "text"


def test_toc_requires_more_than_two_parts() -> None:
    """Two parts produce no TOC; three parts do."""
    assert parse_topic(_content(1, 2)).toc is None
    assert parse_topic(_content(1), "code").toc is None
    toc = parse_topic(_content(1, 2), "code").toc
    assert toc is not None
    assert [entry.anchor_key for entry in toc] == [
        "detail-heading-s1",
        "detail-heading-s2",
        "detail-heading-code",
    ]


def test_toc_threshold_is_configurable() -> None:
    """Raising the threshold suppresses the TOC."""
    assert parse_topic(_content(1, 2, 3), toc_threshold=3).toc is None


def test_missing_sections_are_skipped() -> None:
    """Absent ordinals leave no placeholder parts."""
    document = parse_topic(_content(1, 5))
    assert [part.label for part in document.parts] == ["Learning flow", "How to implement"]


def test_empty_section_gets_placeholder() -> None:
    """An authored but empty section renders a placeholder."""
    document = parse_topic("**1. Flow:**\n\n**2. Material:**\nText")
    assert document.parts[0].blocks == (Placeholder(message=EMPTY_SECTION_HINT),)
    assert isinstance(document.parts[1].blocks[0], Paragraph)


def test_section_seven_uses_example_split() -> None:
    """Only section 7 splits Problem and Solution panels."""
    body = "Problem: compute sum.\nSolution: iterate and add."
    document = parse_topic(f"**1. Flow:**\nGo.\n\n**7. Example:**\n{body}\n\n**3. E:**\n{body}")
    by_key = {part.key: part for part in document.parts}
    assert isinstance(by_key["s7"].blocks[0], ExampleSplit)
    assert isinstance(by_key["s3"].blocks[0], Paragraph)


def test_unstructured_fallback_keeps_all_text() -> None:
    """Content without a section-1 marker falls back to plain paragraphs."""
    content = "**2. Material:**\nFirst **bold** para.\n\n\nSecond [link](#x) para."
    document = parse_topic(content, "code()", "js")
    assert not document.structured
    assert document.parts == ()
    assert document.toc is None
    assert [block.text.plain for block in document.blocks] == [
        "2. Material:\nFirst bold para.",
        "Second link para.",
    ]
    assert document.code_example == CodeBlock(code="code()", language="js")


def test_unstructured_fallback_preserves_non_whitespace_characters() -> None:
    """The fallback drops only whitespace between paragraphs."""
    content = "  alpha beta\n\n\tgamma  \n \ndelta"
    document = parse_topic(content)
    joined = "".join(block.text.source for block in document.blocks)
    assert "".join(joined.split()) == "".join(content.split())


@pytest.mark.parametrize("content", [None, "", "   \n\n  "])
def test_empty_input_is_empty_document(content: str | None) -> None:
    """Empty content without code yields an empty document."""
    document = parse_topic(content)
    assert document.is_empty
    assert not document.structured


def test_blank_code_example_is_ignored() -> None:
    """Whitespace-only code examples are treated as absent."""
    document = parse_topic(_content(1, 2, 3), "   \n")
    assert document.code_example is None
    assert [part.key for part in document.parts] == ["s1", "s2", "s3"]


def test_code_only_topic_is_not_empty() -> None:
    """A topic with just a code example still renders."""
    document = parse_topic("", "fn main() {}", "rust")
    assert not document.is_empty
    assert document.blocks == ()


def test_parse_is_idempotent() -> None:
    """Parsing the same input twice yields structurally equal documents."""
    content = _content(1, 2, 7, body="- a\n  - a1\n\n**Tip:** `x`\n\nProblem: p\nSolution: s")
    assert parse_topic(content, "c", "c") == parse_topic(content, "c", "c")


def test_document_dumps_to_json() -> None:
    """The document model converts to JSON-ready data with kind tags."""
    data = to_data(parse_topic("**1. Flow:**\n**Note:** careful", "x"))
    text = json.dumps(data)
    assert data["parts"][0]["blocks"][0]["kind"] == "callout"
    assert data["parts"][0]["blocks"][0]["callout_kind"] == "note"
    assert '"kind": "code_block"' in text


def test_inline_steps_split_only_in_learning_flow() -> None:
    """One-line ``(1) a (2) b`` steps are split in section 1 only."""
    steps = "(1) Read chapter (2) pages then (3) quiz"
    document = parse_topic(f"**1. Flow:**\n{steps}\n\n**2. Material:**\n{steps}")
    flow, material = (part.blocks[0] for part in document.parts)
    assert [item.source for item in flow.items] == ["Read chapter", "pages then", "quiz"]
    assert [item.source for item in material.items] == [steps.removeprefix("(1) ")]


def test_oversized_numbers_never_raise() -> None:
    """Huge section and list numbers degrade to text instead of failing."""
    content = "**1. Flow:**\n(" + "1" * 5000 + ") x\n\n**" + "9" * 5000 + ". Big:**\nB"
    document = parse_topic(content)
    assert [part.key for part in document.parts] == ["s1"]
    assert [block.kind for block in document.parts[0].blocks] == ["paragraph", "paragraph"]
