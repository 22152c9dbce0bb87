"""Unit tests for the section extractor.

These tests exercise marker recognition, body slicing, ordinal ordering,
last-wins duplicates, and the treatment of out-of-range markers.
"""

from __future__ import annotations

import pytest

from topic_pages._constants import SECTION_LABELS
from topic_pages.document import extract_sections, is_structured


def test_two_sections_with_bodies() -> None:
    """Bodies run until the next marker and are stripped."""
    sections = extract_sections("**1. Learning flow:**\nDo X first.\n\n**2. Material:**\nRead Y.")
    assert [(s.ordinal, s.body) for s in sections] == [(1, "Do X first."), (2, "Read Y.")]


def test_labels_come_from_table_not_author_title() -> None:
    """The display label ignores the author's title text."""
    (section,) = extract_sections("**1. My own words:**\nBody")
    assert section.label == SECTION_LABELS[1]
    assert section.title == "My own words"


@pytest.mark.parametrize(
    "marker",
    ["**3. Explanation:**", "**3. Explanation**:", "**3. Explanation:**:", "**3.Explanation:**"],
)
def test_marker_colon_variants(marker: str) -> None:
    """The colon may sit inside the bold, after it, or both."""
    sections = extract_sections(f"{marker}\nWhy it works.")
    assert [(s.ordinal, s.body) for s in sections] == [(3, "Why it works.")]


def test_sections_sorted_by_ordinal() -> None:
    """Sections are returned in ordinal order whatever the authored order."""
    content = "**3. C:**\nthree\n**1. A:**\none\n**2. B:**\ntwo"
    assert [s.ordinal for s in extract_sections(content)] == [1, 2, 3]


def test_duplicate_ordinal_last_wins() -> None:
    """A repeated ordinal keeps the later body."""
    content = "**1. A:**\nfirst\n**2. B:**\nmiddle\n**1. A again:**\nsecond"
    sections = extract_sections(content)
    assert [(s.ordinal, s.body) for s in sections] == [(1, "second"), (2, "middle")]


def test_out_of_range_marker_folds_into_previous_body() -> None:
    """Markers numbered outside 1..8 are body text of the open section."""
    content = "**8. Extra:**\nTips.\n\n**9. Bonus:**\nMore tips.\n**0. Zero:**\nEnd."
    (section,) = extract_sections(content)
    assert section.ordinal == 8
    assert section.body == "Tips.\n\n**9. Bonus:**\nMore tips.\n**0. Zero:**\nEnd."


def test_out_of_range_marker_before_any_section_is_dropped() -> None:
    """Text ahead of the first real marker is discarded."""
    content = "**12. Bogus:**\nignored\n**1. Flow:**\nkept"
    sections = extract_sections(content)
    assert [(s.ordinal, s.body) for s in sections] == [(1, "kept")]


def test_empty_body_is_kept() -> None:
    """A marker followed by nothing still yields a section with an empty body."""
    sections = extract_sections("**1. Flow:**\n\n**2. Material:**\n   \n")
    assert [(s.ordinal, s.body) for s in sections] == [(1, ""), (2, "")]


def test_body_preserves_inner_text_verbatim() -> None:
    """Inner line breaks, indentation, and markup survive extraction."""
    body = "- a\n  - a1\n\n**Tip:** use `x`"
    (section,) = extract_sections(f"**2. Material:**\n{body}\n")
    assert section.body == body


def test_indented_marker_is_not_a_boundary() -> None:
    """Markers must start at the beginning of a line."""
    (section,) = extract_sections("**1. Flow:**\nStart\n  **2. Material:**\nstill flow")
    assert section.body == "Start\n  **2. Material:**\nstill flow"


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        ("**1. Learning flow:**\nBody", True),
        ("Intro\n**1. Learning flow**:\nBody", True),
        ("**2. Material:**\nBody", False),
        ("Plain prose only.", False),
        ("Inline **1. Flow:** marker", False),
        ("", False),
    ],
)
def test_is_structured(content: str, expected: bool) -> None:
    """Only a section-1 marker at a line start makes content structured."""
    assert is_structured(content) is expected


def test_no_markers_yields_no_sections() -> None:
    """Content without markers has no sections."""
    assert extract_sections("just text\n\nmore text") == ()


def test_oversized_marker_number_is_body_text() -> None:
    """A marker whose number is too long to be an ordinal stays in the body."""
    marker = "**" + "9" * 5000 + ". Big:**"
    (section,) = extract_sections(f"**1. Flow:**\nA\n\n{marker}\nB")
    assert section.ordinal == 1
    assert section.body == f"A\n\n{marker}\nB"
    assert not is_structured("**" + "1" * 5000 + ". Flow:**\nBody")
