"""Unit tests for the inline tokenizer.

These tests cover bold, inline code, and link recognition, the conservative
link-scheme rules, verbatim handling of unmatched markup characters, and the
first-match-wins behaviour for overlapping markup.

Usage
-----
Run ``pytest tests/test_inline.py -v``. No fixtures are required.
"""

from __future__ import annotations

import pytest

from topic_pages.document import Bold, Code, Link, Text, parse_inline, tokenize_inline


def test_code_and_link_segments_in_order() -> None:
    """Mixed prose should split into ordered text, code, and link segments."""
    segments = tokenize_inline("Use `foo()` and see [docs](https://example.com).")
    assert segments == (
        Text("Use "),
        Code("foo()"),
        Text(" and see "),
        Link("docs", "https://example.com"),
        Text("."),
    ), f"unexpected segments {segments!r}"


def test_bold_segment() -> None:
    """Double asterisks wrap bold text."""
    assert tokenize_inline("a **b** c") == (Text("a "), Bold("b"), Text(" c"))


@pytest.mark.parametrize(
    "href",
    ["http://example.com", "https://example.com/a?b=c", "#section-react", "#"],
)
def test_accepted_link_targets(href: str) -> None:
    """Absolute http(s) URLs and fragments are recognized as links."""
    segments = tokenize_inline(f"[go]({href})")
    assert segments == (Link("go", href),), f"expected a link for {href!r}"


@pytest.mark.parametrize(
    "text",
    [
        "[docs](docs/intro.md)",
        "[docs](/absolute/path)",
        "[docs](mailto:someone@example.com)",
        "[docs](https://)",
        "[docs](https://example.com/a b)",
        "[docs] (https://example.com)",
        "[](https://example.com)",
    ],
)
def test_rejected_links_stay_literal(text: str) -> None:
    """Relative or malformed links are kept verbatim as text."""
    assert tokenize_inline(text) == (Text(text),), f"expected {text!r} to stay literal"


@pytest.mark.parametrize(
    "text",
    ["2 * 3 = 6", "a ** b", "****", "``", "an ` unmatched tick", "[open bracket", "**a*b**"],
)
def test_unmatched_markup_is_verbatim(text: str) -> None:
    """Markup characters that never close are emitted as text."""
    assert tokenize_inline(text) == (Text(text),)


def test_first_match_wins_without_nesting() -> None:
    """A link inside bold stays literal inside the bold segment."""
    assert tokenize_inline("**[a](#b)**") == (Bold("[a](#b)"),)


def test_link_label_is_not_tokenized() -> None:
    """Markup inside a link label is kept as the label's raw text."""
    assert tokenize_inline("[`x`](#x)") == (Link("`x`", "#x"),)


def test_bold_after_stray_asterisk() -> None:
    """A failed opener falls back one character and the scan continues."""
    assert tokenize_inline("***bold**") == (Text("*"), Bold("bold"))


def test_empty_text_has_no_segments() -> None:
    """Empty input produces no segments."""
    assert tokenize_inline("") == ()


def test_plain_concatenation_removes_only_markup() -> None:
    """Joining segment values reconstructs the text minus markup characters."""
    source = "Run `make` then read **all** of [the guide](#guide) * twice."
    text = parse_inline(source)
    assert text.source == source
    assert text.plain == "Run make then read all of the guide * twice."


def test_link_external_flag() -> None:
    """Only http(s) links are flagged as leaving the page."""
    assert Link("a", "https://x.dev").is_external
    assert not Link("a", "#top").is_external
