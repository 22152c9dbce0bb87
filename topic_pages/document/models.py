"""Immutable dataclasses describing a parsed learning topic.

Every node is a frozen, slotted dataclass so two parses of the same input
compare equal. Each variant carries a ``kind`` class attribute that templates
and callers use to dispatch without ``isinstance`` chains.
"""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ


@dc.dataclass(frozen=True, slots=True)
class Text:
    """Plain text between recognized markup."""

    kind: typ.ClassVar[str] = "text"
    value: str


@dc.dataclass(frozen=True, slots=True)
class Bold:
    """Text wrapped in ``**`` markers."""

    kind: typ.ClassVar[str] = "bold"
    value: str


@dc.dataclass(frozen=True, slots=True)
class Code:
    """Text wrapped in single backticks."""

    kind: typ.ClassVar[str] = "code"
    value: str


@dc.dataclass(frozen=True, slots=True)
class Link:
    """A ``[label](href)`` link whose href is absolute http(s) or a fragment."""

    kind: typ.ClassVar[str] = "link"
    value: str
    href: str

    @property
    def is_external(self) -> bool:
        """Return True when the link leaves the page."""
        return self.href.lower().startswith(("http://", "https://"))


InlineSegment = Text | Bold | Code | Link


@dc.dataclass(frozen=True, slots=True)
class InlineText:
    """A textual leaf: the source span and its inline segments.

    Attributes
    ----------
    source : str
        Text exactly as authored, markup included.
    segments : tuple[InlineSegment, ...]
        Ordered, non-overlapping segments produced by the inline tokenizer.
    """

    source: str
    segments: tuple[InlineSegment, ...]

    @property
    def plain(self) -> str:
        """Return the text with recognized markup removed."""
        return "".join(segment.value for segment in self.segments)


class CalloutKind(enum.Enum):
    """Highlighted aside flavours recognized at the start of a chunk."""

    TIP = "tip"
    NOTE = "note"
    IMPORTANT = "important"

    @property
    def label(self) -> str:
        """Return the display label, e.g. ``"Tip"``."""
        return self.value.capitalize()


@dc.dataclass(frozen=True, slots=True)
class Paragraph:
    """A run of prose."""

    kind: typ.ClassVar[str] = "paragraph"
    text: InlineText


@dc.dataclass(frozen=True, slots=True)
class ListItem:
    """Top-level bullet with at most one level of child bullets."""

    text: InlineText
    children: tuple[InlineText, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class BulletList:
    """Unordered list, one nesting level."""

    kind: typ.ClassVar[str] = "bullet_list"
    items: tuple[ListItem, ...]


@dc.dataclass(frozen=True, slots=True)
class NumberedList:
    """Ordered list; source numbering is discarded and regenerated on render."""

    kind: typ.ClassVar[str] = "numbered_list"
    items: tuple[InlineText, ...]


@dc.dataclass(frozen=True, slots=True)
class Callout:
    """Tip, note, or important aside."""

    kind: typ.ClassVar[str] = "callout"
    callout_kind: CalloutKind
    paragraphs: tuple[InlineText, ...]


@dc.dataclass(frozen=True, slots=True)
class CodeBlock:
    """Verbatim code with a highlighter language name."""

    kind: typ.ClassVar[str] = "code_block"
    code: str
    language: str


@dc.dataclass(frozen=True, slots=True)
class Placeholder:
    """Marker for a section that was authored with an empty body."""

    kind: typ.ClassVar[str] = "placeholder"
    message: str


@dc.dataclass(frozen=True, slots=True)
class ExampleSplit:
    """Section 7 body split into labelled problem and solution panels."""

    kind: typ.ClassVar[str] = "example_split"
    problem: tuple[Block, ...]
    solution: tuple[Block, ...]


Block = (
    Paragraph
    | BulletList
    | NumberedList
    | Callout
    | ExampleSplit
    | CodeBlock
    | Placeholder
)


@dc.dataclass(frozen=True, slots=True)
class Section:
    """One numbered division of a topic as found in the raw content.

    Attributes
    ----------
    ordinal : int
        Canonical section number in ``1..8``.
    label : str
        Display label resolved from the fixed label table.
    title : str
        Title the author wrote in the marker; informational only.
    body : str
        Raw body text with surrounding whitespace removed.
    """

    ordinal: int
    label: str
    title: str
    body: str


@dc.dataclass(frozen=True, slots=True)
class Part:
    """One entry of the assembled document in display order.

    Attributes
    ----------
    key : str
        Stable key, ``"s<N>"`` for sections and ``"code"`` for the code example.
    label : str
        Heading text.
    number : int
        1-based display position.
    blocks : tuple[Block, ...]
        Classified content of the part.
    """

    key: str
    label: str
    number: int
    blocks: tuple[Block, ...]


@dc.dataclass(frozen=True, slots=True)
class TocEntry:
    """Table-of-contents link to a part heading."""

    anchor_key: str
    label: str


@dc.dataclass(frozen=True, slots=True)
class Document:
    """Everything a renderer needs for one topic.

    Attributes
    ----------
    structured : bool
        False when the content had no section-1 marker and fell back to
        plain paragraphs.
    sections : tuple[Section, ...]
        Extracted sections in ordinal order; gaps allowed.
    parts : tuple[Part, ...]
        Sections and code example in display order (structured content only).
    blocks : tuple[Block, ...]
        Fallback paragraphs for unstructured content.
    code_example : CodeBlock | None
        External code example, when supplied.
    toc : tuple[TocEntry, ...] | None
        Table of contents, present only past the size threshold.
    """

    structured: bool
    sections: tuple[Section, ...] = ()
    parts: tuple[Part, ...] = ()
    blocks: tuple[Block, ...] = ()
    code_example: CodeBlock | None = None
    toc: tuple[TocEntry, ...] | None = None

    @property
    def is_empty(self) -> bool:
        """Return True when there is nothing to render."""
        return not (self.parts or self.blocks or self.code_example)


__all__ = [
    "Block",
    "Bold",
    "BulletList",
    "Callout",
    "CalloutKind",
    "Code",
    "CodeBlock",
    "Document",
    "ExampleSplit",
    "InlineSegment",
    "InlineText",
    "Link",
    "ListItem",
    "NumberedList",
    "Paragraph",
    "Part",
    "Placeholder",
    "Section",
    "Text",
    "TocEntry",
]
