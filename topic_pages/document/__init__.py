"""Parse learning topic content into a structured document model.

The pipeline runs one way: raw content is lexed into classified lines, cut
into numbered sections, each section body is classified into blocks, prose
leaves are tokenized for inline markup, and the assembler orders everything
for display.

Examples
--------
>>> from topic_pages.document import parse_topic
>>> document = parse_topic("Just prose.")
>>> document.structured
False
"""

from .assembler import anchor_for, parse_topic
from .blocks import normalize_bullets, parse_blocks, split_example
from .dump import to_data
from .inline import parse_inline, tokenize_inline
from .models import (
    Block,
    Bold,
    BulletList,
    Callout,
    CalloutKind,
    Code,
    CodeBlock,
    Document,
    ExampleSplit,
    InlineSegment,
    InlineText,
    Link,
    ListItem,
    NumberedList,
    Paragraph,
    Part,
    Placeholder,
    Section,
    Text,
    TocEntry,
)
from .sections import extract_sections, is_structured

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
    "anchor_for",
    "extract_sections",
    "is_structured",
    "normalize_bullets",
    "parse_blocks",
    "parse_inline",
    "parse_topic",
    "split_example",
    "to_data",
    "tokenize_inline",
]
