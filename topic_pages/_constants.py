"""Common literal values used across topic_pages.

These constants keep section labels, anchors, and placeholder copy centralized
so the parser, templates, and tests can import the same values without
drifting. Intended for internal use within the topic_pages package.

Examples
--------
>>> from topic_pages import _constants
>>> _constants.SECTION_LABELS[7]
'Example problem & solution'
>>> _constants.ANCHOR_TEMPLATE.format(key="s1")
'detail-heading-s1'
"""

SECTION_LABELS: dict[int, str] = {
    1: "Learning flow",
    2: "Material",
    3: "Explanation",
    4: "Application",
    5: "How to implement",
    6: "Logic & how the code works",
    7: "Example problem & solution",
    8: "Additional information",
}
FIRST_ORDINAL = 1
LAST_ORDINAL = 8
# Sections rendered before the external code example; the rest follow it.
LEADING_ORDINALS = (1, 2, 3, 4, 5, 6)
TRAILING_ORDINALS = (7, 8)
EXAMPLE_ORDINAL = 7

CODE_SECTION_LABEL = "Code example"
CODE_PART_KEY = "code"
DEFAULT_CODE_LANGUAGE = "text"
EMPTY_SECTION_HINT = "No content for this section"
EMPTY_TOPIC_HINT = "No content for this topic yet."

ANCHOR_TEMPLATE = "detail-heading-{key}"
TOC_THRESHOLD = 2
