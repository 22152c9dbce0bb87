"""Load and validate curriculum YAML for topic page builds.

This subpackage parses the curriculum file, validates section slugs, topic ids
and image keys, serializes structured ``content_blocks`` into the eight-part
content string, and produces typed dataclasses (:class:`CurriculumConfig`,
:class:`LearningSectionConfig`, :class:`TopicConfig`) that the page generator
consumes. The primary entry point is :func:`load_curriculum`.

Examples
--------
>>> from pathlib import Path
>>> from topic_pages.config import load_curriculum
>>> curriculum = load_curriculum(Path("config/learning.yaml"))  # doctest: +SKIP
>>> curriculum.get_section("react").topics[0].id  # doctest: +SKIP
'hooks-basics'
"""

from .authoring import TopicContentBlocks, serialize_content_blocks
from .loader import load_curriculum
from .models import (
    CurriculumConfig,
    CurriculumConfigError,
    LearningSectionConfig,
    TopicConfig,
)

__all__ = [
    "CurriculumConfig",
    "CurriculumConfigError",
    "LearningSectionConfig",
    "TopicConfig",
    "TopicContentBlocks",
    "load_curriculum",
    "serialize_content_blocks",
]
