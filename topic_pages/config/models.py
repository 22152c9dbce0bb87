"""Typed dataclasses describing a learning curriculum configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from topic_pages._constants import TOC_THRESHOLD


class CurriculumConfigError(ValueError):
    """Raised when the curriculum configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class TopicConfig:
    """A single learning topic and its raw content."""

    id: str
    title: str
    description: str
    order: int
    content: str
    code_example: str | None = None
    code_language: str | None = None
    image_url: str | None = None


@dc.dataclass(slots=True)
class LearningSectionConfig:
    """A group of topics shown together, e.g. ``competitive-programming``."""

    title: str
    slug: str
    description: str
    order: int
    published: bool
    topics: list[TopicConfig] = dc.field(default_factory=list)

    def neighbours(self, topic_id: str) -> tuple[TopicConfig | None, TopicConfig | None]:
        """Return the topics before and after ``topic_id`` by order."""
        ids = [topic.id for topic in self.topics]
        if topic_id not in ids:
            return None, None
        idx = ids.index(topic_id)
        previous = self.topics[idx - 1] if idx > 0 else None
        following = self.topics[idx + 1] if idx + 1 < len(self.topics) else None
        return previous, following


@dc.dataclass(slots=True)
class CurriculumConfig:
    """Root configuration for generating topic pages."""

    sections: list[LearningSectionConfig]
    output_dir: Path = Path("public/learning")
    pygments_style: str = "monokai"
    site_name: str = "Learning"
    toc_threshold: int = TOC_THRESHOLD

    def published_sections(self) -> list[LearningSectionConfig]:
        """Return sections flagged as published, in order."""
        return [section for section in self.sections if section.published]

    def get_section(self, slug: str) -> LearningSectionConfig:
        """Return the section identified by ``slug``.

        Raises
        ------
        CurriculumConfigError
            If no section uses ``slug``.
        """
        for section in self.sections:
            if section.slug == slug:
                return section
        known = ", ".join(section.slug for section in self.sections)
        msg = f"Unknown section '{slug}'. Known sections: {known}"
        raise CurriculumConfigError(msg)


__all__ = [
    "CurriculumConfig",
    "CurriculumConfigError",
    "LearningSectionConfig",
    "TopicConfig",
]
