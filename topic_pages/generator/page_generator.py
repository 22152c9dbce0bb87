"""High-level orchestration for learning topic page generation.

This module coordinates parsing each topic's content, rendering it with the
shared templates, and writing one HTML file per topic plus index pages for the
curriculum and each section. It exposes :class:`TopicPageGenerator`, which
consumes a :class:`~topic_pages.config.CurriculumConfig` and renders every
published section with :class:`HtmlTopicRenderer`.

Example
-------
>>> from pathlib import Path
>>> from topic_pages.config import load_curriculum
>>> from topic_pages.generator import TopicPageGenerator
>>> curriculum = load_curriculum(Path("config/learning.yaml"))  # doctest: +SKIP
>>> TopicPageGenerator(curriculum).run()  # doctest: +SKIP
[PosixPath('public/learning/index.html'), ...]
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path
from urllib.parse import quote

from markupsafe import Markup

from topic_pages.document import parse_topic
from topic_pages.generator.renderer import HtmlTopicRenderer

if typ.TYPE_CHECKING:
    from topic_pages.config import CurriculumConfig, LearningSectionConfig, TopicConfig

logger = logging.getLogger(__name__)

PLACEHOLDER_IMAGE_URL = "https://placehold.co/800x400/{color}/white?text={text}"
DEFAULT_IMAGE_COLOR = "6366f1"
SECTION_IMAGE_COLORS: dict[str, str] = {
    "how-to-learn": "4338ca",
    "competitive-programming": "1e3a8a",
    "react": "0369a1",
    "nodejs": "059669",
    "database-sql": "7c3aed",
    "cs-theory": "b45309",
    "data-analytics": "0d9488",
    "ai-ml": "a21caf",
    "system-design-devops": "475569",
    "security-testing": "be123c",
    "programming-languages": "6d28d9",
    "english-learning": "1d4ed8",
    "quantum-computing": "4338ca",
    "interview-preparation": "059669",
    "operating-systems-concurrency": "b45309",
    "computer-networks": "0d9488",
}


def topic_image_url(topic: TopicConfig, section_slug: str) -> str:
    """Return the topic image, or a placeholder coloured for the section."""
    if topic.image_url:
        return topic.image_url
    text = quote(topic.title[:40].replace("&", "and"), safe="")
    color = SECTION_IMAGE_COLORS.get(section_slug, DEFAULT_IMAGE_COLOR)
    return PLACEHOLDER_IMAGE_URL.format(color=color, text=text)


class TopicPageGenerator:
    """Parse topic content and emit themed HTML per topic."""

    def __init__(
        self,
        curriculum: CurriculumConfig,
        *,
        templates_dir: Path | None = None,
        output_dir: Path | None = None,
    ) -> None:
        """Initialize the generator with configuration and template context.

        Parameters
        ----------
        curriculum : CurriculumConfig
            Curriculum describing sections, topics, and rendering defaults.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package templates.
        output_dir : Path, optional
            Override for the HTML output directory; defaults to the curriculum's.
        """
        self.curriculum = curriculum
        self.output_dir = output_dir or curriculum.output_dir
        self.renderer = HtmlTopicRenderer(
            curriculum.pygments_style, templates_dir=templates_dir
        )
        self.page_template = self.renderer.env.get_template("topic_page.jinja")
        self.index_template = self.renderer.env.get_template("section_index.jinja")

    def run(self, section_slug: str | None = None) -> list[Path]:
        """Render published sections into HTML files on disk.

        Parameters
        ----------
        section_slug : str, optional
            Restrict generation to one section. The section is rendered even
            when it is not published.

        Returns
        -------
        list[Path]
            Paths to the generated HTML documents: the curriculum index first,
            then each section's index followed by its topics in order.

        Raises
        ------
        CurriculumConfigError
            Raised when ``section_slug`` names no configured section.
        """
        if section_slug:
            sections = [self.curriculum.get_section(section_slug)]
        else:
            sections = self.curriculum.published_sections()

        self.output_dir.mkdir(parents=True, exist_ok=True)
        written = [self._write(self.output_dir / "index.html", self.render_index())]
        for section in sections:
            section_dir = self.output_dir / section.slug
            section_dir.mkdir(parents=True, exist_ok=True)
            written.append(
                self._write(section_dir / "index.html", self.render_section_index(section))
            )
            for topic in section.topics:
                html = self.render_topic(section, topic)
                written.append(self._write(section_dir / f"{topic.id}.html", html))
        logger.info("Generated %d pages in %s", len(written), self.output_dir)
        return written

    def render_topic(self, section: LearningSectionConfig, topic: TopicConfig) -> str:
        """Return the full HTML page for ``topic`` within ``section``."""
        document = parse_topic(
            topic.content,
            topic.code_example,
            topic.code_language,
            toc_threshold=self.curriculum.toc_threshold,
        )
        if not document.structured and not document.is_empty:
            logger.debug("Topic %s has no section markers; rendering as prose", topic.id)
        previous, following = section.neighbours(topic.id)
        context = {
            "topic": topic,
            "section": section,
            "site_name": self.curriculum.site_name,
            "html_title": self._format_page_title(section, topic),
            "image_url": topic_image_url(topic, section.slug),
            "body_html": Markup(self.renderer.render(document)),
            "pygments_css": Markup(self.renderer.stylesheet),
            "previous": previous,
            "following": following,
        }
        return self.page_template.render(**context)

    def render_section_index(self, section: LearningSectionConfig) -> str:
        """Return the HTML listing the topics of ``section``."""
        return self.index_template.render(
            section=section,
            sections=[],
            site_name=self.curriculum.site_name,
            html_title=f"{section.title} - {self.curriculum.site_name}",
        )

    def render_index(self) -> str:
        """Return the HTML listing every published section."""
        return self.index_template.render(
            section=None,
            sections=self.curriculum.published_sections(),
            site_name=self.curriculum.site_name,
            html_title=self.curriculum.site_name,
        )

    def _format_page_title(
        self, section: LearningSectionConfig, topic: TopicConfig
    ) -> str:
        """Compose the HTML title from topic, section, and site name."""
        return f"{topic.title} | {section.title} - {self.curriculum.site_name}"

    @staticmethod
    def _write(path: Path, html: str) -> Path:
        """Write ``html`` to ``path`` with a trailing newline and return the path."""
        if not html.endswith("\n"):
            html += "\n"
        path.write_text(html, encoding="utf-8")
        return path


__all__ = ["TopicPageGenerator", "topic_image_url"]
