"""Render parsed topic documents into HTML fragments.

The renderer walks a :class:`~topic_pages.document.Document` with Jinja
macros and highlights code examples with Pygments. It only reads the document
model; it never reparses the raw content.
"""

from __future__ import annotations

import logging
import re
import typing as typ
from html import escape
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from topic_pages._constants import DEFAULT_CODE_LANGUAGE, EMPTY_TOPIC_HINT
from topic_pages.document import anchor_for

if typ.TYPE_CHECKING:
    from topic_pages.document import Document

logger = logging.getLogger(__name__)

CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')
DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


class HtmlTopicRenderer:
    """Render topic documents and code snippets with consistent styling."""

    def __init__(
        self, pygments_style: str = "monokai", templates_dir: Path | None = None
    ) -> None:
        """Initialize a renderer with a Pygments style and template directory.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"monokai"``.
        templates_dir : Path, optional
            Directory containing the Jinja templates; defaults to the package
            templates.
        """
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir or DEFAULT_TEMPLATES_DIR)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.globals.update(
            code_block=self.code_block,
            anchor_for=anchor_for,
            empty_topic_hint=EMPTY_TOPIC_HINT,
        )
        self._document_template = self.env.get_template("document.jinja")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def render(self, document: Document) -> str:
        """Render ``document`` into an HTML fragment.

        Parameters
        ----------
        document : Document
            Parsed topic, structured or unstructured.

        Returns
        -------
        str
            HTML containing the table of contents (when present) and the
            article body, or the empty-topic hint.
        """
        return self._document_template.render(document=document)

    def code_block(self, code: str, language: str | None = None) -> Markup:
        """Render ``code`` into highlighted HTML with a ``data-language`` attribute.

        Parameters
        ----------
        code : str
            Source snippet to highlight.
        language : str, optional
            Pygments lexer name; defaults to ``"text"`` when not provided or
            when the lexer lookup fails.
        """
        lang = language or DEFAULT_CODE_LANGUAGE
        try:
            lexer = get_lexer_by_name(lang)
        except ClassNotFound:
            logger.warning("No Pygments lexer for %r; rendering as plain text", lang)
            lexer = get_lexer_by_name(DEFAULT_CODE_LANGUAGE)
        html = highlight(code, lexer, self._formatter)
        return Markup(self._attach_language_attribute(html, lang))

    @staticmethod
    def _attach_language_attribute(html: str, language: str) -> str:
        """Add a single language attribute to an already highlighted block."""
        safe_lang = escape(language or DEFAULT_CODE_LANGUAGE, quote=True)

        def _repl(match: re.Match[str]) -> str:
            return f'<div class="codehilite" data-language="{safe_lang}">'

        return CODEHILITE_OPEN_TAG.sub(_repl, html, 1)


__all__ = ["CODEHILITE_OPEN_TAG", "DEFAULT_TEMPLATES_DIR", "HtmlTopicRenderer"]
