"""Parse and render multi-part learning topic articles.

This package turns the eight-part learning topic dialect into a structured
document model and renders it to static HTML. The CLI entry points used by
the ``topics`` console script live in :mod:`topic_pages.cli`.

Exports
-------
- ``parse_topic``: Parse topic content and an optional code example.
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from topic_pages import parse_topic
>>> parse_topic("**1. Learning flow:**\\nDo X first.").parts[0].label
'Learning flow'
"""

from __future__ import annotations

from .cli import app, main
from .document import parse_topic

__all__ = ["app", "main", "parse_topic"]
