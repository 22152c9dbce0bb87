"""Cyclopts CLI entrypoint for rendering learning topic pages.

The ``topics`` console script defined here renders static HTML for every
topic in a curriculum file, validates curriculum files in CI, and dumps the
parsed document model of a single content file for debugging authored
content.

Examples
--------
Render every published section:

>>> from topic_pages.cli import main
>>> main()  # doctest: +SKIP

Render one section into a custom directory:

>>> from topic_pages.cli import app
>>> app(["render", "--section", "react", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

import json
import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_curriculum
from .document import parse_topic, to_data
from .generator import TopicPageGenerator

DEFAULT_CONFIG = Path("config/learning.yaml")

app = App(name="topics", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command(help="Render learning topic pages from a curriculum file.")
def render(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to curriculum config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    section: typ.Annotated[
        str | None, Parameter(help="Section slug", env_var="INPUT_SECTION")
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    verbose: bool = False,
) -> None:
    """Render topic pages for the requested curriculum.

    Parameters
    ----------
    config : Path, optional
        Path to the curriculum YAML file (overridable via ``INPUT_CONFIG``).
    section : str or None, optional
        Section slug to render; when ``None`` (default) every published
        section is rendered.
    output_dir : Path or None, optional
        Override the output directory configured in the curriculum.
    verbose : bool, optional
        Emit debug logging, including content data-quality warnings.

    Returns
    -------
    None
        Writes rendered pages and prints the generated paths.
    """
    _configure_logging(verbose)
    curriculum = load_curriculum(config)
    generator = TopicPageGenerator(curriculum, output_dir=output_dir)
    for path in generator.run(section):
        print(f"wrote {_format_path(path)}")


@app.command(help="Validate a curriculum file without rendering it.")
def validate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to curriculum config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Load ``config`` and report how many sections and topics it defines.

    Invalid files raise :class:`~topic_pages.config.CurriculumConfigError`
    listing every problem found.
    """
    _configure_logging(False)
    curriculum = load_curriculum(config)
    topics = sum(len(section.topics) for section in curriculum.sections)
    unstructured = [
        f"{section.slug}/{topic.id}"
        for section in curriculum.sections
        for topic in section.topics
        if topic.content.strip() and not parse_topic(topic.content).structured
    ]
    print(f"{len(curriculum.sections)} sections, {topics} topics")
    for key in unstructured:
        print(f"{key}: no section markers, renders as plain paragraphs")


@app.command(help="Print the parsed document model of a content file as JSON.")
def parse(
    content_file: Path,
    *,
    code_file: typ.Annotated[
        Path | None, Parameter(help="File holding the external code example")
    ] = None,
    language: typ.Annotated[
        str | None, Parameter(help="Language of the code example")
    ] = None,
) -> None:
    """Parse ``content_file`` and print its document as indented JSON."""
    content = content_file.read_text(encoding="utf-8")
    code = code_file.read_text(encoding="utf-8") if code_file else None
    document = parse_topic(content, code, language)
    print(json.dumps(to_data(document), indent=2, ensure_ascii=False))


def main() -> None:
    """Invoke the Cyclopts application that powers the ``topics`` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
