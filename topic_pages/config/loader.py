"""Load curriculum YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from topic_pages._constants import TOC_THRESHOLD

from .authoring import build_content_blocks, serialize_content_blocks
from .helpers import _as_int, _optional_str, _validate_image_keys, _validate_slugs
from .models import (
    CurriculumConfig,
    CurriculumConfigError,
    LearningSectionConfig,
    TopicConfig,
)


def load_curriculum(path: Path) -> CurriculumConfig:
    """Load the YAML file describing learning sections and their topics.

    Parameters
    ----------
    path : Path
        Filesystem path to the curriculum YAML file.

    Returns
    -------
    CurriculumConfig
        Parsed configuration with sections and topics sorted by ``order``.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    CurriculumConfigError
        If no sections are defined, or slugs, topic ids, image keys, or
        content fields are invalid. Every problem found is listed in the
        message.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from topic_pages.config import load_curriculum
    >>> curriculum = load_curriculum(Path("config/learning.yaml"))  # doctest: +SKIP
    >>> [section.slug for section in curriculum.sections][:1]  # doctest: +SKIP
    ['how-to-learn']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults", {}) or {}
    images = {str(key): str(value) for key, value in (raw.get("images") or {}).items()}

    sections_raw = raw.get("sections") or []
    if not sections_raw:
        msg = "No sections defined in curriculum configuration."
        raise CurriculumConfigError(msg)
    if not isinstance(sections_raw, list) or not all(
        isinstance(section, dict) for section in sections_raw
    ):
        msg = "'sections' must be a list of mappings."
        raise CurriculumConfigError(msg)

    errors = _validate_slugs(sections_raw) + _validate_image_keys(sections_raw, images)
    if errors:
        msg = "Curriculum validation failed:\n" + "\n".join(errors)
        raise CurriculumConfigError(msg)

    sections = [_build_section(payload, images) for payload in sections_raw]
    sections.sort(key=lambda section: section.order)
    return CurriculumConfig(
        sections=sections,
        output_dir=Path(defaults.get("output_dir", "public/learning")),
        pygments_style=defaults.get("pygments_style", "monokai"),
        site_name=defaults.get("site_name", "Learning"),
        toc_threshold=_as_int(defaults.get("toc_threshold"), TOC_THRESHOLD),
    )


def _build_section(
    payload: typ.Mapping[str, typ.Any], images: typ.Mapping[str, str]
) -> LearningSectionConfig:
    """Build a LearningSectionConfig, sorting its topics by order."""
    slug = str(payload["slug"]).strip()
    topics = [
        _build_topic(topic, images, section_slug=slug)
        for topic in payload.get("topics") or []
    ]
    topics.sort(key=lambda topic: topic.order)
    return LearningSectionConfig(
        title=str(payload.get("title") or slug.replace("-", " ").title()),
        slug=slug,
        description=str(payload.get("description") or ""),
        order=_as_int(payload.get("order")),
        published=bool(payload.get("published", True)),
        topics=topics,
    )


def _build_topic(
    payload: typ.Mapping[str, typ.Any],
    images: typ.Mapping[str, str],
    *,
    section_slug: str,
) -> TopicConfig:
    """Build a TopicConfig, serializing ``content_blocks`` when supplied."""
    topic_id = str(payload["id"]).strip()
    where = f"Topic '{section_slug}/{topic_id}'"
    content = payload.get("content")
    blocks = payload.get("content_blocks")
    if content is not None and blocks is not None:
        msg = f"{where}: use either 'content' or 'content_blocks', not both."
        raise CurriculumConfigError(msg)
    if isinstance(blocks, dict):
        content = serialize_content_blocks(build_content_blocks(blocks, where=where))
    elif blocks is not None:
        msg = f"{where}: 'content_blocks' must be a mapping."
        raise CurriculumConfigError(msg)

    code_example = payload.get("code_example")
    image_url = _optional_str(payload.get("image_url"))
    image_key = payload.get("image_key")
    if image_url is None and image_key is not None:
        image_url = images.get(image_key)

    return TopicConfig(
        id=topic_id,
        title=str(payload.get("title") or topic_id),
        description=str(payload.get("description") or ""),
        order=_as_int(payload.get("order")),
        content=str(content or ""),
        code_example=None if code_example is None else str(code_example),
        code_language=_optional_str(payload.get("code_language")),
        image_url=image_url,
    )


__all__ = ["load_curriculum"]
