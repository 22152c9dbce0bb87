"""Utility helpers shared by the curriculum configuration loader."""

from __future__ import annotations

import re
import typing as typ

KEBAB_PATTERN = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _as_int(value: object, default: int = 0) -> int:
    """Return ``value`` as an int, falling back to ``default``."""
    match value:
        case bool():
            return default
        case int():
            return value
        case str() as text if text.strip().lstrip("-").isdigit():
            return int(text.strip())
        case _:
            return default


def _is_kebab(value: str) -> bool:
    return bool(KEBAB_PATTERN.match(value))


def _validate_slugs(sections: typ.Sequence[typ.Mapping[str, typ.Any]]) -> list[str]:
    """Return error messages for missing or malformed slugs and topic ids."""
    errors: list[str] = []
    seen_ids: set[str] = set()
    for s_idx, section in enumerate(sections):
        title = section.get("title", "")
        slug = str(section.get("slug") or "").strip()
        if not slug:
            errors.append(f'Section[{s_idx}] "{title}" has empty slug')
        elif not _is_kebab(slug):
            errors.append(
                f'Section[{s_idx}] "{title}" slug "{slug}" must be kebab-case '
                "(e.g. how-to-learn)"
            )
        for t_idx, topic in enumerate(section.get("topics") or []):
            if not isinstance(topic, dict):
                errors.append(f'Section "{title}" topic[{t_idx}] must be a mapping')
                continue
            topic_title = topic.get("title", "")
            topic_id = str(topic.get("id") or "").strip()
            if not topic_id:
                errors.append(f'Section "{title}" topic[{t_idx}] "{topic_title}" has empty id')
            elif not _is_kebab(topic_id):
                errors.append(
                    f'Section "{title}" topic "{topic_title}" id "{topic_id}" must be '
                    "kebab-case (e.g. event-loop-and-async)"
                )
            elif topic_id in seen_ids:
                errors.append(f'Topic id "{topic_id}" is used more than once')
            seen_ids.add(topic_id)
    return errors


def _validate_image_keys(
    sections: typ.Sequence[typ.Mapping[str, typ.Any]], images: typ.Mapping[str, str]
) -> list[str]:
    """Return error messages for topics whose ``image_key`` is not in ``images``."""
    errors: list[str] = []
    for section in sections:
        for topic in section.get("topics") or []:
            if not isinstance(topic, dict):
                continue
            key = topic.get("image_key")
            if key is not None and key not in images:
                known = ", ".join(images)
                errors.append(
                    f'Section "{section.get("title", "")}" topic "{topic.get("title", "")}" '
                    f'image_key "{key}" not in images. Keys: {known}'
                )
    return errors


__all__ = [
    "KEBAB_PATTERN",
    "_as_int",
    "_optional_str",
    "_validate_image_keys",
    "_validate_slugs",
]
