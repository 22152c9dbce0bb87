"""Convert parsed documents into JSON-friendly dictionaries."""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ


def to_data(node: object) -> typ.Any:
    """Return ``node`` as plain dicts and lists, tagging variants with ``kind``."""
    if isinstance(node, enum.Enum):
        return node.value
    if isinstance(node, tuple | list):
        return [to_data(item) for item in node]
    if dc.is_dataclass(node) and not isinstance(node, type):
        payload: dict[str, typ.Any] = {}
        kind = getattr(type(node), "kind", None)
        if isinstance(kind, str):
            payload["kind"] = kind
        for field in dc.fields(node):
            payload[field.name] = to_data(getattr(node, field.name))
        return payload
    return node


__all__ = ["to_data"]
