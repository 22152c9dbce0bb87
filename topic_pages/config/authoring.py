r"""Serialize structured authoring blocks into the eight-part content string.

Authors may write a topic as separate fields (learning flow steps, material,
explanation, ...) instead of one hand-formatted string. This module turns
those fields into the ``**N. Label:**`` format the parser understands.

Example
-------
>>> from topic_pages.config.authoring import TopicContentBlocks, serialize_content_blocks
>>> blocks = TopicContentBlocks(
...     learning_flow=["Read", "Practise"],
...     material="M", explanation="E", application="A",
...     how_to_implement="H", logic_and_code="L", example="X",
...     additional_info="I",
... )
>>> serialize_content_blocks(blocks).splitlines()[:3]
['**1. Learning flow:**', '', '(1) Read (2) Practise']
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from topic_pages._constants import SECTION_LABELS

from .models import CurriculumConfigError


@dc.dataclass(slots=True)
class TopicContentBlocks:
    """Topic content split into its eight authored parts.

    Attributes
    ----------
    learning_flow : list[str]
        Learning steps, one sentence each.
    material : str
        Core concepts, definitions, and notation.
    explanation : str
        Why it works and how to read it.
    application : str
        When to use it.
    how_to_implement : str
        Implementation steps.
    logic_and_code : str
        How the code or algorithm works.
    example : str
        ``Problem: ... Solution: ...`` narrative.
    additional_info : str
        Tips, links, and common mistakes.
    learning_flow_intro : str | None
        Optional paragraph shown after the learning steps.
    """

    learning_flow: list[str]
    material: str
    explanation: str
    application: str
    how_to_implement: str
    logic_and_code: str
    example: str
    additional_info: str
    learning_flow_intro: str | None = None


_BODY_FIELDS: tuple[tuple[int, str], ...] = (
    (2, "material"),
    (3, "explanation"),
    (4, "application"),
    (5, "how_to_implement"),
    (6, "logic_and_code"),
    (7, "example"),
    (8, "additional_info"),
)


def serialize_content_blocks(blocks: TopicContentBlocks) -> str:
    """Return the eight-part content string for ``blocks``."""
    steps = " ".join(f"({idx}) {step}" for idx, step in enumerate(blocks.learning_flow, 1))
    flow = f"{steps}\n\n{blocks.learning_flow_intro}" if blocks.learning_flow_intro else steps
    parts = [f"**1. {SECTION_LABELS[1]}:**\n\n{flow}"]
    for ordinal, name in _BODY_FIELDS:
        body = str(getattr(blocks, name)).strip()
        parts.append(f"**{ordinal}. {SECTION_LABELS[ordinal]}:**\n\n{body}")
    return "\n\n".join(parts)


def build_content_blocks(payload: typ.Mapping[str, typ.Any], *, where: str) -> TopicContentBlocks:
    """Build :class:`TopicContentBlocks` from a YAML mapping.

    Raises
    ------
    CurriculumConfigError
        If ``learning_flow`` is not a list or a text field is missing.
    """
    flow = payload.get("learning_flow")
    if not isinstance(flow, list) or not flow:
        msg = f"{where}: content_blocks.learning_flow must be a non-empty list."
        raise CurriculumConfigError(msg)
    missing = [name for _, name in _BODY_FIELDS if payload.get(name) is None]
    if missing:
        msg = f"{where}: content_blocks is missing {', '.join(missing)}."
        raise CurriculumConfigError(msg)
    intro = payload.get("learning_flow_intro")
    return TopicContentBlocks(
        learning_flow=[str(step).strip() for step in flow],
        material=str(payload["material"]),
        explanation=str(payload["explanation"]),
        application=str(payload["application"]),
        how_to_implement=str(payload["how_to_implement"]),
        logic_and_code=str(payload["logic_and_code"]),
        example=str(payload["example"]),
        additional_info=str(payload["additional_info"]),
        learning_flow_intro=str(intro).strip() if intro else None,
    )


__all__ = ["TopicContentBlocks", "build_content_blocks", "serialize_content_blocks"]
