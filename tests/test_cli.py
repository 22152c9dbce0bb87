"""Tests for the ``topics`` command-line entrypoint."""

from __future__ import annotations

import json
import typing as typ

import pytest

from topic_pages import cli
from topic_pages.config import CurriculumConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path

    from pytest_mock import MockerFixture


def _write_config(tmp_path: Path) -> Path:
    path = tmp_path / "learning.yaml"
    path.write_text(
        """
defaults:
  output_dir: out
sections:
  - title: Basics
    slug: basics
    topics:
      - id: structured
        title: Structured
        content: |
          **1. Learning flow:**
          Start here.
      - id: prose
        title: Prose
        content: Just a paragraph.
      - id: blank
        title: Blank
        content: ""
""".strip()
        + "\n",
        encoding="utf-8",
    )
    return path


def test_render_prints_written_paths(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)
    cli.render(config=_write_config(tmp_path))
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "wrote out/index.html",
        "wrote out/basics/index.html",
        "wrote out/basics/structured.html",
        "wrote out/basics/prose.html",
        "wrote out/basics/blank.html",
    ], f"unexpected CLI output {lines!r}"
    assert (tmp_path / "out" / "basics" / "structured.html").is_file()


def test_render_output_dir_override(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)
    cli.render(config=_write_config(tmp_path), output_dir=tmp_path / "dist")
    out = capsys.readouterr().out
    assert "wrote dist/basics/prose.html" in out
    assert not (tmp_path / "out").exists()


def test_render_unknown_section_raises(tmp_path: Path) -> None:
    with pytest.raises(CurriculumConfigError, match="Unknown section 'missing'"):
        cli.render(config=_write_config(tmp_path), section="missing")


def test_validate_reports_counts_and_prose_topics(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.validate(config=_write_config(tmp_path))
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "1 sections, 3 topics",
        "basics/prose: no section markers, renders as plain paragraphs",
    ]


def test_parse_dumps_document_json(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    content = tmp_path / "topic.md"
    content.write_text("**1. Learning flow:**\n- a\n  - b\n", encoding="utf-8")
    code = tmp_path / "example.py"
    code.write_text("print('hi')\n", encoding="utf-8")

    cli.parse(content, code_file=code, language="python")
    data = json.loads(capsys.readouterr().out)

    assert data["structured"] is True
    assert [part["key"] for part in data["parts"]] == ["s1", "code"]
    bullets = data["parts"][0]["blocks"][0]
    assert bullets["kind"] == "bullet_list"
    assert bullets["items"][0]["children"][0]["source"] == "b"
    assert data["parts"][1]["blocks"][0]["language"] == "python"


def test_render_passes_section_to_generator(
    tmp_path: Path, mocker: MockerFixture, capsys: pytest.CaptureFixture[str]
) -> None:
    generator_cls = mocker.patch.object(cli, "TopicPageGenerator", autospec=True)
    generator_cls.return_value.run.return_value = []

    cli.render(config=_write_config(tmp_path), section="basics")

    generator_cls.return_value.run.assert_called_once_with("basics")
    assert capsys.readouterr().out == ""
