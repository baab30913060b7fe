"""Tests for the command-line entry point."""

from __future__ import annotations

import pytest

from lbrn2svg import cli
from tests.conftest import TEXT_LBRN2


@pytest.fixture
def project_file(tmp_path, rect_lbrn2):
    path = tmp_path / "design.lbrn2"
    path.write_text(rect_lbrn2, encoding="utf-8")
    return path


def test_converts_file(project_file, tmp_path, capsys):
    out = tmp_path / "design.svg"
    assert cli.main([str(project_file), str(out)]) == cli.EXIT_OK
    assert out.read_text(encoding="utf-8").startswith('<?xml version="1.0"')
    assert f"SVG written to {out}" in capsys.readouterr().out


def test_stroke_width_option(project_file, tmp_path):
    out = tmp_path / "design.svg"
    cli.main([str(project_file), str(out), "--stroke-width", "0.3mm"])
    assert "stroke-width:0.3mm" in out.read_text(encoding="utf-8")


def test_show_warnings(tmp_path, capsys):
    src = tmp_path / "text.lbrn2"
    src.write_text(TEXT_LBRN2, encoding="utf-8")
    assert cli.main([str(src), str(tmp_path / "text.svg"), "--show-warnings"]) == cli.EXIT_OK
    assert "Text shape without a backup path" in capsys.readouterr().err


def test_missing_arguments():
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])
    assert excinfo.value.code == cli.EXIT_USAGE


def test_unreadable_input(tmp_path):
    assert cli.main([str(tmp_path / "missing.lbrn2"), str(tmp_path / "out.svg")]) == cli.EXIT_READ


def test_parse_failure(tmp_path, capsys):
    src = tmp_path / "bad.lbrn2"
    src.write_text("<svg/>", encoding="utf-8")
    assert cli.main([str(src), str(tmp_path / "out.svg")]) == cli.EXIT_PARSE
    assert "Failed to parse LBRN2 file" in capsys.readouterr().err


def test_conversion_failure(project_file, tmp_path, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(cli, "render_svg", boom)
    assert cli.main([str(project_file), str(tmp_path / "out.svg")]) == cli.EXIT_CONVERT


def test_write_failure(project_file, tmp_path):
    out = tmp_path / "no-such-dir" / "out.svg"
    assert cli.main([str(project_file), str(out)]) == cli.EXIT_WRITE


def test_overflowing_numbers_do_not_abort(tmp_path):
    src = tmp_path / "huge.lbrn2"
    src.write_text(
        '<LightBurnProject><Shape Type="Path" VertID="1e400" CutIndex="inf">'
        "<XForm>1 0 0 1 0 0</XForm><VertList>V0 0V1 0</VertList>"
        "<PrimList>L0 1</PrimList></Shape></LightBurnProject>",
        encoding="utf-8",
    )
    out = tmp_path / "huge.svg"
    assert cli.main([str(src), str(out)]) == cli.EXIT_OK
    assert "<path " in out.read_text(encoding="utf-8")
