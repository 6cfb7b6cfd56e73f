from __future__ import annotations

from typer.testing import CliRunner

from glyphsheet.cli import app


def test_global_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert "render" in result.output
    assert "plan" in result.output


def test_render_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["render", "--help"])
    for option in ("--out", "--font", "--config", "--low", "--high", "--encoding-errors"):
        assert option in result.output
