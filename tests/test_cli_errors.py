from __future__ import annotations

from pathlib import Path
from typing import Any

from typer.testing import CliRunner

from glyphsheet.cli import app
from glyphsheet.utils.errors import BackendInitError, PageCreateError


def test_missing_font(tmp_path: Path) -> None:
    missing = tmp_path / "missing.ttf"
    runner = CliRunner()
    result = runner.invoke(
        app, ["render", "--out", str(tmp_path / "o.pdf"), "--font", str(missing)]
    )
    assert result.exit_code == 3
    assert str(missing) in result.output
    assert not (tmp_path / "o.pdf").exists()


def test_bad_config(tmp_path: Path) -> None:
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("unknown: true\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["render", "--config", str(bad_cfg)])
    assert result.exit_code == 4


def test_inverted_range(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        app, ["render", "--out", str(tmp_path / "o.pdf"), "--low", "0x42", "--high", "0x41"]
    )
    assert result.exit_code == 4
    assert "greater than high" in result.output


def test_bad_code_point_text() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["plan", "--low", "zz"])
    assert result.exit_code == 4
    assert "invalid code point" in result.output


def test_grid_overflow() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["plan", "--chars-per-line", "20"])
    assert result.exit_code == 4
    assert "grid width" in result.output


def test_encoding_abort(tmp_path: Path) -> None:
    out_pdf = tmp_path / "o.pdf"
    runner = CliRunner()
    result = runner.invoke(
        app,
        [
            "render",
            "--out",
            str(out_pdf),
            "--low",
            "0xD7FF",
            "--high",
            "0xD800",
            "--encoding-errors",
            "abort",
        ],
    )
    assert result.exit_code == 8
    assert "U+D800" in result.output
    assert not out_pdf.exists()


def test_page_failure(tmp_path: Path, monkeypatch: Any) -> None:
    def refuse(self: Any, *args: Any) -> None:
        raise PageCreateError("no more pages")

    monkeypatch.setattr("glyphsheet.backend.reportlab_backend.ReportLabBackend.add_page", refuse)
    out_pdf = tmp_path / "o.pdf"
    runner = CliRunner()
    result = runner.invoke(app, ["render", "--out", str(out_pdf), "--high", "0x20"])
    assert result.exit_code == 7
    assert "add-page: no more pages" in result.output
    assert not out_pdf.exists()


def test_backend_init_failure(tmp_path: Path, monkeypatch: Any) -> None:
    def broken(self: Any) -> None:
        raise BackendInitError("cannot create PDF document")

    monkeypatch.setattr(
        "glyphsheet.backend.reportlab_backend.ReportLabBackend.new_document", broken
    )
    runner = CliRunner()
    result = runner.invoke(app, ["render", "--out", str(tmp_path / "o.pdf"), "--high", "0x20"])
    assert result.exit_code == 5


def test_save_failure(tmp_path: Path) -> None:
    taken = tmp_path / "taken.pdf"
    taken.mkdir()
    runner = CliRunner()
    result = runner.invoke(app, ["render", "--out", str(taken), "--high", "0x20"])
    assert result.exit_code == 9
    assert "save:" in result.output
