from __future__ import annotations

from pathlib import Path

import pytest

from glyphsheet.backend import RecordingBackend
from glyphsheet.config import load_config
from glyphsheet.sheet import plan_sheet, record_sheet, render_sheet
from glyphsheet.utils.errors import FontLoadError, GlyphSheetError


def test_plan_reference_range() -> None:
    sheet_plan = plan_sheet(load_config(env={}))
    assert sheet_plan.total == 0x10000
    assert sheet_plan.pages == 328
    assert sheet_plan.per_page[0] == 200
    assert sheet_plan.per_page[-1] == 136


def test_plan_scenario_two_pages() -> None:
    cfg = load_config(
        overrides={
            "range": {"low": 0, "high": 19},
            "layout": {"chars_per_page": 10, "chars_per_line": 5},
        },
        env={},
    )
    assert plan_sheet(cfg).per_page == (10, 10)


def test_render_with_recording_backend() -> None:
    cfg = load_config(overrides={"range": {"low": 0x41, "high": 0x43}}, env={})
    backend = RecordingBackend()
    summary = render_sheet(cfg, backend=backend)
    assert summary.pages == 1
    assert summary.painted == 3
    assert backend.commands[1] == ("add_page", 595.0, 842.0, "Helvetica", 12.0)
    assert backend.commands[2] == ("paint_text", 50.0, 792.0, "A")
    assert backend.commands[-1] == ("save", "output.pdf")


def test_skip_unmapped_with_standard_font() -> None:
    cfg = load_config(
        overrides={"range": {"low": 0x5A, "high": 0x5C}, "render": {"skip_unmapped": True}},
        env={},
    )
    backend = RecordingBackend()
    render_sheet(cfg, backend=backend)
    cfg = load_config(
        overrides={"range": {"low": 0x040F, "high": 0x0410}, "render": {"skip_unmapped": True}},
        env={},
    )
    cyrillic = RecordingBackend()
    summary = render_sheet(cfg, backend=cyrillic)
    assert backend.count("paint_text") == 3
    assert cyrillic.count("paint_text") == 0
    assert summary.skipped == [0x040F, 0x0410]


def test_font_errors_reach_handler(tmp_path: Path) -> None:
    seen: list[GlyphSheetError] = []
    cfg = load_config(overrides={"font": {"path": str(tmp_path / "none.ttf")}}, env={})
    with pytest.raises(FontLoadError):
        render_sheet(cfg, backend=RecordingBackend(), error_handler=seen.append)
    assert [type(e) for e in seen] == [FontLoadError]


def test_recorded_runs_are_identical() -> None:
    cfg = load_config(overrides={"range": {"low": 0x2000, "high": 0x2400}}, env={})
    assert record_sheet(cfg).commands == record_sheet(cfg).commands
