from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import reportlab

from glyphsheet import fonts
from glyphsheet.fonts import STANDARD_FONT, FontHandle, has_glyph, load_font, resolve_font
from glyphsheet.utils.errors import FontBindError, FontLoadError

VERA = Path(reportlab.__file__).parent / "fonts" / "Vera.ttf"
needs_vera = pytest.mark.skipif(not VERA.is_file(), reason="reportlab Vera.ttf not bundled")


def test_no_path_uses_standard_font() -> None:
    handle = load_font(None)
    assert handle.name == STANDARD_FONT
    assert handle.is_standard
    assert resolve_font(handle).font is not None


def test_missing_font_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing.ttf"
    with pytest.raises(FontLoadError) as excinfo:
        load_font(missing)
    assert str(missing) in str(excinfo.value)
    assert excinfo.value.exit_code == 3


def test_unreadable_font_file(tmp_path: Path) -> None:
    junk = tmp_path / "junk.ttf"
    junk.write_bytes(b"not a font at all")
    with pytest.raises(FontLoadError, match="cannot load font"):
        load_font(junk)


@needs_vera
def test_load_truetype_font() -> None:
    handle = resolve_font(load_font(VERA))
    assert handle.name == "Vera"
    assert handle.path == VERA
    assert has_glyph(handle, ord("A"))
    assert not has_glyph(handle, 0x4E00)


def test_bind_failure(monkeypatch: Any) -> None:
    def missing(name: str) -> None:
        raise KeyError(name)

    monkeypatch.setattr(fonts.pdfmetrics, "getFont", missing)
    with pytest.raises(FontBindError, match="NoSuchFont"):
        resolve_font(FontHandle(name="NoSuchFont"))


def test_standard_font_coverage() -> None:
    handle = FontHandle(name=STANDARD_FONT)
    assert has_glyph(handle, ord("A"))
    assert has_glyph(handle, 0x20AC)  # euro sign is in Windows-1252
    assert not has_glyph(handle, 0x0410)
