"""Font loading and binding through reportlab's font registry.

:func:`load_font` registers a TrueType file with :mod:`reportlab.pdfbase.pdfmetrics`
and returns a :class:`FontHandle`.  Without a path the built-in Helvetica
standard font is used, which only covers the Windows-1252 repertoire.
:func:`resolve_font` looks the registered name back up, mirroring the
load/bind split of the PDF backend: a font that loaded but cannot be found in
the registry is a bind failure, not a load failure.
"""

from __future__ import annotations

import os
import re
import struct
from dataclasses import dataclass, field
from pathlib import Path

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont

from glyphsheet.utils.errors import FontBindError, FontLoadError
from glyphsheet.utils.logging import get_logger

log = get_logger(__name__)

STANDARD_FONT = "Helvetica"
_STANDARD_ENCODING = "cp1252"


@dataclass(slots=True, frozen=True)
class FontHandle:
    """Registered font name plus the file it came from (``None`` for built-ins)."""

    name: str
    path: Path | None = None
    font: object | None = field(default=None, compare=False, repr=False)

    @property
    def is_standard(self) -> bool:
        return self.path is None


def _font_name(path: Path) -> str:
    return re.sub(r"[^A-Za-z0-9_-]+", "-", path.stem).strip("-") or "GlyphSheetFont"


def load_font(path: str | os.PathLike[str] | None) -> FontHandle:
    """Load and register the font at ``path``.

    Raises
    ------
    FontLoadError
        If the file is missing, unreadable or not a usable TrueType font.
    """

    if path is None:
        log.info("No font path given, using built-in %s", STANDARD_FONT)
        return FontHandle(name=STANDARD_FONT)

    font_path = Path(path)
    if not font_path.is_file():
        raise FontLoadError(f"font file not found: {font_path}")
    name = _font_name(font_path)
    try:
        ttf = TTFont(name, str(font_path))
        pdfmetrics.registerFont(ttf)
    except (TTFError, OSError, ValueError, struct.error) as exc:
        raise FontLoadError(f"cannot load font from {font_path}", cause=exc) from exc
    log.info("Font loaded successfully: %s", name)
    return FontHandle(name=name, path=font_path)


def resolve_font(handle: FontHandle) -> FontHandle:
    """Return ``handle`` with its registered reportlab font object attached.

    Raises
    ------
    FontBindError
        If the font name is not known to the registry.
    """

    try:
        font = pdfmetrics.getFont(handle.name)
    except KeyError as exc:
        raise FontBindError(f"no font object for {handle.name!r}", cause=exc) from exc
    return FontHandle(name=handle.name, path=handle.path, font=font)


def has_glyph(handle: FontHandle, code_point: int) -> bool:
    """Return whether the font maps ``code_point`` to a glyph.

    TrueType fonts are checked against their character map.  Standard fonts
    cover what their single-byte encoding can express.
    """

    if handle.is_standard:
        try:
            chr(code_point).encode(_STANDARD_ENCODING)
        except UnicodeEncodeError:
            return False
        return True
    font = handle.font if handle.font is not None else pdfmetrics.getFont(handle.name)
    char_to_glyph = getattr(getattr(font, "face", None), "charToGlyph", None) or {}
    return code_point in char_to_glyph


__all__ = ["STANDARD_FONT", "FontHandle", "load_font", "resolve_font", "has_glyph"]
