"""One-shot assembly of a glyph sheet from a validated configuration.

:func:`render_sheet` performs the setup steps in order: load the font,
resolve it into a usable font object, enumerate the code points, then hand
everything to :class:`PageLayoutDriver` with a PDF backend.  :func:`plan_sheet`
runs the same layout against a :class:`RecordingBackend` without touching the
font or the filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial

from glyphsheet.backend import RecordingBackend, ReportLabBackend
from glyphsheet.backend.base import DocumentBackend
from glyphsheet.codepoints import enumerate_code_points
from glyphsheet.config import ConfigModel
from glyphsheet.fonts import FontHandle, has_glyph, load_font, resolve_font
from glyphsheet.layout import ErrorHandler, PageLayoutDriver, RunSummary
from glyphsheet.layout.driver import log_error
from glyphsheet.layout.grid import chars_on_page, page_count
from glyphsheet.utils.errors import GlyphSheetError


@dataclass(slots=True, frozen=True)
class SheetPlan:
    """Page count and characters per page for a configuration."""

    total: int
    pages: int
    per_page: tuple[int, ...]


def _report(error_handler: ErrorHandler | None, error: GlyphSheetError) -> None:
    (error_handler or log_error)(error)


def build_driver(
    cfg: ConfigModel,
    font: FontHandle,
    *,
    error_handler: ErrorHandler | None = None,
) -> PageLayoutDriver:
    """Return a driver configured from ``cfg`` painting with ``font``."""

    covers = partial(has_glyph, font) if cfg.render.skip_unmapped else None
    return PageLayoutDriver(
        cfg.layout.to_layout(),
        font,
        font_size=cfg.font.size,
        encoding_errors=cfg.render.encoding_errors,
        error_handler=error_handler,
        covers=covers,
    )


def render_sheet(
    cfg: ConfigModel,
    *,
    backend: DocumentBackend | None = None,
    error_handler: ErrorHandler | None = None,
) -> RunSummary:
    """Render the sheet described by ``cfg`` to ``cfg.output.path``.

    Font failures are reported to ``error_handler`` and re-raised before any
    document is created.
    """

    try:
        font = resolve_font(load_font(cfg.font.path))
    except GlyphSheetError as exc:
        _report(error_handler, exc)
        raise
    if backend is None:
        backend = ReportLabBackend(
            title=cfg.output.title or f"Glyph sheet U+{cfg.range.low:04X}-U+{cfg.range.high:04X}",
            author=cfg.output.author,
            invariant=cfg.output.invariant,
        )
    driver = build_driver(cfg, font, error_handler=error_handler)
    code_points = enumerate_code_points(cfg.range.low, cfg.range.high)
    return driver.run(code_points, backend, cfg.output.path)


def plan_sheet(cfg: ConfigModel) -> SheetPlan:
    """Return the pagination of ``cfg`` without rendering anything."""

    layout = cfg.layout.to_layout()
    total = len(enumerate_code_points(cfg.range.low, cfg.range.high))
    pages = page_count(total, layout.chars_per_page)
    per_page = tuple(chars_on_page(p, total, layout.chars_per_page) for p in range(pages))
    return SheetPlan(total=total, pages=pages, per_page=per_page)


def record_sheet(cfg: ConfigModel, font: FontHandle | None = None) -> RecordingBackend:
    """Run the layout for ``cfg`` against a recording backend and return it."""

    backend = RecordingBackend()
    driver = build_driver(cfg, font or FontHandle(name="recorded"), error_handler=lambda e: None)
    driver.run(enumerate_code_points(cfg.range.low, cfg.range.high), backend, cfg.output.path)
    return backend


__all__ = ["SheetPlan", "build_driver", "render_sheet", "plan_sheet", "record_sheet"]
