"""Page layout driver.

:class:`PageLayoutDriver` turns a sequence of code points into backend calls:
for each page, ``add_page`` then one ``paint_text`` per character and
``end_page``; after the last page, one ``save``.  Processing is strictly
sequential and the driver owns the document from creation to release.

Failure policy
--------------
Page creation and save failures end the run; nothing is saved after a page
failure.  A code point with no text representation raises
:class:`EncodingError`, which is either skipped (the cell stays blank) or
fatal depending on ``encoding_errors``.  Every error is passed to the
caller's ``error_handler`` before the driver skips or re-raises.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Literal

from glyphsheet.backend.base import DocumentBackend, open_document
from glyphsheet.fonts import FontHandle
from glyphsheet.text import code_point_to_text
from glyphsheet.utils.errors import EncodingError, GlyphSheetError
from glyphsheet.utils.logging import get_logger

from .grid import LayoutConfig, iter_page_cells, page_count

log = get_logger(__name__)

ErrorHandler = Callable[[GlyphSheetError], None]
EncodingPolicy = Literal["skip", "abort"]


def log_error(error: GlyphSheetError) -> None:
    """Default error handler: log ``error`` on the driver logger."""

    if isinstance(error, EncodingError):
        log.warning("Skipping %s", error)
    else:
        log.error("%s", error)


@dataclass(slots=True)
class RunSummary:
    """Outcome of one driver run."""

    pages: int = 0
    painted: int = 0
    skipped: list[int] = field(default_factory=list)
    output: str | None = None


class PageLayoutDriver:
    """Lay out code points on paginated grids and paint them on a backend.

    Parameters
    ----------
    layout:
        Page geometry.
    font:
        Font bound to every page.
    font_size:
        Point size the font is bound at.
    encoding_errors:
        ``"skip"`` to leave unconvertible characters blank and continue,
        ``"abort"`` to end the run on the first one.
    error_handler:
        Called synchronously with every error; defaults to :func:`log_error`.
    covers:
        Optional predicate; code points it rejects are skipped without
        painting (used to leave glyphs the font lacks blank).
    """

    def __init__(
        self,
        layout: LayoutConfig,
        font: FontHandle,
        *,
        font_size: float = 12.0,
        encoding_errors: EncodingPolicy = "skip",
        error_handler: ErrorHandler | None = None,
        covers: Callable[[int], bool] | None = None,
    ) -> None:
        if encoding_errors not in ("skip", "abort"):
            raise ValueError(f"unknown encoding_errors policy: {encoding_errors!r}")
        self.layout = layout
        self.font = font
        self.font_size = font_size
        self.encoding_errors = encoding_errors
        self.error_handler = error_handler or log_error
        self.covers = covers

    def _report(self, error: GlyphSheetError) -> None:
        self.error_handler(error)

    def run(
        self,
        code_points: Sequence[int],
        backend: DocumentBackend,
        output_path: str | os.PathLike[str],
    ) -> RunSummary:
        """Paint ``code_points`` onto ``backend`` and save to ``output_path``.

        Raises
        ------
        GlyphSheetError
            Any fatal backend, page, encoding (``abort`` policy) or save
            failure, after it has been passed to the error handler.
        """

        summary = RunSummary()
        try:
            with open_document(backend):
                self._emit_pages(code_points, backend, summary)
                backend.save(output_path)
        except GlyphSheetError as exc:
            self._report(exc)
            raise
        summary.output = os.fspath(output_path)
        log.info(
            "Wrote %d page(s), %d character(s), %d skipped to %s",
            summary.pages,
            summary.painted,
            len(summary.skipped),
            summary.output,
        )
        return summary

    def _emit_pages(
        self,
        code_points: Sequence[int],
        backend: DocumentBackend,
        summary: RunSummary,
    ) -> None:
        layout = self.layout
        total = len(code_points)
        num_pages = page_count(total, layout.chars_per_page)
        for page_index in range(num_pages):
            backend.add_page(layout.page_width, layout.page_height, self.font, self.font_size)
            summary.pages += 1
            for char_index, _cell, pos in iter_page_cells(page_index, total, layout):
                code_point = code_points[char_index]
                text = self._convert(code_point, summary)
                if text is None:
                    continue
                backend.paint_text(pos.x, pos.y, text)
                summary.painted += 1
            backend.end_page()
            log.debug("Page %d/%d done", page_index + 1, num_pages)

    def _convert(self, code_point: int, summary: RunSummary) -> str | None:
        if self.covers is not None and not self.covers(code_point):
            summary.skipped.append(code_point)
            return None
        try:
            return code_point_to_text(code_point)
        except EncodingError as exc:
            if self.encoding_errors == "abort":
                raise
            self._report(exc)
            summary.skipped.append(code_point)
            return None


__all__ = [
    "EncodingPolicy",
    "ErrorHandler",
    "PageLayoutDriver",
    "RunSummary",
    "log_error",
]
