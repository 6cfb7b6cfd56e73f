"""Pure grid arithmetic for paginated character sheets.

A sheet is a sequence of ``N`` characters cut into pages of
``chars_per_page`` characters.  Within a page the index ``i`` maps to a grid
cell ``(line, col)`` with ``chars_per_line`` columns per line, and the cell
maps to a placement ``(x, y)``.  PDF user space grows upward, so ``y`` is
measured down from the top edge: line ``0`` sits ``margin_top`` below the
top of the page and each further line is ``row_height`` lower.

Nothing here talks to a backend; all functions are deterministic.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

from glyphsheet.utils.errors import ConfigError


@dataclass(slots=True, frozen=True)
class LayoutConfig:
    """Immutable page geometry for one run.

    Lengths are in PDF points.  All values must be positive, a line may not
    hold more characters than a page, and the full grid must fit inside the
    page after the left and top margins.
    """

    chars_per_page: int = 200
    chars_per_line: int = 10
    page_width: float = 595.0
    page_height: float = 842.0
    margin_left: float = 50.0
    margin_top: float = 50.0
    cell_width: float = 50.0
    row_height: float = 20.0

    def __post_init__(self) -> None:
        for name in (
            "chars_per_page",
            "chars_per_line",
            "page_width",
            "page_height",
            "margin_left",
            "margin_top",
            "cell_width",
            "row_height",
        ):
            if not getattr(self, name) > 0:
                raise ConfigError(f"{name} must be > 0, got {getattr(self, name)!r}")
        if self.chars_per_line > self.chars_per_page:
            raise ConfigError(
                f"chars_per_line ({self.chars_per_line}) exceeds "
                f"chars_per_page ({self.chars_per_page})"
            )
        grid_width = self.margin_left + self.chars_per_line * self.cell_width
        if grid_width > self.page_width:
            raise ConfigError(
                f"grid width {grid_width:g} exceeds page width {self.page_width:g}"
            )
        grid_height = self.margin_top + self.lines_per_page * self.row_height
        if grid_height > self.page_height:
            raise ConfigError(
                f"grid height {grid_height:g} exceeds page height {self.page_height:g}"
            )

    @property
    def lines_per_page(self) -> int:
        """Number of grid lines a full page occupies."""

        return math.ceil(self.chars_per_page / self.chars_per_line)


@dataclass(slots=True, frozen=True)
class GridCell:
    """Position of a character within its page's grid."""

    line: int
    col: int


@dataclass(slots=True, frozen=True)
class Placement:
    """Baseline origin of a painted character."""

    x: float
    y: float


def page_count(total: int, chars_per_page: int) -> int:
    """Return ``ceil(total / chars_per_page)``; ``0`` for an empty sequence."""

    if total <= 0:
        return 0
    return -(-total // chars_per_page)


def chars_on_page(page_index: int, total: int, chars_per_page: int) -> int:
    """Return how many characters page ``page_index`` holds.

    Every page is full except possibly the last, which holds the remainder.
    Pages past the end hold nothing.
    """

    start = page_index * chars_per_page
    return max(0, min(chars_per_page, total - start))


def grid_cell(i: int, chars_per_line: int) -> GridCell:
    """Return the cell for within-page index ``i``."""

    line, col = divmod(i, chars_per_line)
    return GridCell(line=line, col=col)


def placement(cell: GridCell, layout: LayoutConfig) -> Placement:
    """Return the ``(x, y)`` position of ``cell`` under ``layout``."""

    x = layout.margin_left + cell.col * layout.cell_width
    y = layout.page_height - layout.margin_top - cell.line * layout.row_height
    return Placement(x=x, y=y)


def iter_page_cells(
    page_index: int, total: int, layout: LayoutConfig
) -> Iterator[tuple[int, GridCell, Placement]]:
    """Yield ``(char_index, cell, placement)`` for each character on a page.

    ``char_index`` is the global index into the sequence; the cell and
    placement are derived from the within-page index so rows restart at
    ``(0, 0)`` on every page.  Iteration stops at the last character, leaving
    no placements for unused cells.
    """

    base = page_index * layout.chars_per_page
    for i in range(chars_on_page(page_index, total, layout.chars_per_page)):
        cell = grid_cell(i, layout.chars_per_line)
        yield base + i, cell, placement(cell, layout)


__all__ = [
    "LayoutConfig",
    "GridCell",
    "Placement",
    "page_count",
    "chars_on_page",
    "grid_cell",
    "placement",
    "iter_page_cells",
]
