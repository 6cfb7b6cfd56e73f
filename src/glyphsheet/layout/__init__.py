"""Grid arithmetic and the page-by-page emission driver."""

from .driver import ErrorHandler, PageLayoutDriver, RunSummary
from .grid import (
    GridCell,
    LayoutConfig,
    Placement,
    chars_on_page,
    grid_cell,
    iter_page_cells,
    page_count,
    placement,
)

__all__ = [
    "ErrorHandler",
    "GridCell",
    "LayoutConfig",
    "PageLayoutDriver",
    "Placement",
    "RunSummary",
    "chars_on_page",
    "grid_cell",
    "iter_page_cells",
    "page_count",
    "placement",
]
