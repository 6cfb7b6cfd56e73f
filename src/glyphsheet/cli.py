"""Typer-based command line interface for glyph sheet generation.

The ``render`` command loads configuration (package defaults, an optional
YAML file, then command line options), loads the font and writes the PDF.
``plan`` prints the pagination for the same configuration without loading a
font or writing anything.

Exit codes
----------
0 success
3 font could not be loaded
4 configuration error
5 document could not be created
6 font could not be bound
7 page could not be created
8 unencodable code point with ``--encoding-errors abort``
9 document could not be saved
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Optional

import typer

from .codepoints import parse_code_point
from .config import ConfigModel, load_config
from .sheet import plan_sheet, render_sheet
from .utils.errors import EncodingError, GlyphSheetError
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

log = get_logger(__name__)

app = typer.Typer(
    name="glyphsheet",
    help="Render every code point of a range into a PDF glyph sheet. "
    "Use 'glyphsheet render' to write the sheet.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _build_overrides(
    *,
    out_path: Path | None,
    font_path: Path | None,
    low: str | None,
    high: str | None,
    chars_per_page: int | None,
    chars_per_line: int | None,
    font_size: float | None,
    encoding_errors: str | None,
    skip_unmapped: bool | None,
    invariant: bool | None,
) -> dict[str, Any]:
    """Translate CLI options into a nested override mapping."""

    overrides: dict[str, dict[str, Any]] = {}

    def put(section: str, key: str, value: Any) -> None:
        if value is not None:
            overrides.setdefault(section, {})[key] = value

    put("output", "path", out_path)
    put("output", "invariant", invariant)
    put("font", "path", font_path)
    put("font", "size", font_size)
    put("range", "low", parse_code_point(low) if low is not None else None)
    put("range", "high", parse_code_point(high) if high is not None else None)
    put("layout", "chars_per_page", chars_per_page)
    put("layout", "chars_per_line", chars_per_line)
    put("render", "encoding_errors", encoding_errors)
    put("render", "skip_unmapped", skip_unmapped)
    return overrides


def _load(config_path: Optional[Path], overrides: dict[str, Any]) -> ConfigModel:
    try:
        return load_config(config_path, overrides=overrides)
    except GlyphSheetError as exc:
        _safe_exit(exc.exit_code, str(exc))
        raise  # pragma: no cover - _safe_exit always raises


@app.callback()
def main() -> None:
    """Entry point for the glyphsheet command group."""
    pass


@app.command()
def render(  # noqa: PLR0913
    out_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--out", "-o", help="Output PDF file [default: output.pdf]"
    ),
    font_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--font", help="TrueType font file; built-in Helvetica when omitted"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    low: Optional[str] = typer.Option(  # noqa: B008
        None, "--low", help="First code point (decimal, 0x.. or U+..)"
    ),
    high: Optional[str] = typer.Option(  # noqa: B008
        None, "--high", help="Last code point, inclusive"
    ),
    chars_per_page: Optional[int] = typer.Option(  # noqa: B008
        None, "--chars-per-page", help="Characters on each page"
    ),
    chars_per_line: Optional[int] = typer.Option(  # noqa: B008
        None, "--chars-per-line", help="Characters on each grid line"
    ),
    font_size: Optional[float] = typer.Option(  # noqa: B008
        None, "--font-size", help="Font size in points"
    ),
    encoding_errors: Optional[str] = typer.Option(  # noqa: B008
        None,
        "--encoding-errors",
        help="Policy for code points without a text form [skip|abort]",
    ),
    skip_unmapped: bool | None = typer.Option(  # noqa: B008
        None,
        "--skip-unmapped/--paint-unmapped",
        help="Leave cells blank for characters the font has no glyph for",
    ),
    invariant: bool | None = typer.Option(  # noqa: B008
        None,
        "--invariant/--no-invariant",
        help="Omit timestamps so identical runs write identical files",
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> dict[str, str]:
    """Render the configured code point range to a PDF glyph sheet."""

    configure_logging(verbose)
    try:
        overrides = _build_overrides(
            out_path=out_path,
            font_path=font_path,
            low=low,
            high=high,
            chars_per_page=chars_per_page,
            chars_per_line=chars_per_line,
            font_size=font_size,
            encoding_errors=encoding_errors,
            skip_unmapped=skip_unmapped,
            invariant=invariant,
        )
    except GlyphSheetError as exc:
        _safe_exit(exc.exit_code, str(exc))
    cfg = _load(config_path, overrides)
    if verbose:
        typer.echo("Loaded config", err=True)

    def on_error(error: GlyphSheetError) -> None:
        if isinstance(error, EncodingError) and cfg.render.encoding_errors == "skip":
            log.debug("Skipped %s", error)

    try:
        summary = render_sheet(cfg, error_handler=on_error)
    except GlyphSheetError as exc:
        _safe_exit(exc.exit_code, f"ERROR: {exc}")
        raise  # pragma: no cover - _safe_exit always raises

    if summary.skipped:
        log.warning(
            "Skipped %d code point(s) between U+%04X and U+%04X",
            len(summary.skipped),
            summary.skipped[0],
            summary.skipped[-1],
        )
    typer.echo(
        f"Wrote {summary.pages} page(s), {summary.painted} character(s) "
        f"({len(summary.skipped)} skipped) to {summary.output}"
    )
    return {"out": str(summary.output)}


@app.command()
def plan(
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    low: Optional[str] = typer.Option(None, "--low", help="First code point"),  # noqa: B008
    high: Optional[str] = typer.Option(None, "--high", help="Last code point"),  # noqa: B008
    chars_per_page: Optional[int] = typer.Option(  # noqa: B008
        None, "--chars-per-page", help="Characters on each page"
    ),
    chars_per_line: Optional[int] = typer.Option(  # noqa: B008
        None, "--chars-per-line", help="Characters on each grid line"
    ),
) -> None:
    """Print how the configured range splits into pages."""

    try:
        overrides = _build_overrides(
            out_path=None,
            font_path=None,
            low=low,
            high=high,
            chars_per_page=chars_per_page,
            chars_per_line=chars_per_line,
            font_size=None,
            encoding_errors=None,
            skip_unmapped=None,
            invariant=None,
        )
    except GlyphSheetError as exc:
        _safe_exit(exc.exit_code, str(exc))
    cfg = _load(config_path, overrides)
    sheet_plan = plan_sheet(cfg)
    typer.echo(
        f"U+{cfg.range.low:04X}..U+{cfg.range.high:04X}: "
        f"{sheet_plan.total} character(s) on {sheet_plan.pages} page(s)"
    )
    if sheet_plan.pages:
        typer.echo(f"last page holds {sheet_plan.per_page[-1]} character(s)")
