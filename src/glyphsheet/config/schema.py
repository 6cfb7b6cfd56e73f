"""Typed configuration schema and loader for the glyphsheet package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    confloat,
    conint,
    field_validator,
    model_validator,
)

from glyphsheet.codepoints import MAX_CODE_POINT, parse_code_point
from glyphsheet.layout.grid import LayoutConfig
from glyphsheet.utils.errors import ConfigError

FONT_ENV = "GLYPHSHEET_FONT"

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class FontSettings(BaseModel):
    """Font file and the size it is bound at on every page."""

    path: Path | None = None
    size: confloat(gt=0) = 12.0

    model_config = ConfigDict(extra="forbid")


class RangeSettings(BaseModel):
    """Closed interval of code points to render."""

    low: conint(ge=0, le=MAX_CODE_POINT)
    high: conint(ge=0, le=MAX_CODE_POINT)

    model_config = ConfigDict(extra="forbid")

    @field_validator("low", "high", mode="before")
    @classmethod
    def _parse_text(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_code_point(value)
        return value

    @model_validator(mode="after")
    def _ordered(self) -> "RangeSettings":
        if self.low > self.high:
            raise ValueError(f"range low {self.low:#x} is greater than high {self.high:#x}")
        return self


class LayoutSettings(BaseModel):
    """Grid geometry; see :class:`glyphsheet.layout.grid.LayoutConfig`."""

    chars_per_page: int
    chars_per_line: int
    page_width: float
    page_height: float
    margin_left: float
    margin_top: float
    cell_width: float
    row_height: float

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _fits_page(self) -> "LayoutSettings":
        self.to_layout()
        return self

    def to_layout(self) -> LayoutConfig:
        """Return the immutable layout record, raising ``ConfigError`` if invalid."""

        return LayoutConfig(**self.model_dump())


class OutputSettings(BaseModel):
    """Destination file and document metadata."""

    path: Path
    title: str | None = None
    author: str | None = None
    invariant: bool = False

    model_config = ConfigDict(extra="forbid")


class RenderSettings(BaseModel):
    """Per-character rendering policy."""

    encoding_errors: Literal["skip", "abort"] = "skip"
    skip_unmapped: bool = False

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    font: FontSettings
    range: RangeSettings
    layout: LayoutSettings
    output: OutputSettings
    render: RenderSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(part) for part in err.get("loc", ()))
    msg = err.get("msg", str(exc))
    return f"{loc}: {msg}" if loc else msg


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults, an optional YAML file and overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    ``overrides`` < ``GLYPHSHEET_FONT`` (font path only, and only when no
    other source set one).

    Raises
    ------
    ConfigError
        If a file cannot be read or parsed, or the merged values are invalid.
    """

    with (
        importlib_resources.files("glyphsheet.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    merged = defaults
    if path is not None:
        try:
            with Path(path).open("r", encoding="utf-8") as f:
                user = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"cannot read config file {path}", cause=exc) from exc
        if not isinstance(user, dict):
            raise ConfigError(f"config file {path} must contain a mapping")
        merged = deep_merge_dicts(merged, user)
    if overrides:
        merged = deep_merge_dicts(merged, dict(overrides))

    environ = env if env is not None else os.environ
    font = merged.get("font")
    if isinstance(font, dict) and font.get("path") is None and environ.get(FONT_ENV):
        merged = deep_merge_dicts(merged, {"font": {"path": environ[FONT_ENV]}})

    try:
        return ConfigModel.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(_first_error(exc)) from exc


__all__ = [
    "FONT_ENV",
    "ConfigModel",
    "FontSettings",
    "RangeSettings",
    "LayoutSettings",
    "OutputSettings",
    "RenderSettings",
    "deep_merge_dicts",
    "load_config",
]
