"""Tests for packaging metadata."""

from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any

import pytest

tomllib = pytest.importorskip("tomllib")


def _load_pyproject() -> dict[str, Any]:
    path = Path(__file__).resolve().parents[1] / "pyproject.toml"
    with path.open("rb") as fh:
        return tomllib.load(fh)


def test_dev_extra() -> None:
    extras = _load_pyproject().get("project", {}).get("optional-dependencies", {})
    assert any(req.startswith("pytest") for req in extras["dev"])


def test_console_script_entrypoint() -> None:
    scripts = _load_pyproject().get("project", {}).get("scripts", {})
    assert scripts["glyphsheet"] == "glyphsheet.cli:app"


def test_defaults_are_package_data() -> None:
    data = _load_pyproject()["tool"]["setuptools"]["package-data"]
    assert "defaults.yml" in data["glyphsheet.config"]


def test_import_smoke() -> None:
    importlib.import_module("glyphsheet")
    importlib.import_module("glyphsheet.cli")
