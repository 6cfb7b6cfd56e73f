# Tests for verifying the package is importable and documented.

import importlib
import pkgutil

import glyphsheet


def test_root_package_has_docstring() -> None:
    """The root package should define a module docstring."""
    assert glyphsheet.__doc__ and glyphsheet.__doc__.strip()


def test_all_modules_have_docstrings() -> None:
    """Ensure every submodule can be imported and has a docstring."""
    for module_info in pkgutil.walk_packages(glyphsheet.__path__, glyphsheet.__name__ + "."):
        module = importlib.import_module(module_info.name)
        assert module.__doc__ and module.__doc__.strip(), f"Missing docstring in {module_info.name}"


def test_public_subpackages_export_their_api() -> None:
    """Subpackages re-export the names the sheet pipeline is built from."""
    from glyphsheet import backend, config, layout

    assert {"DocumentBackend", "ReportLabBackend", "RecordingBackend", "open_document"} <= set(
        backend.__all__
    )
    assert {"LayoutConfig", "PageLayoutDriver", "page_count", "placement"} <= set(layout.__all__)
    assert {"ConfigModel", "load_config"} <= set(config.__all__)


def test_defaults_file_ships_with_config_package() -> None:
    """The YAML defaults are package data next to the config schema."""
    from importlib import resources

    defaults = resources.files("glyphsheet.config").joinpath("defaults.yml")
    assert defaults.is_file()
    assert "chars_per_page" in defaults.read_text(encoding="utf-8")
