"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
    3. Explicit overrides (command line options)
    4. ``GLYPHSHEET_FONT`` environment variable, only when no font path is set
"""

from .schema import ConfigModel, load_config

__all__ = ["ConfigModel", "load_config"]
