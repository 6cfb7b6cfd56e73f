"""Typed exceptions for configuration, font, backend and encoding failures.

Every failure of a sheet run is a :class:`GlyphSheetError`.  Each subclass
records the ``operation`` that failed and, where one exists, the underlying
``cause``, so that the message shown to the user is enough to diagnose the
problem.  ``exit_code`` is the process exit status used by the command line
interface when the error terminates a run.
"""

from __future__ import annotations


class GlyphSheetError(Exception):
    """Base class for all sheet generation errors."""

    exit_code: int = 1
    operation: str = "run"

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        self.cause = cause
        if cause is not None:
            message = f"{message}: {type(cause).__name__}: {cause}"
        super().__init__(f"{self.operation}: {message}")


class ConfigError(GlyphSheetError, ValueError):
    """Raised when configuration values violate layout or range invariants."""

    exit_code = 4
    operation = "config"


class FontLoadError(GlyphSheetError):
    """Raised when a font file is missing, unreadable or unsupported."""

    exit_code = 3
    operation = "load-font"


class BackendInitError(GlyphSheetError):
    """Raised when the document object cannot be created."""

    exit_code = 5
    operation = "new-document"


class FontBindError(GlyphSheetError):
    """Raised when a loaded font cannot be resolved into a usable font object."""

    exit_code = 6
    operation = "bind-font"


class PageCreateError(GlyphSheetError):
    """Raised when the backend refuses to allocate a new page."""

    exit_code = 7
    operation = "add-page"


class EncodingError(GlyphSheetError, ValueError):
    """Raised when a code point has no text representation for the backend."""

    exit_code = 8
    operation = "encode"

    def __init__(
        self,
        code_point: int,
        message: str | None = None,
        *,
        cause: BaseException | None = None,
    ) -> None:
        self.code_point = code_point
        super().__init__(message or f"U+{code_point:04X} cannot be encoded", cause=cause)


class SaveError(GlyphSheetError):
    """Raised when the document cannot be serialized to its destination."""

    exit_code = 9
    operation = "save"


__all__ = [
    "GlyphSheetError",
    "ConfigError",
    "FontLoadError",
    "BackendInitError",
    "FontBindError",
    "PageCreateError",
    "EncodingError",
    "SaveError",
]
