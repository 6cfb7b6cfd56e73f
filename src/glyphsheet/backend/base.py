"""Backend protocol and the scoped document helper.

A backend owns one document at a time.  The driver calls, in order:
``new_document`` once, then for every page ``add_page`` followed by any number
of ``paint_text`` calls and ``end_page``, then ``save`` once.  ``release`` is
called on every exit path through :func:`open_document`.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Protocol, TypeVar, runtime_checkable

from glyphsheet.fonts import FontHandle


@runtime_checkable
class DocumentBackend(Protocol):
    """Protocol for document-authoring backends."""

    def new_document(self) -> None:
        """Create the document; raise :class:`BackendInitError` on failure."""

        ...

    def add_page(self, width: float, height: float, font: FontHandle, size: float) -> None:
        """Start a page of ``width`` x ``height`` with ``font`` bound at ``size``.

        Raises :class:`PageCreateError` when the page cannot be allocated.
        """

        ...

    def paint_text(self, x: float, y: float, text: str) -> None:
        """Paint ``text`` with its baseline origin at ``(x, y)``."""

        ...

    def end_page(self) -> None:
        """Finish the current page."""

        ...

    def save(self, path: str | os.PathLike[str]) -> None:
        """Persist the document; raise :class:`SaveError` on failure."""

        ...

    def release(self) -> None:
        """Free the document.  Must be safe to call after any failure."""

        ...


B = TypeVar("B", bound=DocumentBackend)


@contextmanager
def open_document(backend: B) -> Iterator[B]:
    """Create a document on ``backend`` and release it however the block exits."""

    try:
        backend.new_document()
        yield backend
    finally:
        backend.release()


__all__ = ["DocumentBackend", "open_document"]
