"""PDF backend built on :mod:`reportlab.pdfgen.canvas`.

The canvas renders into an in-memory buffer.  :meth:`ReportLabBackend.save`
writes the finished bytes to a temporary file beside the destination and
renames it into place, so a failed save never leaves a partial PDF at the
destination path.  Each character is painted through its own text object
(``beginText`` / ``drawText``) so no text state carries over between
characters.
"""

from __future__ import annotations

import io
import os
import tempfile
from pathlib import Path

from reportlab.pdfgen import canvas

from glyphsheet.fonts import FontHandle
from glyphsheet.utils.errors import BackendInitError, PageCreateError, SaveError


def _output_mode(dest: Path) -> int:
    """Return the permission bits a plain write to ``dest`` would produce.

    An existing file keeps its mode; a new one gets ``0o666`` minus the umask.
    """

    try:
        return dest.stat().st_mode & 0o7777
    except FileNotFoundError:
        pass
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class ReportLabBackend:
    """Document backend producing a PDF file.

    Parameters
    ----------
    title, author:
        Optional document metadata.
    invariant:
        When ``True`` reportlab omits timestamps and random document IDs so
        identical runs produce identical bytes.
    """

    def __init__(
        self,
        *,
        title: str | None = None,
        author: str | None = None,
        invariant: bool = False,
    ) -> None:
        self.title = title
        self.author = author
        self.invariant = invariant
        self._buffer: io.BytesIO | None = None
        self._canvas: canvas.Canvas | None = None

    @property
    def canvas(self) -> canvas.Canvas:
        if self._canvas is None:
            raise BackendInitError("no document; call new_document() first")
        return self._canvas

    def new_document(self) -> None:
        try:
            self._buffer = io.BytesIO()
            self._canvas = canvas.Canvas(self._buffer, invariant=int(self.invariant))
            if self.title:
                self._canvas.setTitle(self.title)
            if self.author:
                self._canvas.setAuthor(self.author)
        except Exception as exc:  # reportlab raises plain Exception subclasses
            self.release()
            raise BackendInitError("cannot create PDF document", cause=exc) from exc

    def add_page(self, width: float, height: float, font: FontHandle, size: float) -> None:
        c = self.canvas
        try:
            c.setPageSize((width, height))
            c.setFont(font.name, size)
        except Exception as exc:  # unknown fonts surface as KeyError or reportlab errors
            raise PageCreateError(f"cannot start page with font {font.name!r}", cause=exc) from exc

    def paint_text(self, x: float, y: float, text: str) -> None:
        c = self.canvas
        text_object = c.beginText(x, y)
        text_object.textOut(text)
        c.drawText(text_object)

    def end_page(self) -> None:
        self.canvas.showPage()

    def save(self, path: str | os.PathLike[str]) -> None:
        dest = Path(path)
        try:
            self.canvas.save()
            data = self._buffer.getvalue() if self._buffer is not None else b""
        except Exception as exc:  # reportlab serialization errors are untyped
            raise SaveError(f"cannot serialize document for {dest}", cause=exc) from exc

        tmp_name: str | None = None
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "wb", dir=dest.parent, prefix=f".{dest.name}.", suffix=".tmp", delete=False
            ) as fh:
                tmp_name = fh.name
                fh.write(data)
            os.chmod(tmp_name, _output_mode(dest))
            os.replace(tmp_name, dest)
            tmp_name = None
        except OSError as exc:
            raise SaveError(f"cannot write {dest}", cause=exc) from exc
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)

    def release(self) -> None:
        if self._buffer is not None:
            self._buffer.close()
        self._buffer = None
        self._canvas = None


__all__ = ["ReportLabBackend"]
