"""In-memory backend recording every command it receives.

Used for dry runs (``glyphsheet plan``) and to check that two runs issue
identical command streams.  Nothing is written to disk.
"""

from __future__ import annotations

import os
from typing import Any

from glyphsheet.fonts import FontHandle

Command = tuple[Any, ...]


class RecordingBackend:
    """Backend that appends ``(name, *args)`` tuples to :attr:`commands`."""

    def __init__(self) -> None:
        self.commands: list[Command] = []
        self.released = False

    def new_document(self) -> None:
        self.commands.append(("new_document",))

    def add_page(self, width: float, height: float, font: FontHandle, size: float) -> None:
        self.commands.append(("add_page", width, height, font.name, size))

    def paint_text(self, x: float, y: float, text: str) -> None:
        self.commands.append(("paint_text", x, y, text))

    def end_page(self) -> None:
        self.commands.append(("end_page",))

    def save(self, path: str | os.PathLike[str]) -> None:
        self.commands.append(("save", os.fspath(path)))

    def release(self) -> None:
        self.released = True

    # -- inspection helpers -------------------------------------------------

    def pages(self) -> list[list[Command]]:
        """Return paint commands grouped by page."""

        grouped: list[list[Command]] = []
        for cmd in self.commands:
            if cmd[0] == "add_page":
                grouped.append([])
            elif cmd[0] == "paint_text":
                grouped[-1].append(cmd)
        return grouped

    def count(self, name: str) -> int:
        return sum(1 for cmd in self.commands if cmd[0] == name)


__all__ = ["Command", "RecordingBackend"]
