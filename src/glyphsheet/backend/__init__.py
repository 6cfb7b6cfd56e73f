"""Document-authoring backends the layout driver paints into."""

from .base import DocumentBackend, open_document
from .recording import Command, RecordingBackend
from .reportlab_backend import ReportLabBackend

__all__ = [
    "Command",
    "DocumentBackend",
    "RecordingBackend",
    "ReportLabBackend",
    "open_document",
]
