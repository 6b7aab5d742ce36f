"""Export module: saves the open message as a downloadable JSON file."""

from .exceptions import ExportError
from .exporter import (
    DirectorySaver,
    EmailExporter,
    FileSaver,
    export_blob,
    export_filename,
)

__all__ = [
    "EmailExporter",
    "FileSaver",
    "DirectorySaver",
    "export_blob",
    "export_filename",
    "ExportError",
]
