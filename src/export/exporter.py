"""EmailExporter for saving the open message as a JSON file."""

import json
import logging
import re
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from src.mailbox.models import EmailRecord

from .exceptions import ExportError

logger = logging.getLogger(__name__)

# Characters that are not allowed in file names on common filesystems
_UNSAFE_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|\x00-\x1f]')


def export_filename(record: EmailRecord, now: Optional[datetime] = None) -> str:
    """Build `<subject-or-"email">_<epoch-millis>.json` for a record."""
    now = now or datetime.now(timezone.utc)
    stem = _UNSAFE_FILENAME_CHARS.sub("_", record.subject or "") or "email"
    return f"{stem}_{int(now.timestamp() * 1000)}.json"


def export_blob(record: EmailRecord) -> bytes:
    """Serialize a record as pretty-printed JSON bytes."""
    return json.dumps(record.to_dict(), indent=2, ensure_ascii=False).encode("utf-8")


class FileSaver(ABC):
    """Destination for exported files."""

    @abstractmethod
    def save(self, blob: bytes, filename: str) -> Path:
        """Store the blob under the suggested filename and return where it went."""
        pass


class DirectorySaver(FileSaver):
    """Writes exports into a local directory, creating it if needed."""

    def __init__(self, output_dir: Path):
        self._output_dir = Path(output_dir)

    def save(self, blob: bytes, filename: str) -> Path:
        path = self._output_dir / filename
        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
            path.write_bytes(blob)
        except OSError as e:
            raise ExportError(str(e)) from e
        return path

    @property
    def output_dir(self) -> Path:
        return self._output_dir


class EmailExporter:
    """Exports EmailRecords as JSON files.

    Example usage:
        exporter = EmailExporter(DirectorySaver(Path("exports")))
        path = exporter.export(record)
    """

    def __init__(self, saver: FileSaver):
        self._saver = saver

    def export(self, record: EmailRecord, now: Optional[datetime] = None) -> Path:
        """Save the record and return the written path.

        Raises:
            ExportError: If the file cannot be written.
        """
        path = self._saver.save(export_blob(record), export_filename(record, now))
        logger.info("Saved email %r to %s", record.subject, path)
        return path
