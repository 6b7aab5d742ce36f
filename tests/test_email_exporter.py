"""Tests for exporting the open message as JSON."""

import json
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.export import (
    DirectorySaver,
    EmailExporter,
    ExportError,
    FileSaver,
    export_blob,
    export_filename,
)
from src.mailbox import EmailRecord

NOW = datetime(2025, 3, 20, 9, 15, tzinfo=timezone.utc)


@pytest.fixture
def record():
    return EmailRecord(
        subject="Estate Plan - Smith",
        sender="bm@example.com",
        received_time=datetime(2025, 3, 20, 9, 15),
        body="Hi Smith,\n\nThanks for your call.",
    )


class TestExportFilename:
    def test_subject_and_epoch_millis(self, record):
        assert export_filename(record, NOW) == "Estate Plan - Smith_1742462100000.json"

    def test_missing_subject(self):
        record = EmailRecord(subject=None, sender="Unknown", received_time=None, body="")
        assert export_filename(record, NOW) == "email_1742462100000.json"

    def test_unsafe_characters_replaced(self):
        record = EmailRecord(
            subject='Re: A/B "quote" <x>?', sender="Unknown", received_time=None, body=""
        )
        assert export_filename(record, NOW) == "Re_ A_B _quote_ _x___1742462100000.json"


class TestExportBlob:
    def test_json_shape(self, record):
        data = json.loads(export_blob(record).decode("utf-8"))
        assert data == {
            "subject": "Estate Plan - Smith",
            "sender": "bm@example.com",
            "receivedTime": "2025-03-20T09:15:00.000Z",
            "bodyContent": "Hi Smith,\n\nThanks for your call.",
        }

    def test_pretty_printed_utf8(self):
        record = EmailRecord(subject="Grüße", sender="a@b.c", received_time=None, body="")
        blob = export_blob(record)
        assert "Grüße".encode("utf-8") in blob
        assert b'\n  "subject"' in blob

    def test_missing_time_is_null(self):
        record = EmailRecord(subject="S", sender="a@b.c", received_time=None, body="")
        assert json.loads(export_blob(record))["receivedTime"] is None

    def test_round_trips_to_record(self, record):
        restored = EmailRecord.from_dict(json.loads(export_blob(record)))
        assert restored.to_dict() == record.to_dict()


class TestDirectorySaver:
    def test_creates_directory(self, tmp_path):
        saver = DirectorySaver(tmp_path / "nested" / "exports")
        path = saver.save(b"{}", "x.json")
        assert path == tmp_path / "nested" / "exports" / "x.json"
        assert path.read_bytes() == b"{}"

    def test_write_failure(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        saver = DirectorySaver(blocker)

        with pytest.raises(ExportError) as exc_info:
            saver.save(b"{}", "x.json")

        assert str(exc_info.value).startswith("Error saving email: ")


class TestEmailExporter:
    def test_export_writes_file(self, record, tmp_path):
        exporter = EmailExporter(DirectorySaver(tmp_path))

        path = exporter.export(record, now=NOW)

        assert path.name == "Estate Plan - Smith_1742462100000.json"
        assert json.loads(path.read_text(encoding="utf-8"))["sender"] == "bm@example.com"

    def test_export_uses_saver(self, record):
        saver = MagicMock(spec=FileSaver)
        saver.save.return_value = Path("/downloads/x.json")

        assert EmailExporter(saver).export(record, now=NOW) == Path("/downloads/x.json")
        blob, filename = saver.save.call_args.args
        assert filename.endswith("_1742462100000.json")
        assert json.loads(blob)["subject"] == "Estate Plan - Smith"

    def test_export_defaults_to_current_time(self, record, tmp_path):
        before = int(datetime.now(timezone.utc).timestamp() * 1000)
        path = EmailExporter(DirectorySaver(tmp_path)).export(record)
        millis = int(path.stem.rsplit("_", 1)[1])
        assert millis >= before
