"""Data models for the mailbox module."""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """Render a timestamp as UTC ISO-8601 with milliseconds and a Z suffix.

    Naive datetimes are assumed to already be in UTC.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    iso = value.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return iso.replace("+00:00", "Z")


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse a timestamp produced by format_timestamp()."""
    if not value:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


@dataclass(frozen=True)
class EmailRecord:
    """Read-only snapshot of the message open in the host mailbox.

    Attributes:
        subject: Subject line, or None when the message has none.
        sender: Sender email address ("Unknown" if the host has none).
        received_time: When the message was created, if known.
        body: Plain text body (rich formatting already coerced to text).
    """

    subject: Optional[str]
    sender: str
    received_time: Optional[datetime]
    body: str

    @property
    def received_iso(self) -> Optional[str]:
        """Received time in the export timestamp format."""
        return format_timestamp(self.received_time)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON export shape."""
        return {
            "subject": self.subject,
            "sender": self.sender,
            "receivedTime": self.received_iso,
            "bodyContent": self.body,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EmailRecord":
        """Deserialize from the JSON export shape."""
        return cls(
            subject=data.get("subject"),
            sender=data.get("sender") or "Unknown",
            received_time=parse_timestamp(data.get("receivedTime")),
            body=data.get("bodyContent") or "",
        )


class AsyncResultStatus(Enum):
    """Outcome of an asynchronous host call."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class BodyResult:
    """Result of fetching a message body from the host.

    Attributes:
        status: Whether the host call succeeded.
        value: Body text on success.
        error: Host error message on failure.
    """

    status: AsyncResultStatus
    value: Optional[str] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.status == AsyncResultStatus.SUCCEEDED

    @classmethod
    def success(cls, value: str) -> "BodyResult":
        return cls(status=AsyncResultStatus.SUCCEEDED, value=value)

    @classmethod
    def failure(cls, error: str) -> "BodyResult":
        return cls(status=AsyncResultStatus.FAILED, error=error)
