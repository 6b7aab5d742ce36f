"""Data models for taskpane action results."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ActionResult:
    """Outcome of one user-triggered taskpane action.

    Attributes:
        action: Action name ("save", "generate", "reply").
        success: Whether the action completed.
        status: Human-readable status shown to the user.
        duration_seconds: Wall-clock time spent in the action.
        details: Action-specific output (export path, reply subject, ...).
        error: Exception text when the action failed.
        skipped: True when the action was already in flight and did nothing.
    """

    action: str
    success: bool
    status: str
    duration_seconds: float = 0.0
    details: dict[str, Any] = field(default_factory=dict)
    error: str | None = None
    skipped: bool = False
