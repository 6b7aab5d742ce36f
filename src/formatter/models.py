"""Data models for the formatter module."""

from dataclasses import dataclass
from typing import Optional

from src.drafting.prompts import SUBJECT_PREFIX


@dataclass(frozen=True)
class FormattedReply:
    """An HTML reply body ready for the reply-all form.

    Attributes:
        subject: Subject extracted from the draft's **Subject: ...** line.
        html_body: HTML body with all markdown converted.
    """

    subject: Optional[str]
    html_body: str

    def resolve_subject(self, original_subject: Optional[str]) -> str:
        """Pick the reply subject.

        The extracted subject wins; otherwise the original subject gets the
        "Conference - " prefix unless it already has it.
        """
        if self.subject:
            return self.subject
        original = original_subject or ""
        if original.startswith(SUBJECT_PREFIX):
            return original
        return SUBJECT_PREFIX + original
