"""PromptBuilder for turning an email into a chat-completion request."""

import logging
import re
from typing import Optional, Sequence

from src.mailbox.models import EmailRecord

from .models import CompletionRequest, TemplateSet
from .prompts import (
    DEFAULT_MEETING_OPTIONS,
    ESTATE_PLANNING_KEYWORDS,
    SUBJECT_PREFIX,
    SYSTEM_PROMPT,
    TEMPLATE_A,
    TEMPLATE_B,
    USER_PROMPT_TEMPLATE,
)

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATES = TemplateSet(general=TEMPLATE_A, estate_planning=TEMPLATE_B)

_ESTATE_PATTERN = re.compile(
    r"\b(?:" + "|".join(re.escape(k) for k in ESTATE_PLANNING_KEYWORDS) + r")\b",
    re.IGNORECASE,
)


def detect_estate_planning(record: EmailRecord) -> bool:
    """Check whether the email mentions any estate-planning indicator.

    This mirrors the routing rule given to the model; the model still makes
    the final template choice.
    """
    text = f"{record.subject or ''}\n{record.body}"
    return _ESTATE_PATTERN.search(text) is not None


class PromptBuilder:
    """Builds the drafting prompt for an email.

    Total over any EmailRecord: a missing subject renders empty, a missing
    timestamp drops the Date line, and an empty body is allowed.

    Example usage:
        builder = PromptBuilder()
        request = builder.build(record)
        payload = request.to_payload()
    """

    def __init__(
        self,
        meeting_options: Optional[Sequence[str]] = None,
        templates: Optional[TemplateSet] = None,
        system_prompt: Optional[str] = None,
        user_prompt_template: Optional[str] = None,
    ):
        """Initialize the PromptBuilder.

        Args:
            meeting_options: Ordered meeting times offered to the client.
            templates: Reference templates A and B.
            system_prompt: Custom system prompt.
            user_prompt_template: Custom user prompt template. Uses the same
                placeholders as USER_PROMPT_TEMPLATE.
        """
        self._meeting_options = tuple(
            DEFAULT_MEETING_OPTIONS if meeting_options is None else meeting_options
        )
        self._templates = templates or DEFAULT_TEMPLATES
        self._system_prompt = system_prompt or SYSTEM_PROMPT
        self._user_prompt_template = user_prompt_template or USER_PROMPT_TEMPLATE

    def _format_user_prompt(self, record: EmailRecord) -> str:
        received = record.received_iso
        return self._user_prompt_template.format(
            subject=record.subject or "",
            sender=record.sender or "Unknown",
            date_line=f"Date: {received}\n" if received else "",
            body=record.body,
            meeting_times="\n".join(f"- {option}" for option in self._meeting_options),
            estate_keywords=", ".join(f'"{k}"' for k in ESTATE_PLANNING_KEYWORDS),
            template_a=self._templates.general,
            template_b=self._templates.estate_planning,
            subject_prefix=SUBJECT_PREFIX,
            subject_prefix_stripped=SUBJECT_PREFIX.strip(),
        )

    def build(self, record: EmailRecord) -> CompletionRequest:
        """Build the completion request for an email."""
        logger.debug(
            "Building prompt for %r (estate planning indicators: %s)",
            record.subject,
            detect_estate_planning(record),
        )
        return CompletionRequest(
            system_prompt=self._system_prompt,
            user_prompt=self._format_user_prompt(record),
        )

    @property
    def meeting_options(self) -> tuple[str, ...]:
        return self._meeting_options
