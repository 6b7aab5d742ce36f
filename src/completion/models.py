"""Data models for the completion client module."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CompletionResult:
    """Generated draft text from a chat completion.

    Attributes:
        raw_text: The first choice's content, trimmed.
        text: raw_text with any analysis/draft preamble removed.
    """

    raw_text: str
    text: str
