"""Formatter module: converts generated markdown drafts to email HTML.

Public API:
    - ReplyFormatter: Draft text to FormattedReply
    - FormattedReply: HTML body plus optional extracted subject
    - convert_markdown: Bold, link and newline conversion
    - extract_subject: Pulls the **Subject: ...** line out of a draft
"""

from .models import FormattedReply
from .reply_formatter import FONT_STYLE, ReplyFormatter, convert_markdown, extract_subject

__all__ = [
    "ReplyFormatter",
    "FormattedReply",
    "convert_markdown",
    "extract_subject",
    "FONT_STYLE",
]
