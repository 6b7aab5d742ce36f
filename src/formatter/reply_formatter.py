"""Markdown-to-HTML conversion for generated reply drafts."""

import re
from typing import Optional

from src.completion.extraction import ANALYSIS_SECTION, DRAFT_HEADING, extract_draft

from .models import FormattedReply

FONT_STYLE = "font-family: Arial, sans-serif; font-size: 10pt;"

_SUBJECT_LINE = re.compile(r"\*\*Subject:[ \t]*(.*?)\*\*[ \t]*(?:\r?\n)?", re.IGNORECASE)
_BOLD = re.compile(r"\*\*(.*?)\*\*")
# Bare URLs only: not the target of a markdown link, not inside an attribute
_BARE_URL = re.compile(r"(?<![\[(=\"'])(https?://[^\s()\[\]<>\"]+)")
_MARKDOWN_LINK = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
_ANCHOR = re.compile(r"<a\s[^>]*>.*?</a>", re.IGNORECASE | re.DOTALL)

# Markers a user-edited draft may still carry
_REPLY_RULES = (ANALYSIS_SECTION, DRAFT_HEADING)


def extract_subject(text: str) -> tuple[Optional[str], str]:
    """Pull the first **Subject: ...** line out of a draft.

    Returns:
        Tuple of (subject, remaining text). Subject is None when there is
        no subject line; the line and one trailing newline are removed.
    """
    match = _SUBJECT_LINE.search(text)
    if match is None:
        return None, text
    subject = match.group(1).strip() or None
    return subject, text[: match.start()] + text[match.end():]


def _outside_anchors(text: str, convert) -> str:
    """Apply `convert` to the parts of `text` not already inside <a> tags."""
    parts = []
    pos = 0
    for match in _ANCHOR.finditer(text):
        parts.append(convert(text[pos : match.start()]))
        parts.append(match.group(0))
        pos = match.end()
    parts.append(convert(text[pos:]))
    return "".join(parts)


def _link_bare_urls(text: str) -> str:
    return _BARE_URL.sub(r'<a href="\1">\1</a>', text)


def convert_markdown(text: str) -> str:
    """Convert bold, markdown links, bare URLs and newlines to HTML.

    Markdown links are converted first and bare URLs are only linked
    outside existing anchors, so a URL in a link's text or target is never
    linked twice. Applying this to its own output changes nothing.
    """
    text = _BOLD.sub(r"<strong>\1</strong>", text)
    text = _MARKDOWN_LINK.sub(r'<a href="\2">\1</a>', text)
    text = _outside_anchors(text, _link_bare_urls)
    return text.replace("\r\n", "\n").replace("\n", "<br>")


class ReplyFormatter:
    """Turns a generated draft into a FormattedReply.

    Example usage:
        reply = ReplyFormatter().format(draft_text)
        subject = reply.resolve_subject(original_subject)
    """

    def __init__(self, font_style: str = FONT_STYLE, subject_header: bool = True):
        """Initialize the ReplyFormatter.

        Args:
            font_style: CSS for the wrapping <div>.
            subject_header: Repeat an extracted subject as plain text at the
                top of the body so it is easy to copy.
        """
        self._font_style = font_style
        self._subject_header = subject_header

    def format(self, text: str) -> FormattedReply:
        text = extract_draft(text, _REPLY_RULES)
        subject, body = extract_subject(text)
        html = convert_markdown(body)

        if subject and self._subject_header:
            html = f"{subject}<br><br>{html}"

        return FormattedReply(
            subject=subject,
            html_body=f'<div style="{self._font_style}">{html}</div>',
        )
