"""Helpers for turning Gmail message payloads into plain text."""

import base64
import re
from email.utils import getaddresses, parseaddr
from html.parser import HTMLParser


def decode_base64(data: str) -> str:
    """Decode Gmail's URL-safe, possibly unpadded, base64 data as UTF-8."""
    data += "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data).decode("utf-8", errors="replace")


def _find_part(payload: dict, mime_type: str) -> str | None:
    """Depth-first search for the first part of the given MIME type."""
    data = payload.get("body", {}).get("data")
    if data and payload.get("mimeType", "") == mime_type:
        return decode_base64(data)
    for part in payload.get("parts", []):
        found = _find_part(part, mime_type)
        if found is not None:
            return found
    return None


def extract_plain_text(payload: dict) -> str:
    """Return the message body as plain text.

    Prefers a text/plain part; falls back to stripping the text/html part.
    A single-part message without a declared text type is decoded as-is.
    """
    text = _find_part(payload, "text/plain")
    if text is not None:
        return text

    html = _find_part(payload, "text/html")
    if html is not None:
        return html_to_plain_text(html)

    data = payload.get("body", {}).get("data")
    return decode_base64(data) if data else ""


def parse_address(header_value: str) -> str:
    """Return the bare address from a From-style header ("" if none)."""
    return parseaddr(header_value)[1]


def parse_address_list(*header_values: str) -> list[str]:
    """Return the bare addresses from To/Cc-style headers, in order."""
    return [addr for _, addr in getaddresses(list(header_values)) if addr]


class _TextCollector(HTMLParser):
    """Collects visible text, breaking lines at block elements."""

    SKIP = {"script", "style", "head", "title"}
    BREAKS = {"p", "div", "br", "tr", "li", "h1", "h2", "h3", "h4", "h5", "h6"}

    def __init__(self):
        super().__init__()
        self._parts: list[str] = []
        self._skipping = False

    def handle_starttag(self, tag: str, attrs: list) -> None:
        tag = tag.lower()
        if tag in self.SKIP:
            self._skipping = True
        if tag in self.BREAKS:
            self._parts.append("\n")

    def handle_endtag(self, tag: str) -> None:
        if tag.lower() in self.SKIP:
            self._skipping = False

    def handle_data(self, data: str) -> None:
        if not self._skipping:
            self._parts.append(data)

    def text(self) -> str:
        text = re.sub(r"[ \t]+", " ", "".join(self._parts))
        text = re.sub(r"\n\s*\n", "\n\n", text)
        return text.strip()


def html_to_plain_text(html: str) -> str:
    """Strip tags from an HTML body, keeping paragraph breaks."""
    collector = _TextCollector()
    collector.feed(html)
    collector.close()
    return collector.text()
