"""Exceptions for the export module."""


class ExportError(Exception):
    """Raised when an email export cannot be written."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Error saving email: {reason}")
