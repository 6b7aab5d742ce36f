"""Exceptions for the completion client module."""

from typing import Optional


class CompletionError(Exception):
    """Base exception for chat-completion errors."""

    pass


class CredentialMissingError(CompletionError):
    """No API key was resolved; the request was not sent."""

    def __init__(self):
        super().__init__(
            "Azure OpenAI API key not configured. Please add your key to the .env file."
        )


class NetworkError(CompletionError):
    """Transport-level failure (DNS, refused connection, timeout)."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Network error: {reason}")


class HttpError(CompletionError):
    """The endpoint answered with a non-2xx status.

    Attributes:
        status: HTTP status code.
        detail: Error message from the JSON error body, or the raw body text.
    """

    def __init__(self, status: int, detail: str):
        self.status = status
        self.detail = detail
        super().__init__(f"HTTP {status}: {detail}")


class EmptyResponseError(CompletionError):
    """The endpoint answered 2xx but returned no choices.

    Attributes:
        raw_response: The response body, if available, for debugging.
    """

    def __init__(self, message: str = "No content in the response from Azure OpenAI.",
                 raw_response: Optional[str] = None):
        super().__init__(message)
        self.raw_response = raw_response
