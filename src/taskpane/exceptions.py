"""Exceptions for taskpane actions."""


class TaskpaneError(Exception):
    """Base exception for taskpane action errors."""

    pass


class NoResponseError(TaskpaneError):
    """Raised when reply is requested before a draft was generated."""

    def __init__(self):
        super().__init__("No response generated yet.")
