"""Exceptions for the mailbox module."""


class MailboxError(Exception):
    """Base exception for host mailbox errors."""

    pass


class NoItemSelectedError(MailboxError):
    """Raised when no message is open in the host mailbox."""

    def __init__(self):
        super().__init__("No email selected")


class BodyFetchError(MailboxError):
    """Raised when the host fails to return the message body.

    Attributes:
        reason: Host-reported failure message.
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Error getting email body: {reason}")


class ComposeError(MailboxError):
    """Raised when the host rejects the reply-all draft."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Error creating reply: {reason}")


class GmailAuthError(MailboxError):
    """Raised when Gmail authentication fails."""

    pass


class ScopeMismatchError(GmailAuthError):
    """Raised when the stored token lacks scopes the host needs.

    Reading the message needs gmail.readonly and opening a draft needs
    gmail.compose; tokens minted for another tool often have only one.
    """

    def __init__(self, required_scopes: list[str], token_scopes: list[str]):
        self.required_scopes = required_scopes
        self.token_scopes = token_scopes
        missing = sorted(set(required_scopes) - set(token_scopes))
        super().__init__(
            f"Gmail token is missing scopes {missing}. "
            "Delete the token file and re-authenticate."
        )


class NonInteractiveAuthError(GmailAuthError):
    """Raised when Gmail needs a browser login but interaction is disabled."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(
            f"Gmail login requires user interaction but GMAIL_NON_INTERACTIVE is set: {reason}"
        )
