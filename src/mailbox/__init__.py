"""Host mailbox module: reading the open message and composing replies.

Public API:
    - MailboxHost / MessageHandle: Interface to the host mail client
    - GmailMailboxHost: Gmail implementation of the host
    - EmailExtractor: Snapshots the open message as an EmailRecord
    - ReplyComposer: Opens a pre-filled reply-all draft
    - EmailRecord: Read-only message snapshot
    - BodyResult / AsyncResultStatus: Result of a host body fetch
    - MailboxError and subclasses: Host failures
"""

from .composer import ReplyComposer
from .exceptions import (
    BodyFetchError,
    ComposeError,
    GmailAuthError,
    MailboxError,
    NoItemSelectedError,
    NonInteractiveAuthError,
    ScopeMismatchError,
)
from .extractor import EmailExtractor
from .gmail_auth import GmailAuthenticator
from .gmail_host import GmailMailboxHost, GmailMessageHandle
from .host import MailboxHost, MessageHandle
from .models import AsyncResultStatus, BodyResult, EmailRecord

__all__ = [
    # Main classes
    "EmailExtractor",
    "ReplyComposer",
    "MailboxHost",
    "MessageHandle",
    "GmailMailboxHost",
    "GmailMessageHandle",
    "GmailAuthenticator",
    # Models
    "EmailRecord",
    "BodyResult",
    "AsyncResultStatus",
    # Exceptions
    "MailboxError",
    "NoItemSelectedError",
    "BodyFetchError",
    "ComposeError",
    "GmailAuthError",
    "ScopeMismatchError",
    "NonInteractiveAuthError",
]
