"""Abstract interface for the host mailbox."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from .models import BodyResult


class MessageHandle(ABC):
    """Handle to the message currently open in the host mail client.

    Implementations wrap a concrete mail client (Gmail, Outlook, a test
    fake). Body retrieval and reply composition are awaitable because the
    host may need to do I/O for them.
    """

    @property
    @abstractmethod
    def subject(self) -> Optional[str]:
        """Subject line of the message."""
        pass

    @property
    @abstractmethod
    def sender_email(self) -> Optional[str]:
        """Sender email address, if the host exposes one."""
        pass

    @property
    @abstractmethod
    def date_time_created(self) -> Optional[datetime]:
        """When the message was created, if known."""
        pass

    @abstractmethod
    async def get_body_as_text(self) -> BodyResult:
        """Fetch the body coerced to plain text.

        Host failures are reported through the returned BodyResult,
        not raised.
        """
        pass

    @abstractmethod
    async def open_reply_all_form(self, html_body: str, subject: str) -> None:
        """Open a reply-all draft pre-filled with the given body and subject.

        Raises:
            ComposeError: If the host rejects the draft.
        """
        pass


class MailboxHost(ABC):
    """The host mail client the add-in runs inside."""

    @abstractmethod
    def get_active_message(self) -> Optional[MessageHandle]:
        """Return the open message, or None if nothing is selected."""
        pass
