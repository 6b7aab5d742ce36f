"""ReplyComposer for handing a formatted draft to the host."""

import logging
from typing import TYPE_CHECKING, Optional

from .exceptions import ComposeError, MailboxError, NoItemSelectedError
from .host import MailboxHost

if TYPE_CHECKING:
    from src.formatter.models import FormattedReply

logger = logging.getLogger(__name__)


class ReplyComposer:
    """Opens a reply-all draft pre-filled with a formatted reply."""

    def __init__(self, host: MailboxHost):
        self._host = host

    async def compose(
        self, reply: "FormattedReply", original_subject: Optional[str] = None
    ) -> str:
        """Open the host's reply-all form for the active message.

        Args:
            reply: Formatted reply body and optional extracted subject.
            original_subject: Subject to fall back on when the reply has
                none. Defaults to the active message's subject.

        Returns:
            The subject the draft was opened with.

        Raises:
            NoItemSelectedError: If no message is open.
            ComposeError: If the host rejects the draft.
        """
        item = self._host.get_active_message()
        if item is None:
            raise NoItemSelectedError()

        if original_subject is None:
            original_subject = item.subject
        subject = reply.resolve_subject(original_subject)

        try:
            await item.open_reply_all_form(html_body=reply.html_body, subject=subject)
        except MailboxError:
            raise
        except Exception as e:
            raise ComposeError(str(e)) from e

        logger.info("Opened reply-all draft with subject %r", subject)
        return subject
