"""EmailExtractor for snapshotting the active message."""

import logging

from .exceptions import BodyFetchError, NoItemSelectedError
from .host import MailboxHost
from .models import EmailRecord

logger = logging.getLogger(__name__)


class EmailExtractor:
    """Reads the active message's metadata and plain text body.

    Example usage:
        extractor = EmailExtractor(host)
        record = await extractor.extract()
        print(record.subject, record.sender)
    """

    def __init__(self, host: MailboxHost):
        self._host = host

    async def extract(self) -> EmailRecord:
        """Snapshot the active message.

        Returns:
            EmailRecord for the open message.

        Raises:
            NoItemSelectedError: If no message is open.
            BodyFetchError: If the host fails to return the body.
        """
        item = self._host.get_active_message()
        if item is None:
            raise NoItemSelectedError()

        result = await item.get_body_as_text()
        if not result.succeeded:
            raise BodyFetchError(result.error or "unknown error")

        record = EmailRecord(
            subject=item.subject,
            sender=item.sender_email or "Unknown",
            received_time=item.date_time_created,
            body=result.value or "",
        )
        logger.debug(
            "Extracted email subject=%r sender=%s (%d body chars)",
            record.subject,
            record.sender,
            len(record.body),
        )
        return record
