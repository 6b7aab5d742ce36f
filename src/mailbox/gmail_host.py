"""Gmail-backed implementation of the host mailbox."""

import asyncio
import base64
import logging
from datetime import datetime, timezone
from email.mime.text import MIMEText
from email.utils import parsedate_to_datetime
from typing import Optional

from google.auth.exceptions import GoogleAuthError
from googleapiclient.discovery import Resource
from googleapiclient.errors import HttpError

from .body_parser import extract_plain_text, parse_address, parse_address_list
from .exceptions import ComposeError, MailboxError
from .gmail_auth import GmailAuthenticator
from .host import MailboxHost, MessageHandle
from .models import BodyResult

logger = logging.getLogger(__name__)

METADATA_HEADERS = ["Subject", "From", "To", "Cc", "Date", "Message-ID", "References"]


class GmailMessageHandle(MessageHandle):
    """A Gmail message opened as the add-in's active item.

    Metadata comes from a format="metadata" fetch; the body is fetched on
    demand. Reply-all creates a Gmail draft in the message's thread.
    """

    def __init__(self, service: Resource, message: dict, account_email: str = ""):
        self._service = service
        self._message = message
        self._account_email = account_email.lower()
        headers = message.get("payload", {}).get("headers", [])
        self._headers = {h["name"].lower(): h["value"] for h in headers}

    @property
    def id(self) -> str:
        return self._message["id"]

    @property
    def thread_id(self) -> str:
        return self._message["threadId"]

    @property
    def subject(self) -> Optional[str]:
        return self._headers.get("subject")

    @property
    def sender_email(self) -> Optional[str]:
        return parse_address(self._headers.get("from", "")) or None

    @property
    def date_time_created(self) -> Optional[datetime]:
        date_str = self._headers.get("date")
        if date_str:
            try:
                return parsedate_to_datetime(date_str)
            except (ValueError, TypeError):
                pass
        internal_date = self._message.get("internalDate")
        if internal_date:
            return datetime.fromtimestamp(int(internal_date) / 1000, tz=timezone.utc)
        return None

    def reply_all_recipients(self) -> tuple[list[str], list[str]]:
        """Return (to, cc) for a reply-all, excluding the account's own address."""
        sender = self.sender_email
        to = [sender] if sender and sender.lower() != self._account_email else []

        seen = {addr.lower() for addr in to} | {self._account_email}
        cc = []
        for addr in parse_address_list(
            self._headers.get("to", ""), self._headers.get("cc", "")
        ):
            if addr.lower() not in seen:
                seen.add(addr.lower())
                cc.append(addr)

        # Replying to our own sent message: address the original recipients
        if not to and cc:
            to, cc = cc, []
        return to, cc

    def _fetch_body(self) -> str:
        message = (
            self._service.users()
            .messages()
            .get(userId="me", id=self.id, format="full")
            .execute()
        )
        return extract_plain_text(message.get("payload", {}))

    async def get_body_as_text(self) -> BodyResult:
        try:
            body = await asyncio.to_thread(self._fetch_body)
        except (HttpError, OSError, GoogleAuthError) as e:
            logger.warning("Failed to fetch body of message %s: %s", self.id, e)
            return BodyResult.failure(str(e))
        return BodyResult.success(body)

    def _build_draft(self, html_body: str, subject: str) -> dict:
        to, cc = self.reply_all_recipients()

        mime = MIMEText(html_body, "html", "utf-8")
        mime["To"] = ", ".join(to)
        if cc:
            mime["Cc"] = ", ".join(cc)
        mime["Subject"] = subject

        message_id = self._headers.get("message-id")
        if message_id:
            mime["In-Reply-To"] = message_id
            references = self._headers.get("references", "")
            mime["References"] = f"{references} {message_id}".strip()

        raw = base64.urlsafe_b64encode(mime.as_bytes()).decode()
        return {"message": {"raw": raw, "threadId": self.thread_id}}

    def _create_draft(self, html_body: str, subject: str) -> str:
        draft = (
            self._service.users()
            .drafts()
            .create(userId="me", body=self._build_draft(html_body, subject))
            .execute()
        )
        return draft["id"]

    async def open_reply_all_form(self, html_body: str, subject: str) -> None:
        try:
            draft_id = await asyncio.to_thread(self._create_draft, html_body, subject)
        except HttpError as e:
            raise ComposeError(str(e)) from e
        logger.info("Created Gmail draft %s in thread %s", draft_id, self.thread_id)


class GmailMailboxHost(MailboxHost):
    """Runs the add-in against a Gmail account.

    The active message is chosen with select(); until then (or if the id
    does not exist) there is no active message.

    Example usage:
        host = GmailMailboxHost()
        await host.select("18c2f0a1b2c3d4e5")
        record = await EmailExtractor(host).extract()
    """

    def __init__(
        self,
        authenticator: Optional[GmailAuthenticator] = None,
        service: Optional[Resource] = None,
    ):
        self._auth = authenticator
        self._service = service
        self._active: Optional[GmailMessageHandle] = None

    def _get_service(self) -> Resource:
        if self._service is None:
            if self._auth is None:
                self._auth = GmailAuthenticator()
            self._service = self._auth.get_service()
        return self._service

    def _load(self, message_id: str) -> Optional[GmailMessageHandle]:
        service = self._get_service()
        try:
            message = (
                service.users()
                .messages()
                .get(
                    userId="me",
                    id=message_id,
                    format="metadata",
                    metadataHeaders=METADATA_HEADERS,
                )
                .execute()
            )
            profile = service.users().getProfile(userId="me").execute()
        except HttpError as e:
            if e.resp.status == 404:
                logger.warning("Gmail message %s not found", message_id)
                return None
            raise MailboxError(f"Unable to load message {message_id}: {e}") from e
        except (OSError, GoogleAuthError) as e:
            raise MailboxError(f"Unable to load message {message_id}: {e}") from e

        return GmailMessageHandle(service, message, profile.get("emailAddress", ""))

    async def select(self, message_id: str) -> bool:
        """Make the given Gmail message the active item.

        Returns:
            True if the message was found.

        Raises:
            MailboxError: If Gmail fails for a reason other than not-found.
        """
        self._active = await asyncio.to_thread(self._load, message_id)
        return self._active is not None

    def get_active_message(self) -> Optional[GmailMessageHandle]:
        return self._active
