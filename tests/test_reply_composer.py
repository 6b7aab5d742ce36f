"""Unit tests for the ReplyComposer."""

import pytest

from src.formatter import FormattedReply
from src.mailbox import ComposeError, NoItemSelectedError, ReplyComposer
from tests.mailbox_test_helpers import FakeMailboxHost, FakeMessageHandle


class TestReplyComposer:
    @pytest.mark.asyncio
    async def test_uses_extracted_subject(self):
        message = FakeMessageHandle(subject="Estate Plan - Smith")
        composer = ReplyComposer(FakeMailboxHost(message))
        reply = FormattedReply(subject="Conference - Custom", html_body="<div>Hi</div>")

        subject = await composer.compose(reply)

        assert subject == "Conference - Custom"
        assert message.replies == [
            {"html_body": "<div>Hi</div>", "subject": "Conference - Custom"}
        ]

    @pytest.mark.asyncio
    async def test_falls_back_to_prefixed_original_subject(self):
        message = FakeMessageHandle(subject="Estate Plan - Smith")
        composer = ReplyComposer(FakeMailboxHost(message))

        subject = await composer.compose(FormattedReply(subject=None, html_body="<div/>"))

        assert subject == "Conference - Estate Plan - Smith"

    @pytest.mark.asyncio
    async def test_explicit_original_subject(self):
        message = FakeMessageHandle(subject="Ignored")
        composer = ReplyComposer(FakeMailboxHost(message))

        subject = await composer.compose(
            FormattedReply(subject=None, html_body="<div/>"),
            original_subject="Conference - Already prefixed",
        )

        assert subject == "Conference - Already prefixed"

    @pytest.mark.asyncio
    async def test_no_item_selected(self):
        composer = ReplyComposer(FakeMailboxHost(None))
        with pytest.raises(NoItemSelectedError):
            await composer.compose(FormattedReply(subject=None, html_body=""))

    @pytest.mark.asyncio
    async def test_host_rejection(self):
        message = FakeMessageHandle(compose_error="Item is read-only")
        composer = ReplyComposer(FakeMailboxHost(message))

        with pytest.raises(ComposeError) as exc_info:
            await composer.compose(FormattedReply(subject="S", html_body=""))
        assert str(exc_info.value) == "Error creating reply: Item is read-only"

    @pytest.mark.asyncio
    async def test_unexpected_host_failure_wrapped(self):
        message = FakeMessageHandle()
        message.open_reply_all_form = _raise_runtime_error
        composer = ReplyComposer(FakeMailboxHost(message))

        with pytest.raises(ComposeError) as exc_info:
            await composer.compose(FormattedReply(subject="S", html_body=""))
        assert exc_info.value.reason == "host crashed"


async def _raise_runtime_error(html_body: str, subject: str) -> None:
    raise RuntimeError("host crashed")
