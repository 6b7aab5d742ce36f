"""Tests for the taskpane actions, wired end to end with a fake host."""

import asyncio
import json
import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.completion import (
    ChatCompletionAdapter,
    CompletionClient,
    EmptyResponseError,
    HttpError,
    NetworkError,
)
from src.config import AddinSettings
from src.drafting import PromptBuilder
from src.mailbox import NoItemSelectedError
from src.taskpane import ActionResult, TaskpaneController, describe_error
from src.taskpane.controller import GENERATED_STATUS, REPLY_STATUS, SAVED_STATUS
from tests.mailbox_test_helpers import FakeMailboxHost, FakeMessageHandle

MODEL_OUTPUT = (
    "DRAFT EMAIL:\n"
    "**Subject: Conference - Estate Plan - Smith**\n"
    "Hi Smith,\n\n"
    "Thank you for your call. **Thursday, 27 March 2025 at 10:30am** works for us.\n"
    "Questionnaire: https://example.com/questionnaire"
)


@pytest.fixture
def settings(tmp_path):
    return AddinSettings(api_key="test-key", export_dir=tmp_path / "exports")


@pytest.fixture
def message():
    return FakeMessageHandle()


@pytest.fixture
def host(message):
    return FakeMailboxHost(message)


@pytest.fixture
def mock_adapter():
    adapter = MagicMock(spec=ChatCompletionAdapter)
    adapter.model_name = "test-deployment"
    adapter.complete = AsyncMock(return_value=MODEL_OUTPUT)
    return adapter


@pytest.fixture
def controller(host, settings, mock_adapter):
    client = CompletionClient(settings, adapter=mock_adapter)
    return TaskpaneController(host, settings, client=client)


class TestDescribeError:
    def test_no_item(self):
        assert describe_error(NoItemSelectedError()) == "No email selected"

    def test_http_error(self):
        assert describe_error(HttpError(401, "Access denied")) == (
            "Error generating legal response: Access denied"
        )

    def test_known_error_uses_message(self):
        assert describe_error(NetworkError("refused")) == "Network error: refused"

    def test_unexpected_error(self):
        assert describe_error(RuntimeError("kaboom")) == "Error: kaboom"


class TestSaveEmailAsJson:
    @pytest.mark.asyncio
    async def test_saves_export(self, controller, settings):
        result = await controller.save_email_as_json()

        assert isinstance(result, ActionResult)
        assert result.success
        assert controller.status == SAVED_STATUS
        files = list(settings.export_dir.glob("*.json"))
        assert len(files) == 1
        assert files[0].name.startswith("Estate Plan - Smith_")
        assert str(files[0]) == result.details["path"]
        data = json.loads(files[0].read_text(encoding="utf-8"))
        assert data["receivedTime"] == "2025-03-20T09:15:00.000Z"

    @pytest.mark.asyncio
    async def test_no_item(self, settings):
        controller = TaskpaneController(FakeMailboxHost(None), settings)

        result = await controller.save_email_as_json()

        assert not result.success
        assert controller.status == "No email selected"
        assert not settings.export_dir.exists()

    @pytest.mark.asyncio
    async def test_body_failure(self, settings):
        host = FakeMailboxHost(FakeMessageHandle(body_error="mailbox unavailable"))
        controller = TaskpaneController(host, settings)

        await controller.save_email_as_json()

        assert controller.status == "Error getting email body: mailbox unavailable"


class TestGenerateResponse:
    @pytest.mark.asyncio
    async def test_generates_draft(self, controller, mock_adapter):
        result = await controller.generate_response()

        assert result.success
        assert controller.status == GENERATED_STATUS
        assert controller.response.startswith("**Subject: Conference - Estate Plan - Smith**")
        assert "DRAFT EMAIL:" not in controller.response
        assert controller.reply_available
        assert result.details["characters"] == len(controller.response)

        request = mock_adapter.complete.call_args.args[0]
        assert "Subject: Estate Plan - Smith" in request.user_prompt
        assert "Date: 2025-03-20T09:15:00.000Z" in request.user_prompt

    @pytest.mark.asyncio
    async def test_missing_credential(self, host, mock_adapter):
        settings = AddinSettings()
        client = CompletionClient(settings, adapter=mock_adapter)
        controller = TaskpaneController(host, settings, client=client)

        result = await controller.generate_response()

        assert not result.success
        assert controller.status == (
            "Azure OpenAI API key not configured. Please add your key to the .env file."
        )
        mock_adapter.complete.assert_not_called()
        assert controller.response is None

    @pytest.mark.asyncio
    async def test_http_error(self, controller, mock_adapter):
        mock_adapter.complete.side_effect = HttpError(400, "Bad request")

        await controller.generate_response()

        assert controller.status == "Error generating legal response: Bad request"
        assert not controller.reply_available

    @pytest.mark.asyncio
    async def test_empty_response(self, controller, mock_adapter):
        mock_adapter.complete.side_effect = EmptyResponseError()

        await controller.generate_response()

        assert controller.status == "No content in the response from Azure OpenAI."

    @pytest.mark.asyncio
    async def test_failure_clears_previous_response(self, controller, mock_adapter):
        await controller.generate_response()
        mock_adapter.complete.side_effect = NetworkError("connection reset")

        await controller.generate_response()

        assert controller.response is None
        assert controller.status == "Network error: connection reset"

    @pytest.mark.asyncio
    async def test_unexpected_error_is_reported(self, host, settings, caplog):
        builder = MagicMock(spec=PromptBuilder)
        builder.build.side_effect = RuntimeError("kaboom")
        controller = TaskpaneController(host, settings, builder=builder)

        with caplog.at_level(logging.ERROR, logger="src.taskpane.controller"):
            result = await controller.generate_response()

        assert controller.status == "Error: kaboom"
        assert result.error == "kaboom"
        assert caplog.records[0].action == "generate"

    @pytest.mark.asyncio
    async def test_single_flight(self, controller, mock_adapter):
        release = asyncio.Event()

        async def slow_complete(request):
            await release.wait()
            return MODEL_OUTPUT

        mock_adapter.complete.side_effect = slow_complete

        first = asyncio.create_task(controller.generate_response())
        await asyncio.sleep(0)
        second = await controller.generate_response()
        release.set()
        first_result = await first

        assert second.skipped
        assert second.status == "Generate already in progress"
        assert first_result.success
        assert mock_adapter.complete.await_count == 1
        assert controller.status == GENERATED_STATUS

    @pytest.mark.asyncio
    async def test_other_actions_run_while_generating(self, controller, mock_adapter, settings):
        release = asyncio.Event()

        async def slow_complete(request):
            await release.wait()
            return MODEL_OUTPUT

        mock_adapter.complete.side_effect = slow_complete

        generating = asyncio.create_task(controller.generate_response())
        await asyncio.sleep(0)
        saved = await controller.save_email_as_json()
        release.set()
        await generating

        assert saved.success
        assert not saved.skipped


class TestReplyWithResponse:
    @pytest.mark.asyncio
    async def test_reply_before_generate(self, controller, message):
        result = await controller.reply_with_response()

        assert not result.success
        assert controller.status == "No response generated yet."
        assert message.replies == []

    @pytest.mark.asyncio
    async def test_estate_planning_scenario(self, controller, message):
        await controller.generate_response()
        result = await controller.reply_with_response()

        assert result.success
        assert controller.status == REPLY_STATUS
        assert result.details["subject"] == "Conference - Estate Plan - Smith"

        reply = message.replies[0]
        assert reply["subject"] == "Conference - Estate Plan - Smith"
        html = reply["html_body"]
        assert html.startswith(
            '<div style="font-family: Arial, sans-serif; font-size: 10pt;">'
            "Conference - Estate Plan - Smith<br><br>Hi Smith,<br><br>"
        )
        assert "<strong>Thursday, 27 March 2025 at 10:30am</strong>" in html
        assert (
            '<a href="https://example.com/questionnaire">https://example.com/questionnaire</a>'
            in html
        )
        assert "**" not in html
        assert html.endswith("</div>")

    @pytest.mark.asyncio
    async def test_edited_response_without_subject(self, controller, message):
        controller.response = "Hi Smith,\nSee you Thursday."

        await controller.reply_with_response()

        assert message.replies[0]["subject"] == "Conference - Estate Plan - Smith"
        assert message.replies[0]["html_body"] == (
            '<div style="font-family: Arial, sans-serif; font-size: 10pt;">'
            "Hi Smith,<br>See you Thursday.</div>"
        )

    @pytest.mark.asyncio
    async def test_compose_failure(self, settings, mock_adapter):
        message = FakeMessageHandle(compose_error="draft rejected")
        controller = TaskpaneController(
            FakeMailboxHost(message),
            settings,
            client=CompletionClient(settings, adapter=mock_adapter),
        )
        await controller.generate_response()

        result = await controller.reply_with_response()

        assert not result.success
        assert controller.status == "Error creating reply: draft rejected"
        assert controller.reply_available
