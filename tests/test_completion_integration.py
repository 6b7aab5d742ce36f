"""
Integration test against a real Azure OpenAI deployment.

Requires AZURE_OPENAI_API_KEY (and optionally AZURE_OPENAI_ENDPOINT /
AZURE_OPENAI_DEPLOYMENT) in the environment or .env.

Run with: python -m pytest tests/test_completion_integration.py -v -m integration
"""

from datetime import datetime, timezone

import pytest
from dotenv import load_dotenv

from src.completion import CompletionClient
from src.config import AddinSettings
from src.drafting import PromptBuilder
from src.formatter import ReplyFormatter
from src.mailbox import EmailRecord

load_dotenv()

settings = AddinSettings.load()

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not settings.api_key_configured, reason="AZURE_OPENAI_API_KEY not configured"
    ),
]


@pytest.mark.asyncio
async def test_estate_planning_draft():
    record = EmailRecord(
        subject="Estate Plan - Smith",
        sender="bm@example.com",
        received_time=datetime(2025, 3, 20, 9, 15, tzinfo=timezone.utc),
        body=(
            "Hi Smith,\n\nThanks for your call today. As discussed, you would like to "
            "update your will and look at estate planning for the farm.\n\nRegards, BM"
        ),
    )

    result = await CompletionClient(settings).generate(PromptBuilder().build(record))
    reply = ReplyFormatter().format(result.text)

    assert result.text
    assert "### Analysis:" not in result.text
    assert reply.resolve_subject(record.subject).startswith("Conference - ")
