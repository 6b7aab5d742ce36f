"""CompletionClient: one chat-completion round trip per draft."""

import logging
from typing import Optional

from src.config import AddinSettings
from src.drafting.models import CompletionRequest

from .adapter import ChatCompletionAdapter
from .azure_adapter import AzureOpenAIAdapter
from .exceptions import CredentialMissingError
from .extraction import DEFAULT_RULES, ExtractionRule, extract_draft
from .models import CompletionResult

logger = logging.getLogger(__name__)


class CompletionClient:
    """Generates a draft email from a CompletionRequest.

    Checks the credential before anything else, sends a single request
    (no retries), then strips any analysis or draft-email preamble from
    the model's answer.

    Example usage:
        client = CompletionClient(AddinSettings.load())
        result = await client.generate(request)
        print(result.text)
    """

    def __init__(
        self,
        settings: AddinSettings,
        adapter: Optional[ChatCompletionAdapter] = None,
        rules: tuple[ExtractionRule, ...] = DEFAULT_RULES,
    ):
        """Initialize the CompletionClient.

        Args:
            settings: Resolved settings carrying the API key.
            adapter: Provider adapter. Defaults to AzureOpenAIAdapter,
                created on first use.
            rules: Ordered preamble extraction rules.
        """
        self._settings = settings
        self._adapter = adapter
        self._rules = rules

    def _get_adapter(self) -> ChatCompletionAdapter:
        """Get provider adapter, creating default if needed."""
        if self._adapter is None:
            self._adapter = AzureOpenAIAdapter(self._settings)
        return self._adapter

    async def generate(self, request: CompletionRequest) -> CompletionResult:
        """Send the request and return the extracted draft.

        Raises:
            CredentialMissingError: No API key configured; nothing was sent.
            NetworkError: Transport-level failure.
            HttpError: Non-2xx response.
            EmptyResponseError: No choices in the response.
        """
        if not self._settings.api_key_configured:
            raise CredentialMissingError()

        adapter = self._get_adapter()
        logger.info("Generating draft with %s", adapter.model_name)
        raw_text = (await adapter.complete(request)).strip()

        text = extract_draft(raw_text, self._rules)
        if text != raw_text:
            logger.debug("Stripped %d characters of preamble", len(raw_text) - len(text))
        return CompletionResult(raw_text=raw_text, text=text)
