"""Azure OpenAI chat-completions adapter."""

import json
import logging
from typing import Any, Optional

from openai import APIConnectionError, APIStatusError, AsyncAzureOpenAI

from src.config import AddinSettings
from src.drafting.models import CompletionRequest

from .adapter import ChatCompletionAdapter
from .exceptions import EmptyResponseError, HttpError, NetworkError

logger = logging.getLogger(__name__)


def _error_detail(error: APIStatusError) -> str:
    """Pull the human-readable message out of a non-2xx response.

    The SDK hands over the parsed `error` object when the body is JSON and
    the raw text otherwise.
    """
    body: Any = error.body
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
        return json.dumps(body)
    if isinstance(body, str) and body:
        return body
    return error.message


class AzureOpenAIAdapter(ChatCompletionAdapter):
    """Sends chat completions to an Azure OpenAI deployment.

    The SDK authenticates with the `api-key` header and POSTs to
    <endpoint>/openai/deployments/<deployment>/chat/completions. SDK
    retries are disabled: a failed request surfaces immediately.

    Example usage:
        adapter = AzureOpenAIAdapter(AddinSettings.load())
        text = await adapter.complete(request)
    """

    def __init__(self, settings: AddinSettings):
        self._settings = settings
        self._client: Optional[AsyncAzureOpenAI] = None

    def _get_client(self) -> AsyncAzureOpenAI:
        """Get or create the Azure OpenAI client (lazy initialization)."""
        if self._client is None:
            kwargs: dict[str, Any] = {
                "api_key": self._settings.api_key,
                "azure_endpoint": self._settings.endpoint,
                "api_version": self._settings.api_version,
                "max_retries": 0,
            }
            if self._settings.timeout is not None:
                kwargs["timeout"] = self._settings.timeout
            self._client = AsyncAzureOpenAI(**kwargs)
        return self._client

    async def complete(self, request: CompletionRequest) -> str:
        client = self._get_client()
        payload = request.to_payload()
        logger.debug("Request payload: %s...", json.dumps(payload)[:200])

        try:
            response = await client.chat.completions.create(
                model=self._settings.deployment,
                **payload,
            )
        except APIConnectionError as e:
            raise NetworkError(str(e)) from e
        except APIStatusError as e:
            detail = _error_detail(e)
            logger.error("Azure OpenAI returned %d: %s", e.status_code, detail)
            raise HttpError(e.status_code, detail) from e

        if not response.choices:
            raise EmptyResponseError()

        content = response.choices[0].message.content
        if not content:
            raise EmptyResponseError()

        if response.usage:
            logger.debug(
                "Azure OpenAI response received (prompt=%d, completion=%d tokens)",
                response.usage.prompt_tokens,
                response.usage.completion_tokens,
            )
        return content

    @property
    def model_name(self) -> str:
        return self._settings.deployment
