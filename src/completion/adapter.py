"""Abstract interface for chat-completion providers."""

from abc import ABC, abstractmethod

from src.drafting.models import CompletionRequest


class ChatCompletionAdapter(ABC):
    """Sends one chat-completion request to a provider.

    Implementations must make at most one network call per complete()
    and translate provider errors into the exceptions in exceptions.py:
    NetworkError for transport failures, HttpError for non-2xx answers,
    EmptyResponseError when no choices come back.
    """

    @abstractmethod
    async def complete(self, request: CompletionRequest) -> str:
        """Send the request and return the first choice's content.

        Raises:
            NetworkError: Transport-level failure.
            HttpError: Non-2xx response.
            EmptyResponseError: No choices (or no content) in the response.
        """
        pass

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Return the model or deployment being used."""
        pass
