"""Completion module: sends the drafting prompt to the chat model.

Public API:
    - CompletionClient: Credential check, single request, preamble stripping
    - ChatCompletionAdapter: Interface for providers
    - AzureOpenAIAdapter: Azure OpenAI implementation
    - CompletionResult: Raw and extracted draft text
    - extract_draft / ExtractionRule: Ordered preamble extraction rules
    - CompletionError and subclasses: Failure taxonomy
"""

from .adapter import ChatCompletionAdapter
from .azure_adapter import AzureOpenAIAdapter
from .client import CompletionClient
from .exceptions import (
    CompletionError,
    CredentialMissingError,
    EmptyResponseError,
    HttpError,
    NetworkError,
)
from .extraction import (
    ANALYSIS_SECTION,
    DEFAULT_RULES,
    DRAFT_HEADING,
    DRAFT_MARKER,
    ExtractionRule,
    extract_draft,
)
from .models import CompletionResult

__all__ = [
    # Main classes
    "CompletionClient",
    "ChatCompletionAdapter",
    "AzureOpenAIAdapter",
    # Models
    "CompletionResult",
    # Extraction
    "ExtractionRule",
    "extract_draft",
    "ANALYSIS_SECTION",
    "DRAFT_HEADING",
    "DRAFT_MARKER",
    "DEFAULT_RULES",
    # Exceptions
    "CompletionError",
    "CredentialMissingError",
    "NetworkError",
    "HttpError",
    "EmptyResponseError",
]
