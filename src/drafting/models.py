"""Data models for the drafting module."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class MessageRole(Enum):
    """Chat message roles."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    """A role-tagged message in a chat-completion request."""

    role: MessageRole
    content: str

    def to_dict(self) -> dict[str, str]:
        """Serialize message to dictionary for API calls."""
        return {"role": self.role.value, "content": self.content}


@dataclass(frozen=True)
class TemplateSet:
    """The two reference reply templates embedded in the prompt.

    Attributes:
        general: Template A, used for non-estate-planning matters.
        estate_planning: Template B, used when estate planning is involved.
    """

    general: str
    estate_planning: str


@dataclass(frozen=True)
class CompletionRequest:
    """A single chat-completion request: prompts plus sampling parameters.

    Attributes:
        system_prompt: Fixed role and formatting instruction.
        user_prompt: Per-email prompt with templates and rules.
        max_tokens: Cap on generated tokens.
        temperature: Sampling temperature.
        top_p: Nucleus sampling mass.
        frequency_penalty: Penalty for repeated tokens.
        presence_penalty: Penalty for tokens already present.
    """

    system_prompt: str
    user_prompt: str
    max_tokens: int = 1000
    temperature: float = 0.2
    top_p: float = 0.95
    frequency_penalty: float = 0.0
    presence_penalty: float = 0.0

    @property
    def messages(self) -> list[Message]:
        """System message followed by the user message."""
        return [
            Message(role=MessageRole.SYSTEM, content=self.system_prompt),
            Message(role=MessageRole.USER, content=self.user_prompt),
        ]

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the chat-completions JSON request body."""
        return {
            "messages": [m.to_dict() for m in self.messages],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "top_p": self.top_p,
            "frequency_penalty": self.frequency_penalty,
            "presence_penalty": self.presence_penalty,
        }
