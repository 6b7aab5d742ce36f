"""Drafting module: builds the LLM prompt for a follow-up email.

Public API:
    - PromptBuilder: Builds a CompletionRequest from an EmailRecord
    - detect_estate_planning: Keyword check behind the Template B rule
    - CompletionRequest, Message, MessageRole, TemplateSet: Models
"""

from .builder import DEFAULT_TEMPLATES, PromptBuilder, detect_estate_planning
from .models import CompletionRequest, Message, MessageRole, TemplateSet
from .prompts import DEFAULT_MEETING_OPTIONS, ESTATE_PLANNING_KEYWORDS, SUBJECT_PREFIX

__all__ = [
    "PromptBuilder",
    "detect_estate_planning",
    "DEFAULT_TEMPLATES",
    "DEFAULT_MEETING_OPTIONS",
    "ESTATE_PLANNING_KEYWORDS",
    "SUBJECT_PREFIX",
    "CompletionRequest",
    "Message",
    "MessageRole",
    "TemplateSet",
]
