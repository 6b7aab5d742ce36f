"""Rules for cutting preamble off a model's draft.

Models sometimes ignore the "no analysis section" instruction. Each rule
looks for one marker and, if present, keeps only the text after its first
occurrence. Rules run in a fixed order: the analysis section goes first,
then any draft-email heading or marker.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractionRule:
    """Keep only the text after `marker`, when it occurs."""

    name: str
    marker: str

    def apply(self, text: str) -> str:
        _, found, remainder = text.partition(self.marker)
        if not found:
            return text
        return remainder.strip()


ANALYSIS_SECTION = ExtractionRule("analysis-section", "### Analysis:")
DRAFT_HEADING = ExtractionRule("draft-heading", "### Draft Email:")
DRAFT_MARKER = ExtractionRule("draft-marker", "DRAFT EMAIL:")

DEFAULT_RULES = (ANALYSIS_SECTION, DRAFT_HEADING, DRAFT_MARKER)


def extract_draft(text: str, rules: tuple[ExtractionRule, ...] = DEFAULT_RULES) -> str:
    """Apply the extraction rules in order and return the trimmed remainder."""
    text = text.strip()
    for rule in rules:
        text = rule.apply(text)
    return text
