"""Fixed vocabularies and stage table for credibility analysis.

Matching is case-insensitive substring matching, so entries are stored
lowercase. List order is significant: matched terms are reported in the
order they appear here, not in the order they occur in the text.

Vocabularies:
1. SUSPICIOUS_KEYWORDS: sensationalist / clickbait markers. Matches are
   surfaced to the user as keyword flags.
2. EMOTIONAL_TRIGGERS: emotionally loaded vocabulary. Matches drive the
   emotional-language sub-score.
"""

from typing import Tuple

SUSPICIOUS_KEYWORDS: Tuple[str, ...] = (
    "breaking",
    "shocking",
    "you won't believe",
    "exclusive",
    "urgent",
    "leaked",
    "conspiracy",
    "cover-up",
    "bombshell",
    "miracle",
    "secret",
    "they don't want you to know",
)

EMOTIONAL_TRIGGERS: Tuple[str, ...] = (
    "outrageous",
    "terrifying",
    "explosive",
    "devastating",
    "horrifying",
    "unbelievable",
    "disgusting",
    "furious",
    "panic",
    "scandal",
)

# Ordered analysis stages: (name, display label)
ANALYSIS_STAGES: Tuple[Tuple[str, str], ...] = (
    ("preprocessing", "Preprocessing text"),
    ("sentiment", "Sentiment & emotion analysis"),
    ("pattern", "Pattern recognition"),
    ("credibility", "Source credibility assessment"),
    ("cross_reference", "Cross-referencing claims"),
    ("confidence", "Final confidence calculation"),
)

__all__ = ["SUSPICIOUS_KEYWORDS", "EMOTIONAL_TRIGGERS", "ANALYSIS_STAGES"]
