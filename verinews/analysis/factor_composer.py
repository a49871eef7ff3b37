"""Human-readable risk factors, positive indicators and explanation text.

Factors are emitted in a fixed priority order (the order of the checks
below), never in discovery order.
"""

from dataclasses import dataclass
from typing import List, Tuple

from verinews.config.logging import get_logger
from verinews.analysis.feature_extractor import FeatureSet
from verinews.analysis.suspicion_scorer import SuspicionScore
from verinews.schemas import Verdict

FAKE_EXPLANATION = (
    "The text contains patterns commonly associated with misinformation, "
    "including sensationalized language and emotional triggers."
)
REAL_EXPLANATION = (
    "The text appears to follow journalistic standards with balanced "
    "language and factual presentation."
)

EXPLANATIONS = {
    Verdict.FAKE: FAKE_EXPLANATION,
    Verdict.REAL: REAL_EXPLANATION,
}


@dataclass(frozen=True)
class ComposedFactors:
    """Factor lists and explanation for one analysis."""

    risk_factors: Tuple[str, ...]
    positive_indicators: Tuple[str, ...]
    explanation: str


class FactorComposer:
    """
    Maps feature presence to fixed-text factor strings.

    Risk priority: suspicious keywords, emotional triggers, excessive caps,
    punctuation burst, short text.
    Positive priority: numerals, quotes, adequate length, no suspicious
    keywords, measured capitalization.

    Usage:
        composer = FactorComposer()
        factors = composer.compose(features, score)
    """

    def __init__(self):
        self._logger = get_logger("FactorComposer")

    def compose(self, features: FeatureSet, score: SuspicionScore) -> ComposedFactors:
        risk = self.risk_factors(features)
        positive = self.positive_indicators(features)

        self._logger.debug(
            "Factors composed",
            risk_count=len(risk),
            positive_count=len(positive),
            verdict=score.verdict.value,
        )
        return ComposedFactors(
            risk_factors=tuple(risk),
            positive_indicators=tuple(positive),
            explanation=EXPLANATIONS[score.verdict],
        )

    @staticmethod
    def risk_factors(features: FeatureSet) -> List[str]:
        factors: List[str] = []
        if features.keyword_count:
            factors.append(f"Contains {features.keyword_count} suspicious keywords")
        if features.trigger_count:
            factors.append(f"Uses {features.trigger_count} emotional trigger words")
        if features.excessive_caps:
            factors.append("Excessive use of capital letters")
        if features.punctuation_burst:
            factors.append("Multiple consecutive exclamation/question marks")
        if features.short_text:
            factors.append("Text too short for thorough verification")
        return factors

    @staticmethod
    def positive_indicators(features: FeatureSet) -> List[str]:
        indicators: List[str] = []
        if features.has_numbers:
            indicators.append("Contains specific data/statistics")
        if features.has_quotes:
            indicators.append("Includes quoted sources")
        if not features.short_text:
            indicators.append("Adequate length for context")
        if not features.keyword_count:
            indicators.append("No sensationalist keywords detected")
        if not features.excessive_caps:
            indicators.append("Measured capitalization")
        return indicators


__all__ = [
    "ComposedFactors",
    "FactorComposer",
    "FAKE_EXPLANATION",
    "REAL_EXPLANATION",
]
