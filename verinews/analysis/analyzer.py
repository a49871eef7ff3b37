"""Synchronous credibility analysis: extract -> score -> compose."""

from typing import Optional

from verinews.config.logging import get_logger
from verinews.analysis.factor_composer import FactorComposer
from verinews.analysis.feature_extractor import FeatureExtractor
from verinews.analysis.sampler import BandSampler
from verinews.analysis.suspicion_scorer import SuspicionScorer
from verinews.errors import InvalidInputError
from verinews.schemas import AnalysisResult


def validate_text(text: str) -> None:
    """Reject empty or whitespace-only input."""
    if not isinstance(text, str) or not text.strip():
        raise InvalidInputError("Text to analyze must not be empty or blank")


class CredibilityAnalyzer:
    """
    Builds an AnalysisResult from text without any staging or delay.

    The StagePipeline calls analyze() once its last stage completes.

    Usage:
        analyzer = CredibilityAnalyzer(sampler=BandSampler(random.Random(1)))
        result = analyzer.analyze("Some article text")
    """

    def __init__(
        self,
        extractor: Optional[FeatureExtractor] = None,
        scorer: Optional[SuspicionScorer] = None,
        composer: Optional[FactorComposer] = None,
        sampler: Optional[BandSampler] = None,
    ):
        self.extractor = extractor or FeatureExtractor()
        self.scorer = scorer or SuspicionScorer(sampler)
        self.composer = composer or FactorComposer()
        self._logger = get_logger("CredibilityAnalyzer")

    def analyze(self, text: str) -> AnalysisResult:
        """
        Analyze text and return an immutable result.

        Raises:
            InvalidInputError: text is empty or whitespace-only.
        """
        validate_text(text)

        features = self.extractor.extract(text)
        score = self.scorer.score(features)
        factors = self.composer.compose(features, score)

        result = AnalysisResult(
            verdict=score.verdict,
            confidence=score.confidence_percent,
            suspicion_score=score.suspicion,
            sub_scores=score.sub_scores,
            keyword_flags=features.suspicious_keywords,
            emotional_triggers=features.emotional_triggers,
            risk_factors=factors.risk_factors,
            positive_indicators=factors.positive_indicators,
            explanation=factors.explanation,
            word_count=features.word_count,
        )

        self._logger.info(
            "Analysis complete",
            verdict=result.verdict.value,
            confidence=round(result.confidence, 1),
            suspicion=result.suspicion_score,
            text=text,
        )
        return result


__all__ = ["CredibilityAnalyzer", "validate_text"]
