"""Suspicion scoring from extracted features.

Weighted formula (fixed weights, boolean flags contribute their weight when true):

    suspicion = 0.15 * |suspicious keyword matches|
              + 0.10 * |emotional trigger matches|
              + 0.20 * excessive_caps
              + 0.15 * punctuation_burst
              + 0.10 * short_text

Verdict rule (two independent conditions, deliberately not unified):
    FAKE if suspicion > 0.3 OR |suspicious keyword matches| > 2, else REAL.

Suspicion is deterministic. Randomness enters only through confidence
and the banded sub-scores, all drawn from an injectable BandSampler:

| Sub-score          | FAKE band  | REAL band  |
|--------------------|------------|------------|
| sentiment          | [15, 55]   | [60, 85]   |
| pattern            | [10, 50]   | [65, 90]   |
| source_credibility | [20, 60]   | [70, 95]   |
| readability        | [40, 90]   | [40, 90]   |

emotional_language: [70, 95] when any emotional trigger matched, else [20, 60].
"""

from dataclasses import dataclass
from typing import Dict, Optional

from verinews.config.logging import get_logger
from verinews.analysis.feature_extractor import FeatureSet
from verinews.analysis.sampler import Band, BandSampler
from verinews.schemas import SubScores, Verdict

KEYWORD_WEIGHT = 0.15
TRIGGER_WEIGHT = 0.10
EXCESSIVE_CAPS_WEIGHT = 0.20
PUNCTUATION_BURST_WEIGHT = 0.15
SHORT_TEXT_WEIGHT = 0.10

SUSPICION_THRESHOLD = 0.3
KEYWORD_OVERRIDE_THRESHOLD = 2

CONFIDENCE_BASE = 0.65
CONFIDENCE_SPREAD = 0.25
CONFIDENCE_CAP = 0.95

VERDICT_BANDS: Dict[Verdict, Dict[str, Band]] = {
    Verdict.FAKE: {
        "sentiment": (15.0, 55.0),
        "pattern": (10.0, 50.0),
        "source_credibility": (20.0, 60.0),
    },
    Verdict.REAL: {
        "sentiment": (60.0, 85.0),
        "pattern": (65.0, 90.0),
        "source_credibility": (70.0, 95.0),
    },
}
READABILITY_BAND: Band = (40.0, 90.0)
EMOTIONAL_MATCHED_BAND: Band = (70.0, 95.0)
EMOTIONAL_UNMATCHED_BAND: Band = (20.0, 60.0)


@dataclass(frozen=True)
class SuspicionScore:
    """Scoring outcome for one FeatureSet.

    Attributes:
        suspicion: Weighted suspicion scalar, 0.0-1.0
        confidence: Reported confidence, 0.65-0.95 (not used for the verdict)
        verdict: REAL or FAKE
        sub_scores: Banded per-factor percentages
    """

    suspicion: float
    confidence: float
    verdict: Verdict
    sub_scores: SubScores

    @property
    def confidence_percent(self) -> float:
        return self.confidence * 100.0


class SuspicionScorer:
    """
    Combines a FeatureSet into a SuspicionScore.

    Usage:
        scorer = SuspicionScorer(BandSampler(random.Random(7)))
        score = scorer.score(features)
        score.verdict  # Verdict.FAKE / Verdict.REAL

    Draw order per call: confidence, sentiment, pattern, source credibility,
    readability, emotional language.
    """

    def __init__(self, sampler: Optional[BandSampler] = None):
        self.sampler = sampler if sampler is not None else BandSampler()
        self._logger = get_logger("SuspicionScorer")

    def suspicion(self, features: FeatureSet) -> float:
        """
        Compute the deterministic suspicion scalar.

        Rounded to 4 decimals so float summation artifacts cannot push a
        sum like 0.2 + 0.1 across the 0.3 threshold; capped at 1.0.
        """
        raw = (
            KEYWORD_WEIGHT * features.keyword_count
            + TRIGGER_WEIGHT * features.trigger_count
            + (EXCESSIVE_CAPS_WEIGHT if features.excessive_caps else 0.0)
            + (PUNCTUATION_BURST_WEIGHT if features.punctuation_burst else 0.0)
            + (SHORT_TEXT_WEIGHT if features.short_text else 0.0)
        )
        return min(1.0, round(raw, 4))

    @staticmethod
    def verdict_for(suspicion: float, keyword_count: int) -> Verdict:
        if suspicion > SUSPICION_THRESHOLD or keyword_count > KEYWORD_OVERRIDE_THRESHOLD:
            return Verdict.FAKE
        return Verdict.REAL

    def score(self, features: FeatureSet) -> SuspicionScore:
        """
        Score a FeatureSet.

        Args:
            features: FeatureSet from FeatureExtractor.

        Returns:
            SuspicionScore with deterministic suspicion/verdict and
            randomized confidence and sub-scores.
        """
        suspicion = self.suspicion(features)
        verdict = self.verdict_for(suspicion, features.keyword_count)
        confidence = min(CONFIDENCE_CAP, CONFIDENCE_BASE + self.sampler.unit() * CONFIDENCE_SPREAD)

        bands = VERDICT_BANDS[verdict]
        emotional_band = (
            EMOTIONAL_MATCHED_BAND if features.emotional_triggers else EMOTIONAL_UNMATCHED_BAND
        )
        sub_scores = SubScores(
            sentiment=self.sampler.sample_band(bands["sentiment"]),
            pattern=self.sampler.sample_band(bands["pattern"]),
            source_credibility=self.sampler.sample_band(bands["source_credibility"]),
            readability=self.sampler.sample_band(READABILITY_BAND),
            emotional_language=self.sampler.sample_band(emotional_band),
        )

        self._logger.debug(
            "Suspicion scored",
            suspicion=suspicion,
            verdict=verdict.value,
            confidence=round(confidence, 3),
        )
        return SuspicionScore(
            suspicion=suspicion,
            confidence=confidence,
            verdict=verdict,
            sub_scores=sub_scores,
        )


__all__ = [
    "SuspicionScore",
    "SuspicionScorer",
    "VERDICT_BANDS",
    "READABILITY_BAND",
    "EMOTIONAL_MATCHED_BAND",
    "EMOTIONAL_UNMATCHED_BAND",
]
