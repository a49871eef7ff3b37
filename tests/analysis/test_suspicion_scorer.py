"""Tests for SuspicionScorer weights, verdict rule, confidence and bands."""

import random

import pytest

from verinews.analysis import BandSampler, FeatureSet, SuspicionScorer
from verinews.analysis.suspicion_scorer import (
    EMOTIONAL_MATCHED_BAND,
    EMOTIONAL_UNMATCHED_BAND,
    READABILITY_BAND,
    VERDICT_BANDS,
)
from verinews.schemas import Verdict


def make_features(**overrides) -> FeatureSet:
    """Neutral FeatureSet: no keywords, normal caps, long text."""
    values = dict(
        suspicious_keywords=(),
        emotional_triggers=(),
        caps_ratio=0.05,
        excessive_caps=False,
        punctuation_burst=False,
        word_count=120,
        short_text=False,
        has_numbers=False,
        has_quotes=False,
    )
    values.update(overrides)
    return FeatureSet(**values)


def seeded_scorer(seed: int = 0) -> SuspicionScorer:
    return SuspicionScorer(BandSampler(random.Random(seed)))


def in_band(value: float, band) -> bool:
    return band[0] <= value <= band[1]


class TestSuspicionFormula:
    """Tests for the weighted suspicion formula."""

    def test_neutral_features_score_zero(self):
        """No signals -> suspicion 0 and REAL."""
        score = seeded_scorer().score(make_features())

        assert score.suspicion == 0.0
        assert score.verdict == Verdict.REAL

    def test_all_signals_combined(self):
        """Every weight contributes: 2*0.15 + 0.10 + 0.20 + 0.15 + 0.10."""
        features = make_features(
            suspicious_keywords=("breaking", "shocking"),
            emotional_triggers=("outrageous",),
            excessive_caps=True,
            punctuation_burst=True,
            short_text=True,
        )

        assert seeded_scorer().suspicion(features) == pytest.approx(0.85)

    @pytest.mark.parametrize(
        "overrides,expected",
        [
            ({"suspicious_keywords": ("breaking",)}, 0.15),
            ({"emotional_triggers": ("panic", "scandal")}, 0.20),
            ({"excessive_caps": True}, 0.20),
            ({"punctuation_burst": True}, 0.15),
            ({"short_text": True}, 0.10),
        ],
    )
    def test_individual_weights(self, overrides, expected):
        """Each signal contributes exactly its documented weight."""
        assert seeded_scorer().suspicion(make_features(**overrides)) == pytest.approx(expected)

    def test_suspicion_capped_at_one(self):
        """Many matches cannot push suspicion above 1.0."""
        features = make_features(
            suspicious_keywords=tuple(f"k{i}" for i in range(8)),
            excessive_caps=True,
        )

        assert seeded_scorer().suspicion(features) == 1.0

    def test_suspicion_reproducible(self):
        """Same FeatureSet -> identical suspicion, regardless of random state."""
        features = make_features(suspicious_keywords=("leaked",), punctuation_burst=True)

        first = seeded_scorer(1).score(features)
        second = seeded_scorer(2).score(features)

        assert first.suspicion == second.suspicion
        assert first.verdict == second.verdict


class TestVerdictRule:
    """Tests for threshold OR keyword-count override."""

    def test_threshold_exceeded_is_fake(self):
        """One keyword plus excessive caps (0.35) is FAKE."""
        features = make_features(suspicious_keywords=("urgent",), excessive_caps=True)

        assert seeded_scorer().score(features).verdict == Verdict.FAKE

    def test_exact_threshold_is_real(self):
        """Caps + short text sums to exactly 0.3, which is not above the threshold."""
        features = make_features(excessive_caps=True, short_text=True)
        score = seeded_scorer().score(features)

        assert score.suspicion == pytest.approx(0.3)
        assert score.verdict == Verdict.REAL

    def test_three_keywords_is_fake(self):
        """Three distinct keywords force FAKE."""
        features = make_features(suspicious_keywords=("breaking", "shocking", "exclusive"))

        assert seeded_scorer().score(features).verdict == Verdict.FAKE

    def test_keyword_override_independent_of_suspicion(self):
        """More than two keywords is FAKE even when suspicion is low."""
        assert SuspicionScorer.verdict_for(0.1, 3) == Verdict.FAKE
        assert SuspicionScorer.verdict_for(0.1, 2) == Verdict.REAL
        assert SuspicionScorer.verdict_for(0.31, 0) == Verdict.FAKE

    def test_burst_with_one_keyword_at_threshold_stays_real(self):
        """Burst + one keyword (0.30) is REAL: the two conditions are not unified."""
        features = make_features(suspicious_keywords=("secret",), punctuation_burst=True)

        assert seeded_scorer().score(features).verdict == Verdict.REAL


class TestRandomizedOutputs:
    """Tests for confidence and sub-score band membership."""

    @pytest.mark.parametrize("seed", range(25))
    def test_confidence_within_band(self, seed):
        """Confidence is always within 65-95 percent."""
        score = seeded_scorer(seed).score(make_features())

        assert 0.65 <= score.confidence <= 0.95
        assert 65.0 <= score.confidence_percent <= 95.0

    @pytest.mark.parametrize("seed", range(25))
    def test_fake_bands(self, seed):
        """FAKE verdict samples from the FAKE bands."""
        features = make_features(
            suspicious_keywords=("breaking", "shocking", "exclusive"),
            emotional_triggers=("furious",),
        )
        score = seeded_scorer(seed).score(features)
        bands = VERDICT_BANDS[Verdict.FAKE]

        assert score.verdict == Verdict.FAKE
        assert in_band(score.sub_scores.sentiment, bands["sentiment"])
        assert in_band(score.sub_scores.pattern, bands["pattern"])
        assert in_band(score.sub_scores.source_credibility, bands["source_credibility"])
        assert in_band(score.sub_scores.readability, READABILITY_BAND)
        assert in_band(score.sub_scores.emotional_language, EMOTIONAL_MATCHED_BAND)

    @pytest.mark.parametrize("seed", range(25))
    def test_real_bands(self, seed):
        """REAL verdict samples from the REAL bands."""
        score = seeded_scorer(seed).score(make_features())
        bands = VERDICT_BANDS[Verdict.REAL]

        assert score.verdict == Verdict.REAL
        assert in_band(score.sub_scores.sentiment, bands["sentiment"])
        assert in_band(score.sub_scores.pattern, bands["pattern"])
        assert in_band(score.sub_scores.source_credibility, bands["source_credibility"])
        assert in_band(score.sub_scores.readability, READABILITY_BAND)
        assert in_band(score.sub_scores.emotional_language, EMOTIONAL_UNMATCHED_BAND)

    def test_fake_bands_wider_and_lower(self):
        """FAKE bands are wider and sit below the REAL bands."""
        for name in ("sentiment", "pattern", "source_credibility"):
            fake_low, fake_high = VERDICT_BANDS[Verdict.FAKE][name]
            real_low, real_high = VERDICT_BANDS[Verdict.REAL][name]
            assert fake_high - fake_low > real_high - real_low
            assert fake_high < real_low

    def test_same_seed_same_scores(self):
        """Pinned random source reproduces confidence and sub-scores."""
        features = make_features(emotional_triggers=("panic",))

        first = seeded_scorer(42).score(features)
        second = seeded_scorer(42).score(features)

        assert first == second


class TestBandSampler:
    """Tests for the banded sampler."""

    def test_invalid_band_rejected(self):
        with pytest.raises(ValueError):
            BandSampler(random.Random(0)).sample_band((10.0, 5.0))

    def test_degenerate_band(self):
        """A zero-width band always yields its single value."""
        assert BandSampler(random.Random(0)).sample_band((50.0, 50.0)) == 50.0
