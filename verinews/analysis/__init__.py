"""Credibility analysis engine components.

Components:
    FeatureExtractor: Lexical/structural signals from raw text
    SuspicionScorer: Weighted suspicion, verdict, confidence and sub-scores
    FactorComposer: Ordered risk factors, positive indicators, explanation
    CredibilityAnalyzer: extract -> score -> compose in one call
    BandSampler: Injectable random source for banded values

Usage:
    from verinews.analysis import CredibilityAnalyzer

    result = CredibilityAnalyzer().analyze("BREAKING: shocking exclusive!!")
    print(result.verdict.value, result.keyword_flags)
"""

from verinews.analysis.sampler import BandSampler
from verinews.analysis.feature_extractor import FeatureExtractor, FeatureSet
from verinews.analysis.suspicion_scorer import SuspicionScore, SuspicionScorer
from verinews.analysis.factor_composer import ComposedFactors, FactorComposer
from verinews.analysis.analyzer import CredibilityAnalyzer, validate_text

__all__ = [
    "BandSampler",
    "FeatureExtractor",
    "FeatureSet",
    "SuspicionScore",
    "SuspicionScorer",
    "ComposedFactors",
    "FactorComposer",
    "CredibilityAnalyzer",
    "validate_text",
]
