"""Analysis result schema returned to presentation layers.

An AnalysisResult is immutable once constructed and owned by the caller
that requested the analysis. All percentage fields are in [0, 100].
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Tuple

from pydantic import BaseModel, Field


class Verdict(str, Enum):
    """Binary credibility verdict."""

    REAL = "REAL"
    FAKE = "FAKE"


class SubScores(BaseModel):
    """Named per-factor sub-scores, each a percentage.

    Sentiment, pattern and source credibility are sampled from
    verdict-dependent bands. Readability is verdict-independent.
    Emotional language depends only on emotional trigger matches.
    """

    sentiment: float = Field(..., ge=0.0, le=100.0)
    pattern: float = Field(..., ge=0.0, le=100.0)
    source_credibility: float = Field(..., ge=0.0, le=100.0)
    readability: float = Field(..., ge=0.0, le=100.0)
    emotional_language: float = Field(..., ge=0.0, le=100.0)

    model_config = {"frozen": True}


class AnalysisResult(BaseModel):
    """Complete output of one credibility analysis.

    Attributes:
        verdict: REAL or FAKE
        confidence: Reported confidence percentage (65-95)
        suspicion_score: Weighted suspicion scalar (0.0-1.0)
        sub_scores: Named per-factor percentages
        keyword_flags: Matched suspicious keywords, vocabulary order
        emotional_triggers: Matched emotional trigger terms, vocabulary order
        risk_factors: Human-readable risk factors, fixed priority order
        positive_indicators: Human-readable positive indicators, fixed priority order
        explanation: One of two fixed templates keyed by verdict
        word_count: Whitespace-delimited word count of the input
        analyzed_at: UTC timestamp of result construction
    """

    verdict: Verdict
    confidence: float = Field(..., ge=0.0, le=100.0)
    suspicion_score: float = Field(..., ge=0.0, le=1.0)
    sub_scores: SubScores
    keyword_flags: Tuple[str, ...] = ()
    emotional_triggers: Tuple[str, ...] = ()
    risk_factors: Tuple[str, ...] = ()
    positive_indicators: Tuple[str, ...] = ()
    explanation: str
    word_count: int = Field(0, ge=0)
    analyzed_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {"frozen": True}

    @property
    def is_fake(self) -> bool:
        return self.verdict == Verdict.FAKE

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return self.model_dump(mode="json")
