"""Lexical and structural feature extraction over free-form text.

All checks are case-insensitive substring checks against the fixed
vocabularies in verinews.config.vocabulary, plus a handful of structural
signals:

| Feature             | Rule                                                 |
|---------------------|------------------------------------------------------|
| excessive_caps      | uppercase letters / total characters > 0.2           |
| punctuation_burst   | two or more consecutive '!' or '?' anywhere          |
| short_text          | whitespace-split word count < 50                     |
| has_numbers         | any digit character                                  |
| has_quotes          | any '"' or "'" character                             |

Extraction is pure: identical text always yields an identical FeatureSet.
"""

import re
from dataclasses import dataclass
from typing import Sequence, Tuple

from verinews.config.logging import get_logger
from verinews.config.vocabulary import EMOTIONAL_TRIGGERS, SUSPICIOUS_KEYWORDS

PUNCTUATION_BURST_PATTERN = re.compile(r"[!?]{2,}")


@dataclass(frozen=True)
class FeatureSet:
    """Read-only snapshot of signals derived from one text.

    Attributes:
        suspicious_keywords: Matched suspicious keywords, vocabulary order
        emotional_triggers: Matched emotional triggers, vocabulary order
        caps_ratio: Uppercase letters / total characters (0.0 for empty text)
        excessive_caps: caps_ratio above threshold
        punctuation_burst: Consecutive '!'/'?' run found
        word_count: Whitespace-delimited word count
        short_text: word_count below threshold
        has_numbers: Any digit present
        has_quotes: Any quote character present
    """

    suspicious_keywords: Tuple[str, ...]
    emotional_triggers: Tuple[str, ...]
    caps_ratio: float
    excessive_caps: bool
    punctuation_burst: bool
    word_count: int
    short_text: bool
    has_numbers: bool
    has_quotes: bool

    @property
    def keyword_count(self) -> int:
        return len(self.suspicious_keywords)

    @property
    def trigger_count(self) -> int:
        return len(self.emotional_triggers)


class FeatureExtractor:
    """
    Extracts a FeatureSet from raw text.

    Usage:
        extractor = FeatureExtractor()
        features = extractor.extract("BREAKING: shocking news!!")
        features.suspicious_keywords  # ('breaking', 'shocking')

    Thresholds are configurable for experimentation; the defaults are the
    documented rules.
    """

    CAPS_RATIO_THRESHOLD = 0.2
    SHORT_TEXT_WORD_THRESHOLD = 50

    def __init__(
        self,
        suspicious_keywords: Sequence[str] = SUSPICIOUS_KEYWORDS,
        emotional_triggers: Sequence[str] = EMOTIONAL_TRIGGERS,
        caps_ratio_threshold: float = CAPS_RATIO_THRESHOLD,
        short_text_word_threshold: int = SHORT_TEXT_WORD_THRESHOLD,
    ):
        self.suspicious_keywords = tuple(k.lower() for k in suspicious_keywords)
        self.emotional_triggers = tuple(t.lower() for t in emotional_triggers)
        self.caps_ratio_threshold = caps_ratio_threshold
        self.short_text_word_threshold = short_text_word_threshold
        self._logger = get_logger("FeatureExtractor")

    def extract(self, text: str) -> FeatureSet:
        """
        Derive all features from text.

        Never raises on string input; empty text yields a FeatureSet with
        zero counts and a caps ratio of 0.0.

        Args:
            text: Raw input text.

        Returns:
            Frozen FeatureSet.
        """
        lowered = text.lower()
        caps_ratio = self._caps_ratio(text)
        word_count = len(text.split())

        features = FeatureSet(
            suspicious_keywords=self._match(lowered, self.suspicious_keywords),
            emotional_triggers=self._match(lowered, self.emotional_triggers),
            caps_ratio=caps_ratio,
            excessive_caps=caps_ratio > self.caps_ratio_threshold,
            punctuation_burst=PUNCTUATION_BURST_PATTERN.search(text) is not None,
            word_count=word_count,
            short_text=word_count < self.short_text_word_threshold,
            has_numbers=any(ch.isdigit() for ch in text),
            has_quotes='"' in text or "'" in text,
        )

        self._logger.debug(
            "Features extracted",
            text_length=len(text),
            keywords=len(features.suspicious_keywords),
            triggers=len(features.emotional_triggers),
            caps_ratio=round(caps_ratio, 3),
            word_count=word_count,
        )
        return features

    @staticmethod
    def _match(lowered: str, vocabulary: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(term for term in vocabulary if term in lowered)

    @staticmethod
    def _caps_ratio(text: str) -> float:
        if not text:
            return 0.0
        uppercase = sum(1 for ch in text if ch.isupper())
        return uppercase / len(text)


__all__ = ["FeatureExtractor", "FeatureSet", "PUNCTUATION_BURST_PATTERN"]
