"""Lexicon-based sentiment classifier for daily journal notes.

Deterministic by design of the product: no model, no randomness. The same
(text, locale) pair always yields the same SentimentResult, which is what
lets the caller persist the result once at save time and reuse it for trend
analysis later.

Scoring:
- Generic mood words weigh 1.0, health phrases weigh 1.5
- score = (positive_weight - negative_weight) / total_weight, 0 on no match
- |score| > 0.2 is polar; |score| > 0.6 picks the strong emoji
- confidence = min(total_weight / 5, 1)
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from helene.shared.i18n import Locale, resolve_locale
from helene.shared.models import SentimentSnapshot
from helene.shared.utils import hash_text_for_audit, round_half_up
from .config import (
    EMOJI_MILD_NEGATIVE,
    EMOJI_MILD_POSITIVE,
    EMOJI_NEUTRAL,
    EMOJI_STRONG_NEGATIVE,
    EMOJI_STRONG_POSITIVE,
    LEXICONS,
    Lexicon,
    SentimentConfig,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SentimentResult:
    """Classification of one note.

    Immutable - the snapshot persisted with an entry is derived from it.
    """
    sentiment: str
    score: float
    positive_keywords: Tuple[str, ...] = ()
    negative_keywords: Tuple[str, ...] = ()
    confidence: float = 0.0
    emoji: str = EMOJI_NEUTRAL
    keyword_weight: float = 0.0
    word_count: int = 0

    def __post_init__(self):
        if not -1.0 <= self.score <= 1.0:
            raise ValueError(f"Sentiment score must be -1.0-1.0, got {self.score}")
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence must be 0.0-1.0, got {self.confidence}")

    def to_snapshot(self) -> SentimentSnapshot:
        return SentimentSnapshot(
            label=self.sentiment,
            score=self.score,
            emoji=self.emoji,
            confidence=self.confidence,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            "sentiment": self.sentiment,
            "score": self.score,
            "keywords": {
                "positive": list(self.positive_keywords),
                "negative": list(self.negative_keywords),
            },
            "confidence": self.confidence,
            "emoji": self.emoji,
            "keywordWeight": self.keyword_weight,
            "totalWords": self.word_count,
        }


@dataclass
class _Tally:
    weight: float = 0.0
    keywords: List[str] = field(default_factory=list)


class SentimentClassifier:
    """Classifies free-text notes for one locale.

    Holds only immutable configuration, so one instance can be shared
    across threads and users.
    """

    def __init__(
        self,
        locale: Optional[str] = None,
        config: Optional[SentimentConfig] = None,
    ):
        """Initialize classifier.

        Args:
            locale: Locale tag selecting the lexicon (default French)
            config: Scoring constants
        """
        self.locale: Locale = resolve_locale(locale)
        self.config = config or SentimentConfig()
        self._lexicon: Lexicon = LEXICONS[self.locale]

        logger.info(
            "SENTIMENT_CLASSIFIER_INITIALIZED",
            extra={
                "locale": self.locale.value,
                "lexicon_version": self.config.lexicon_version,
                "positive_terms": len(self._lexicon.positive) + len(self._lexicon.health_positive),
                "negative_terms": len(self._lexicon.negative) + len(self._lexicon.health_negative),
            }
        )

    def analyze(self, text: Optional[str]) -> SentimentResult:
        """Classify a note.

        Args:
            text: Raw note text, may be None or empty

        Returns:
            SentimentResult; neutral with zero score and confidence when the
            text is blank or matches no keyword
        """
        if not text or not text.strip():
            return SentimentResult(sentiment="neutral", score=0.0)

        lowered = text.lower()
        positive = _Tally()
        negative = _Tally()

        self._match(lowered, self._lexicon.positive, self.config.generic_weight, positive)
        self._match(lowered, self._lexicon.negative, self.config.generic_weight, negative)
        self._match(lowered, self._lexicon.health_positive, self.config.health_weight, positive)
        self._match(lowered, self._lexicon.health_negative, self.config.health_weight, negative)

        total = positive.weight + negative.weight
        raw_score = (positive.weight - negative.weight) / total if total > 0 else 0.0
        sentiment, emoji = self._classify(raw_score)
        confidence = min(total / self.config.confidence_saturation, 1.0)

        result = SentimentResult(
            sentiment=sentiment,
            score=round_half_up(raw_score, 2),
            positive_keywords=tuple(positive.keywords[:self.config.max_keywords]),
            negative_keywords=tuple(negative.keywords[:self.config.max_keywords]),
            confidence=round_half_up(confidence, 2),
            emoji=emoji,
            keyword_weight=total,
            word_count=len(lowered.split()),
        )

        logger.debug(
            "SENTIMENT_ANALYZED",
            extra={
                "text_hash": hash_text_for_audit(text),
                "locale": self.locale.value,
                "sentiment": result.sentiment,
                "score": result.score,
                "keyword_weight": total,
            }
        )
        return result

    def snapshot(self, text: Optional[str]) -> Optional[SentimentSnapshot]:
        """Snapshot to persist with an entry at save time (None for no note)."""
        if not text or not text.strip():
            return None
        return self.analyze(text).to_snapshot()

    @staticmethod
    def _match(text: str, keywords: Tuple[str, ...], weight: float, tally: _Tally) -> None:
        for keyword in keywords:
            if keyword in text:
                tally.weight += weight
                tally.keywords.append(keyword)

    def _classify(self, score: float) -> Tuple[str, str]:
        """Map a raw score to (label, emoji)."""
        if score > self.config.polarity_threshold:
            strong = score > self.config.strong_threshold
            return "positive", EMOJI_STRONG_POSITIVE if strong else EMOJI_MILD_POSITIVE
        if score < -self.config.polarity_threshold:
            strong = score < -self.config.strong_threshold
            return "negative", EMOJI_STRONG_NEGATIVE if strong else EMOJI_MILD_NEGATIVE
        return "neutral", EMOJI_NEUTRAL


_CLASSIFIERS: Dict[Locale, SentimentClassifier] = {}


def analyze_sentiment(text: Optional[str], locale: Optional[str] = None) -> SentimentResult:
    """Classify a note with the shared classifier for the locale."""
    resolved = resolve_locale(locale)
    classifier = _CLASSIFIERS.get(resolved)
    if classifier is None:
        classifier = SentimentClassifier(locale=resolved.value)
        _CLASSIFIERS[resolved] = classifier
    return classifier.analyze(text)
