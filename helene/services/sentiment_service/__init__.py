"""Sentiment Service: deterministic classification of journal notes.

Runs once per entry when a note is saved; the resulting snapshot is stored
with the entry and later consumed by the Trend Service without
recomputation.

Components:
- classifier.py: SentimentClassifier (lexicon matching, weighted scoring)
- config.py: thresholds and per-locale lexicons
- encouragement.py: companion messages with an injected random source
- backfill.py: snapshot backfill for historical entries

Usage:
    from helene.services.sentiment_service import SentimentClassifier
    classifier = SentimentClassifier(locale="fr")
    result = classifier.analyze("Je me sens bien aujourd'hui")
"""

from .classifier import SentimentClassifier, SentimentResult, analyze_sentiment
from .config import SentimentConfig, Lexicon, LEXICONS
from .encouragement import encouragement_message, empathetic_fallback
from .backfill import backfill_sentiment

__all__ = [
    "SentimentClassifier",
    "SentimentResult",
    "analyze_sentiment",
    "SentimentConfig",
    "Lexicon",
    "LEXICONS",
    "encouragement_message",
    "empathetic_fallback",
    "backfill_sentiment",
]
