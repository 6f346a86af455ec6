"""Shared domain models for the Helene analytics services."""
from .symptoms import (
    QoLDomain,
    SymptomCategory,
    SymptomId,
    SignalId,
    SymptomSpec,
    SignalSpec,
    SymptomCatalog,
)
from .entry import (
    DailyLogEntry,
    SentimentSnapshot,
    SENTIMENT_LABELS,
    entries_from_dicts,
    most_recent_first,
)

__all__ = [
    "QoLDomain",
    "SymptomCategory",
    "SymptomId",
    "SignalId",
    "SymptomSpec",
    "SignalSpec",
    "SymptomCatalog",
    "DailyLogEntry",
    "SentimentSnapshot",
    "SENTIMENT_LABELS",
    "entries_from_dicts",
    "most_recent_first",
]
