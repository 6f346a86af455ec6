"""Backfill of sentiment snapshots on historical entries.

Snapshots are normally computed once when a note is saved. Entries saved
before the classifier existed (or after a lexicon change, with force=True)
can be brought up to date here. Returns new entries; inputs are untouched.
"""
import logging
from dataclasses import replace
from typing import Iterable, List, Optional

from helene.shared.models import DailyLogEntry
from .classifier import SentimentClassifier

logger = logging.getLogger(__name__)


def backfill_sentiment(
    entries: Iterable[DailyLogEntry],
    classifier: Optional[SentimentClassifier] = None,
    force: bool = False,
) -> List[DailyLogEntry]:
    """Attach sentiment snapshots to entries that carry a note.

    Args:
        entries: Entries in any order (order is preserved)
        classifier: Classifier to use (default French)
        force: Recompute snapshots that already exist

    Returns:
        New list of entries; entries without a note keep no snapshot
    """
    classifier = classifier or SentimentClassifier()
    updated: List[DailyLogEntry] = []
    computed = 0

    for entry in entries:
        if entry.has_note and (force or entry.sentiment is None):
            entry = replace(entry, sentiment=classifier.snapshot(entry.note))
            computed += 1
        updated.append(entry)

    logger.info(
        "SENTIMENT_BACKFILL_COMPLETED",
        extra={
            "entries": len(updated),
            "snapshots_computed": computed,
            "forced": force,
            "locale": classifier.locale.value,
        }
    )
    return updated
