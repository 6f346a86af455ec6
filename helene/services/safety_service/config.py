"""Safety alert thresholds and phrase lists.

Counts are "days in the window" on entries ordered most-recent-first. The
recent window is the last 7 entries, the extended window the last 14.
Phrase lists hold French and English phrases together: the locale changes
alert wording only, never which notes match.
"""
from dataclasses import dataclass
from typing import FrozenSet


@dataclass(frozen=True)
class RedFlagThresholds:
    """Day-count thresholds per red-flag rule."""
    RECENT_WINDOW_DAYS: int = 7
    EXTENDED_WINDOW_DAYS: int = 14

    CHEST_PAIN_MIN_DAYS: int = 2
    PALPITATION_MIN_DAYS: int = 3
    SUICIDAL_MIN_DAYS: int = 1

    LOW_MOOD_MAX: int = 2               # mood <= this counts as very low
    LOW_MOOD_MIN_DAYS: int = 5

    HEADACHE_INTENSITY_MIN: int = 4     # on the 0-5 physical scale
    HEADACHE_MIN_DAYS: int = 3

    POOR_SLEEP_MAX: int = 3             # sleep_quality <= this, extended window
    POOR_SLEEP_MIN_DAYS: int = 7

    VASOMOTOR_EXTREME_INTENSITY: int = 5
    VASOMOTOR_MIN_DAYS: int = 5

    FATIGUE_INTENSITY_MIN: int = 4
    LOW_ENERGY_MAX: int = 2
    CHRONIC_FATIGUE_MIN_DAYS: int = 5


# Version tracking for the published events
RULES_VERSION = "2026.10.01"

SEVERITIES = ("critical", "high", "medium", "low")


# Plain case-insensitive substring containment, no negation handling:
# "pas de douleur thoracique" still matches.
CHEST_PAIN_PHRASES: FrozenSet[str] = frozenset({
    "douleur thoracique",
    "douleur poitrine",
    "douleur cœur",
    "chest pain",
})

PALPITATION_PHRASES: FrozenSet[str] = frozenset({
    "palpitation",
    "battement",
    "heart racing",
    "racing heart",
    "pounding heart",
})

SUICIDAL_PHRASES: FrozenSet[str] = frozenset({
    "suicide",
    "suicidal",
    "mourir",
    "en finir",
    "kill myself",
    "want to die",
    "end my life",
})
