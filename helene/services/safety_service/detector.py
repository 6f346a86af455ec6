"""Red-flag detection over recent daily log entries.

Every rule of the catalog is evaluated on the same snapshot. Two pairs are
exclusive: palpitations are only reported when the chest-pain rule did not
fire, and persistent low mood only when the suicidal-ideation rule did not
fire. The result is stable-sorted by priority rank (0 first) and never
truncated.

CRITICAL: this module classifies and orders alerts. Escalating a critical
alert to the user is the caller's responsibility.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, FrozenSet, List, Optional, Sequence, Tuple

from helene.shared.i18n import TemplateBundle, get_bundle, resolve_locale
from helene.shared.models import DailyLogEntry, most_recent_first
from .config import (
    CHEST_PAIN_PHRASES,
    PALPITATION_PHRASES,
    SEVERITIES,
    SUICIDAL_PHRASES,
    RedFlagThresholds,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RedFlagAlert:
    """A safety pattern that may need medical attention."""
    id: str
    severity: str
    title: str
    message: str
    recommended_action: str
    priority_rank: int
    days_matched: int = 0

    def __post_init__(self):
        if self.severity not in SEVERITIES:
            raise ValueError(f"Unknown alert severity: {self.severity}")
        if self.priority_rank < 0:
            raise ValueError(f"Priority rank must be >= 0, got {self.priority_rank}")

    @property
    def is_critical(self) -> bool:
        return self.severity == "critical"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "severity": self.severity,
            "title": self.title,
            "message": self.message,
            "recommendedAction": self.recommended_action,
            "priorityRank": self.priority_rank,
            "daysMatched": self.days_matched,
        }


@dataclass(frozen=True)
class SafetyWindow:
    """Recent and extended windows, most recent first."""
    recent: Tuple[DailyLogEntry, ...]
    extended: Tuple[DailyLogEntry, ...]


def note_matches(entry: DailyLogEntry, phrases: FrozenSet[str]) -> bool:
    """True when the entry's note contains any phrase (case-insensitive)."""
    if not entry.note:
        return False
    text = entry.note.lower()
    return any(phrase in text for phrase in phrases)


def count_days(entries: Sequence[DailyLogEntry], predicate: Callable[[DailyLogEntry], bool]) -> int:
    return sum(1 for entry in entries if predicate(entry))


class RedFlagDetector:
    """Evaluates the red-flag rule catalog.

    Holds only thresholds; detect() is a pure function of its input.
    """

    def __init__(self, thresholds: Optional[RedFlagThresholds] = None):
        self.thresholds = thresholds or RedFlagThresholds()
        # Declaration order is the tie-break between equal priority ranks
        self._rules: Tuple[Callable[[SafetyWindow, TemplateBundle], Optional[RedFlagAlert]], ...] = (
            self.cardiac,
            self.mental_health,
            self.headaches,
            self.insomnia,
            self.extreme_vasomotor,
            self.chronic_fatigue,
        )

    def window(self, entries: Sequence[DailyLogEntry]) -> SafetyWindow:
        ordered = most_recent_first(entries)
        return SafetyWindow(
            recent=tuple(ordered[:self.thresholds.RECENT_WINDOW_DAYS]),
            extended=tuple(ordered[:self.thresholds.EXTENDED_WINDOW_DAYS]),
        )

    def detect(
        self,
        entries: Sequence[DailyLogEntry],
        locale: Optional[str] = None,
    ) -> List[RedFlagAlert]:
        """Run every rule and return all alerts sorted by priority rank.

        Args:
            entries: Up to 14 days of entries, any order
            locale: Locale tag for alert wording

        Returns:
            All matching alerts, priority 0 first; empty for no entries
        """
        if not entries:
            return []

        bundle = get_bundle(resolve_locale(locale).value)
        window = self.window(entries)

        fired = [alert for alert in (rule(window, bundle) for rule in self._rules) if alert]
        alerts = sorted(fired, key=lambda alert: alert.priority_rank)

        for alert in alerts:
            if alert.is_critical:
                logger.critical(
                    "RED_FLAG_CRITICAL_DETECTED",
                    extra={
                        "alert_id": alert.id,
                        "priority_rank": alert.priority_rank,
                        "days_matched": alert.days_matched,
                    }
                )

        logger.info(
            "RED_FLAG_SCAN_COMPLETED",
            extra={
                "entries_recent": len(window.recent),
                "entries_extended": len(window.extended),
                "alerts": [alert.id for alert in alerts],
            }
        )
        return alerts

    def cardiac(self, window: SafetyWindow, bundle: TemplateBundle) -> Optional[RedFlagAlert]:
        chest_pain_days = count_days(window.recent, lambda e: note_matches(e, CHEST_PAIN_PHRASES))
        if chest_pain_days >= self.thresholds.CHEST_PAIN_MIN_DAYS:
            return self._alert(bundle, "red-flag-chest-pain", "critical", 1, chest_pain_days)

        palpitation_days = count_days(window.recent, lambda e: note_matches(e, PALPITATION_PHRASES))
        if palpitation_days >= self.thresholds.PALPITATION_MIN_DAYS:
            return self._alert(bundle, "red-flag-palpitations", "high", 2, palpitation_days)
        return None

    def mental_health(self, window: SafetyWindow, bundle: TemplateBundle) -> Optional[RedFlagAlert]:
        suicidal_days = count_days(window.recent, lambda e: note_matches(e, SUICIDAL_PHRASES))
        if suicidal_days >= self.thresholds.SUICIDAL_MIN_DAYS:
            return self._alert(bundle, "red-flag-suicidal", "critical", 0, suicidal_days)

        low_mood_days = count_days(
            window.recent,
            lambda e: e.mood is not None and e.mood <= self.thresholds.LOW_MOOD_MAX,
        )
        if low_mood_days >= self.thresholds.LOW_MOOD_MIN_DAYS:
            return self._alert(bundle, "red-flag-severe-depression", "high", 2, low_mood_days)
        return None

    def headaches(self, window: SafetyWindow, bundle: TemplateBundle) -> Optional[RedFlagAlert]:
        days = count_days(
            window.recent,
            lambda e: e.intensity("headaches") >= self.thresholds.HEADACHE_INTENSITY_MIN,
        )
        if days >= self.thresholds.HEADACHE_MIN_DAYS:
            return self._alert(bundle, "red-flag-headaches", "medium", 3, days)
        return None

    def insomnia(self, window: SafetyWindow, bundle: TemplateBundle) -> Optional[RedFlagAlert]:
        days = count_days(
            window.extended,
            lambda e: e.sleep_quality is not None and e.sleep_quality <= self.thresholds.POOR_SLEEP_MAX,
        )
        if days >= self.thresholds.POOR_SLEEP_MIN_DAYS:
            return self._alert(bundle, "red-flag-insomnia", "medium", 4, days)
        return None

    def extreme_vasomotor(self, window: SafetyWindow, bundle: TemplateBundle) -> Optional[RedFlagAlert]:
        extreme = self.thresholds.VASOMOTOR_EXTREME_INTENSITY
        hot_flash_days = count_days(window.recent, lambda e: e.intensity("hot_flashes") == extreme)
        night_sweat_days = count_days(window.recent, lambda e: e.intensity("night_sweats") == extreme)

        days = max(hot_flash_days, night_sweat_days)
        if days >= self.thresholds.VASOMOTOR_MIN_DAYS:
            return self._alert(bundle, "red-flag-extreme-vasomotor", "medium", 5, days)
        return None

    def chronic_fatigue(self, window: SafetyWindow, bundle: TemplateBundle) -> Optional[RedFlagAlert]:
        """Extreme fatigue and low energy, each counted on its own days."""
        fatigue_days = count_days(
            window.recent,
            lambda e: e.intensity("fatigue") >= self.thresholds.FATIGUE_INTENSITY_MIN,
        )
        low_energy_days = count_days(
            window.recent,
            lambda e: e.energy_level is not None and e.energy_level <= self.thresholds.LOW_ENERGY_MAX,
        )

        days = min(fatigue_days, low_energy_days)
        if days >= self.thresholds.CHRONIC_FATIGUE_MIN_DAYS:
            return self._alert(bundle, "red-flag-chronic-fatigue", "low", 6, days)
        return None

    @staticmethod
    def _alert(
        bundle: TemplateBundle,
        alert_id: str,
        severity: str,
        priority_rank: int,
        days_matched: int,
    ) -> RedFlagAlert:
        text = bundle.alert(alert_id)
        return RedFlagAlert(
            id=alert_id,
            severity=severity,
            title=text.title,
            message=text.message,
            recommended_action=text.action,
            priority_rank=priority_rank,
            days_matched=days_matched,
        )


_default_detector: Optional[RedFlagDetector] = None


def detect_red_flags(entries: Sequence[DailyLogEntry], locale: Optional[str] = None) -> List[RedFlagAlert]:
    """Red-flag detection with the default thresholds."""
    global _default_detector
    if _default_detector is None:
        _default_detector = RedFlagDetector()
    return _default_detector.detect(entries, locale)
