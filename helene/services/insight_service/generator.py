"""Week-over-week and monthly insights from daily log entries.

Weekly insights come from a fixed, ordered rule catalog. Every rule runs
independently on the same two-week snapshot; the fired insights are kept in
declaration order and the list is cut to the configured maximum only after
all rules have run.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from helene.shared.i18n import TemplateBundle, get_bundle, resolve_locale
from helene.shared.models import DailyLogEntry, SymptomCatalog, most_recent_first
from helene.shared.utils import mean, round_half_up, round_to_int
from .config import InsightConfig

logger = logging.getLogger(__name__)


INSIGHT_TYPES = ("positive", "warning", "info")


@dataclass(frozen=True)
class Insight:
    """One observation for the presentation layer."""
    id: str
    type: str
    tag: str
    title: str
    message: str
    value: str = ""

    def __post_init__(self):
        if self.type not in INSIGHT_TYPES:
            raise ValueError(f"Unknown insight type: {self.type}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "tag": self.tag,
            "title": self.title,
            "message": self.message,
            "value": self.value,
        }


@dataclass(frozen=True)
class WeekWindow:
    """Current and previous week of a most-recent-first entry list."""
    current: Tuple[DailyLogEntry, ...]
    previous: Tuple[DailyLogEntry, ...]


def signal_average(entries: Sequence[DailyLogEntry], signal_id: str) -> float:
    """Mean of a signal over entries that recorded it, 0.0 if none did."""
    return mean(
        value for value in (entry.signal(signal_id) for entry in entries)
        if value is not None
    )


def symptom_day_counts(entries: Sequence[DailyLogEntry]) -> List[Tuple[str, int]]:
    """(symptom id, days present) for present symptoms, most frequent first.

    Ties keep catalog scan order.
    """
    counts = [
        (symptom_id, sum(1 for entry in entries if entry.intensity(symptom_id) > 0))
        for symptom_id in SymptomCatalog.symptom_ids()
    ]
    present = [item for item in counts if item[1] > 0]
    return sorted(present, key=lambda item: -item[1])


def _one_decimal(value: float) -> str:
    return f"{round_half_up(value, 1):.1f}"


class InsightGenerator:
    """Builds weekly and monthly insight lists.

    Holds only configuration; every call is a pure function of its inputs.
    """

    def __init__(self, config: Optional[InsightConfig] = None):
        self.config = config or InsightConfig()
        self._weekly_rules: Tuple[Callable[[WeekWindow, TemplateBundle], Optional[Insight]], ...] = (
            self.mood_trend,
            self.sleep_trend,
            self.best_day,
            self.top_symptoms,
            self.time_pattern,
            self.energy_level,
            self.consistency,
        )

    def window(self, entries: Sequence[DailyLogEntry]) -> WeekWindow:
        """Split entries into current and previous week, newest first."""
        ordered = most_recent_first(entries)
        days = self.config.week_days
        return WeekWindow(
            current=tuple(ordered[:days]),
            previous=tuple(ordered[days:2 * days]),
        )

    def weekly(
        self,
        entries: Sequence[DailyLogEntry],
        locale: Optional[str] = None,
    ) -> List[Insight]:
        """Evaluate every weekly rule, then keep at most max_insights.

        Args:
            entries: Up to 14 days of entries, any order
            locale: Locale tag for titles and messages

        Returns:
            Fired insights in rule declaration order; empty for no entries
        """
        if not entries:
            return []

        bundle = get_bundle(resolve_locale(locale).value)
        window = self.window(entries)

        fired = [
            insight for insight in (rule(window, bundle) for rule in self._weekly_rules)
            if insight is not None
        ]
        kept = fired[:self.config.max_insights]

        logger.info(
            "WEEKLY_INSIGHTS_GENERATED",
            extra={
                "entries_current_week": len(window.current),
                "entries_previous_week": len(window.previous),
                "fired": [insight.id for insight in fired],
                "kept": len(kept),
            }
        )
        return kept

    def monthly(
        self,
        entries: Sequence[DailyLogEntry],
        locale: Optional[str] = None,
    ) -> List[Insight]:
        """Overview plus top symptoms for a month of entries.

        Needs at least monthly_min_entries entries, otherwise returns [].
        Not capped: the list is its own report section.
        """
        ordered = most_recent_first(entries)
        if len(ordered) < self.config.monthly_min_entries:
            logger.debug(
                "MONTHLY_INSIGHTS_INSUFFICIENT_DATA",
                extra={"entries": len(ordered), "required": self.config.monthly_min_entries}
            )
            return []

        bundle = get_bundle(resolve_locale(locale).value)
        total = len(ordered)

        insights = [Insight(
            id="monthly-overview",
            type="info",
            tag="analytics",
            title=bundle.monthly_overview_title,
            message=bundle.monthly_overview_message.format(
                mood=_one_decimal(signal_average(ordered, "mood")),
                sleep=_one_decimal(signal_average(ordered, "sleep_quality")),
                energy=_one_decimal(signal_average(ordered, "energy_level")),
            ),
            value=f"{total} {bundle.days(total)}",
        )]

        top = symptom_day_counts(ordered)[:self.config.top_symptoms_monthly]
        for index, (symptom_id, count) in enumerate(top):
            label = bundle.symptom_label(symptom_id)
            insights.append(Insight(
                id=f"monthly-symptom-{index}",
                type="warning",
                tag="medical",
                title=label[:1].upper() + label[1:],
                message=bundle.monthly_symptom_message.format(count=count),
                value=f"{round_to_int(count / total * 100)}%",
            ))

        logger.info(
            "MONTHLY_INSIGHTS_GENERATED",
            extra={"entries": total, "insights": len(insights)}
        )
        return insights

    # Weekly rules, in evaluation order

    def mood_trend(self, window: WeekWindow, bundle: TemplateBundle) -> Optional[Insight]:
        """Needs a mood average in both weeks; an empty current week is not a drop."""
        current = signal_average(window.current, "mood")
        previous = signal_average(window.previous, "mood")
        if previous <= 0 or current <= 0:
            return None

        change = (current - previous) / previous * 100
        if abs(change) <= self.config.mood_change_pct_min:
            return None

        rising = change > 0
        template = bundle.mood_trend_up if rising else bundle.mood_trend_down
        return Insight(
            id="mood-trend",
            type="positive" if rising else "warning",
            tag="trending-up" if rising else "trending-down",
            title=bundle.mood_trend_title,
            message=template.format(pct=round_to_int(abs(change))),
            value=f"{_one_decimal(current)}/5",
        )

    def sleep_trend(self, window: WeekWindow, bundle: TemplateBundle) -> Optional[Insight]:
        """Needs a sleep average in both weeks."""
        current = signal_average(window.current, "sleep_quality")
        previous = signal_average(window.previous, "sleep_quality")
        if previous <= 0 or current <= 0:
            return None

        change = current - previous
        if abs(change) <= self.config.sleep_change_min:
            return None

        improved = change > 0
        template = bundle.sleep_better if improved else bundle.sleep_worse
        return Insight(
            id="sleep-trend",
            type="positive" if improved else "info",
            tag="moon",
            title=bundle.sleep_title,
            message=template.format(delta=_one_decimal(change)),
            value=f"{_one_decimal(current)}/10",
        )

    def best_day(self, window: WeekWindow, bundle: TemplateBundle) -> Optional[Insight]:
        best: Optional[DailyLogEntry] = None
        for entry in window.current:
            if entry.mood is not None and entry.mood > (best.mood if best else 0):
                best = entry
        if best is None:
            return None

        day_name = bundle.weekday_names[best.log_date.weekday()]
        return Insight(
            id="best-day",
            type="positive",
            tag="star",
            title=bundle.best_day_title,
            message=bundle.best_day_message.format(day=day_name, mood=best.mood),
            value=day_name,
        )

    def top_symptoms(self, window: WeekWindow, bundle: TemplateBundle) -> Optional[Insight]:
        top = symptom_day_counts(window.current)[:self.config.top_symptoms_weekly]
        if not top:
            return None

        labels = bundle.list_joiner.join(bundle.symptom_label(symptom_id) for symptom_id, _ in top)
        top_count = top[0][1]
        return Insight(
            id="top-symptoms",
            type="warning",
            tag="pulse",
            title=bundle.top_symptoms_title,
            message=bundle.top_symptoms_message.format(symptoms=labels),
            value=f"{top_count} {bundle.days(top_count)}",
        )

    def time_pattern(self, window: WeekWindow, bundle: TemplateBundle) -> Optional[Insight]:
        # No capture timestamps: hot flashes stand in for mornings, night sweats for evenings
        morning = sum(1 for entry in window.current if entry.intensity("hot_flashes") > 0)
        evening = sum(1 for entry in window.current if entry.intensity("night_sweats") > 0)
        minimum = self.config.time_pattern_min_days

        if evening > morning and evening >= minimum:
            message = bundle.time_pattern_evening
        elif morning > evening and morning >= minimum:
            message = bundle.time_pattern_morning
        else:
            return None

        return Insight(
            id="time-pattern",
            type="info",
            tag="time",
            title=bundle.time_pattern_title,
            message=message,
            value="",
        )

    def energy_level(self, window: WeekWindow, bundle: TemplateBundle) -> Optional[Insight]:
        average = signal_average(window.current, "energy_level")
        if average <= 0:
            return None

        good = average >= self.config.energy_good_min
        return Insight(
            id="energy",
            type="positive" if good else "info",
            tag="flash",
            title=bundle.energy_title,
            message=bundle.energy_message.format(avg=_one_decimal(average)),
            value=bundle.energy_good if good else bundle.energy_watch,
        )

    def consistency(self, window: WeekWindow, bundle: TemplateBundle) -> Optional[Insight]:
        logged = len(window.current)
        rate = logged / self.config.week_days
        if rate < self.config.consistency_rate_min:
            return None

        return Insight(
            id="consistency",
            type="positive",
            tag="checkmark-circle",
            title=bundle.consistency_title,
            message=bundle.consistency_message.format(count=logged),
            value=f"{round_to_int(rate * 100)}%",
        )


_default_generator: Optional[InsightGenerator] = None


def _generator() -> InsightGenerator:
    global _default_generator
    if _default_generator is None:
        _default_generator = InsightGenerator()
    return _default_generator


def generate_weekly_insights(entries: Sequence[DailyLogEntry], locale: Optional[str] = None) -> List[Insight]:
    """Weekly insights with the default configuration."""
    return _generator().weekly(entries, locale)


def generate_monthly_insights(entries: Sequence[DailyLogEntry], locale: Optional[str] = None) -> List[Insight]:
    """Monthly insights with the default configuration."""
    return _generator().monthly(entries, locale)
