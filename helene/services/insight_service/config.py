"""Insight generation thresholds."""
from dataclasses import dataclass


@dataclass(frozen=True)
class InsightConfig:
    """Windows and firing thresholds for weekly and monthly insights.

    Thresholds are locale independent; a locale only changes wording.
    """

    # Entries are most-recent-first: [0, week_days) current, [week_days, 2*week_days) previous
    week_days: int = 7
    max_insights: int = 5

    mood_change_pct_min: float = 10.0       # |delta %| must exceed this
    sleep_change_min: float = 1.0           # |delta| on the 1-10 scale must exceed this
    top_symptoms_weekly: int = 2
    time_pattern_min_days: int = 3
    energy_good_min: float = 3.0
    consistency_rate_min: float = 0.8

    monthly_min_entries: int = 7
    top_symptoms_monthly: int = 3
