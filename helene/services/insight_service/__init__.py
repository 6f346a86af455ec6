"""Insight service: week-over-week and monthly observations."""
from .config import InsightConfig
from .generator import (
    Insight,
    InsightGenerator,
    INSIGHT_TYPES,
    WeekWindow,
    generate_monthly_insights,
    generate_weekly_insights,
    signal_average,
    symptom_day_counts,
)

__all__ = [
    "InsightConfig",
    "Insight",
    "InsightGenerator",
    "INSIGHT_TYPES",
    "WeekWindow",
    "generate_monthly_insights",
    "generate_weekly_insights",
    "signal_average",
    "symptom_day_counts",
]
