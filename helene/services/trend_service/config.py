"""Trend aggregation configuration."""
from dataclasses import dataclass


@dataclass(frozen=True)
class TrendConfig:
    """Windows and thresholds for sentiment trends."""

    # Most recent entries carrying a sentiment snapshot
    window_entries: int = 30

    # Fewer data points than this always yield "stable"
    min_points_for_direction: int = 4

    # Half-average difference needed for improving / declining
    direction_threshold: float = 0.2

    average_decimals: int = 2

    # Entries scanned for the assistant digest's symptom line
    digest_recent_entries: int = 7
