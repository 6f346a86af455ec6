"""Trend Service: sentiment trends and the assistant digest."""
from .config import TrendConfig
from .aggregator import TREND_DIRECTIONS, TrendAggregator, TrendSummary, summarize_trend
from .digest import build_assistant_digest, intensity_bucket, recent_peak_intensities

__all__ = [
    "TrendConfig",
    "TREND_DIRECTIONS",
    "TrendAggregator",
    "TrendSummary",
    "summarize_trend",
    "build_assistant_digest",
    "intensity_bucket",
    "recent_peak_intensities",
]
