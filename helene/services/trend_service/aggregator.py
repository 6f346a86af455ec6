"""Rolling sentiment trend over stored per-entry snapshots.

Only entries that already carry a sentiment snapshot are analyzed; the
classifier is never re-run here.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from helene.shared.models import DailyLogEntry, most_recent_first
from helene.shared.utils import mean, round_half_up
from .config import TrendConfig

logger = logging.getLogger(__name__)


TREND_DIRECTIONS = ("improving", "declining", "stable")


@dataclass(frozen=True)
class TrendSummary:
    """Sentiment statistics for a window of entries."""
    average_sentiment: float
    trend_direction: str
    positive_count: int
    negative_count: int
    neutral_count: int
    total_analyzed: int

    def __post_init__(self):
        if self.trend_direction not in TREND_DIRECTIONS:
            raise ValueError(f"Unknown trend direction: {self.trend_direction}")
        if self.positive_count + self.negative_count + self.neutral_count != self.total_analyzed:
            raise ValueError("Sentiment counts must add up to total_analyzed")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "averageSentiment": self.average_sentiment,
            "trendDirection": self.trend_direction,
            "positiveCount": self.positive_count,
            "negativeCount": self.negative_count,
            "neutralCount": self.neutral_count,
            "totalAnalyzed": self.total_analyzed,
        }


class TrendAggregator:
    """Classifies the sentiment trend of a user's recent notes."""

    def __init__(self, config: Optional[TrendConfig] = None):
        self.config = config or TrendConfig()

    def analyzed_entries(self, entries: Sequence[DailyLogEntry]) -> List[DailyLogEntry]:
        """Entries with a snapshot, oldest first, limited to the window."""
        with_snapshot = [e for e in most_recent_first(entries) if e.sentiment is not None]
        return list(reversed(with_snapshot[:self.config.window_entries]))

    def summarize(self, entries: Sequence[DailyLogEntry]) -> TrendSummary:
        """Average, label counts and direction of the window.

        Args:
            entries: Up to 30 days of entries, any order

        Returns:
            TrendSummary; zeros and "stable" when no entry has a snapshot
        """
        analyzed = self.analyzed_entries(entries)
        scores = [e.sentiment.score for e in analyzed]
        labels = [e.sentiment.label for e in analyzed]

        summary = TrendSummary(
            average_sentiment=round_half_up(mean(scores), self.config.average_decimals),
            trend_direction=self.direction(scores),
            positive_count=labels.count("positive"),
            negative_count=labels.count("negative"),
            neutral_count=labels.count("neutral"),
            total_analyzed=len(analyzed),
        )

        logger.info(
            "TREND_SUMMARY_COMPUTED",
            extra={
                "total_analyzed": summary.total_analyzed,
                "average_sentiment": summary.average_sentiment,
                "trend_direction": summary.trend_direction,
            }
        )
        return summary

    def direction(self, chronological_scores: Sequence[float]) -> str:
        """Compare the older and newer halves of a chronological series.

        The split point is floor(n / 2); with an odd count the newer half
        holds the extra point.
        """
        if len(chronological_scores) < self.config.min_points_for_direction:
            return "stable"

        midpoint = len(chronological_scores) // 2
        older = mean(chronological_scores[:midpoint])
        newer = mean(chronological_scores[midpoint:])

        if newer - older > self.config.direction_threshold:
            return "improving"
        if older - newer > self.config.direction_threshold:
            return "declining"
        return "stable"


_default_aggregator: Optional[TrendAggregator] = None


def summarize_trend(entries: Sequence[DailyLogEntry]) -> TrendSummary:
    """Trend summary with the default configuration."""
    global _default_aggregator
    if _default_aggregator is None:
        _default_aggregator = TrendAggregator()
    return _default_aggregator.summarize(entries)
