"""Quality-of-Life Service: MENQOL-style domain scoring.

Scores a window of daily entries on four domains (vasomotor,
psychosocial, physical, sexual), each 0-8, and derives an overall score,
interpretation and recommendation.

Components:
- scorer.py: QualityOfLifeScorer, report dataclasses, summarize_report()
- config.py: scale and severity tier boundaries
"""

from .scorer import (
    QualityOfLifeScorer,
    QualityOfLifeReport,
    DomainScore,
    ItemDetail,
    SEVERITY_LEVELS,
    summarize_report,
)
from .config import QualityOfLifeConfig

__all__ = [
    "QualityOfLifeScorer",
    "QualityOfLifeReport",
    "DomainScore",
    "ItemDetail",
    "SEVERITY_LEVELS",
    "summarize_report",
    "QualityOfLifeConfig",
]
