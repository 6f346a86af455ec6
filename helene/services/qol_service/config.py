"""Quality-of-life scoring configuration.

Source: MENQOL scoring guide - each item is rated 0 (not bothered) to 8
(extremely bothered); domain scores are item means, the overall score is the
mean of the four domains.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class QualityOfLifeConfig:
    """Scale and tier boundaries on the 0-8 MENQOL scale."""

    menqol_max: int = 8

    # Severity tiers: 0 none, (0, mild) mild, [mild, moderate) moderate, ...
    mild_max: float = 2.0
    moderate_max: float = 4.0
    severe_max: float = 6.0

    # Recommendation wording switches to "consult" at this domain score
    recommendation_high_min: float = 4.0

    # Decimals kept on per-day, per-domain and global scores
    score_decimals: int = 1
