"""Safety Service: red-flag detection over recent entries.

Components:
- detector.py: RedFlagDetector (rule catalog, priority ordering)
- config.py: day-count thresholds and phrase lists
- alert_publisher.py: forwards critical alerts to Kinesis

Usage:
    from helene.services.safety_service import RedFlagDetector
    alerts = RedFlagDetector().detect(entries, locale="fr")
"""

from .config import (
    RedFlagThresholds,
    RULES_VERSION,
    SEVERITIES,
    CHEST_PAIN_PHRASES,
    PALPITATION_PHRASES,
    SUICIDAL_PHRASES,
)
from .detector import RedFlagAlert, RedFlagDetector, SafetyWindow, detect_red_flags
from .alert_publisher import RedFlagEvent, RedFlagEventPublisher

__all__ = [
    "RedFlagThresholds",
    "RULES_VERSION",
    "SEVERITIES",
    "CHEST_PAIN_PHRASES",
    "PALPITATION_PHRASES",
    "SUICIDAL_PHRASES",
    "RedFlagAlert",
    "RedFlagDetector",
    "SafetyWindow",
    "detect_red_flags",
    "RedFlagEvent",
    "RedFlagEventPublisher",
]
