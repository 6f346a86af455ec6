"""Locale strategy: one immutable bundle of templates per supported locale.

A locale tag only changes wording. Thresholds, rule order and scoring never
read from a bundle, so adding a locale means adding a bundle module and a
row in _BUNDLES, nothing more.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)


class Locale(Enum):
    """Supported locales. French is the product default."""
    FR = "fr"
    EN = "en"


DEFAULT_LOCALE = Locale.FR


@dataclass(frozen=True)
class AlertText:
    """Wording of one red-flag alert."""
    title: str
    message: str
    action: str


@dataclass(frozen=True)
class TemplateBundle:
    """Every human-readable string the analytics services produce.

    Templates use str.format() placeholders documented next to each field.
    """
    locale: Locale

    # Quality of life
    qol_interpretations: Mapping[str, str]      # no_data, none, mild, moderate, high, very_high
    qol_domain_labels: Mapping[str, str]        # domain -> phrase used inside a sentence
    qol_domain_short_labels: Mapping[str, str]  # domain -> heading
    qol_recommendation_balanced: str
    qol_recommendation_moderate: str            # {domain}
    qol_recommendation_high: str                # {domain}
    qol_summary_header: str                     # {score}
    qol_summary_domain_line: str                # {label} {score} {days}
    qol_summary_details: str                    # {details}
    qol_summary_no_symptoms: str

    # Weekly insights
    symptom_labels: Mapping[str, str]
    weekday_names: Tuple[str, ...]              # Monday first (date.weekday())
    list_joiner: str
    day_singular: str
    day_plural: str
    mood_trend_title: str
    mood_trend_up: str                          # {pct}
    mood_trend_down: str                        # {pct}
    sleep_title: str
    sleep_better: str                           # {delta}
    sleep_worse: str                            # {delta}
    best_day_title: str
    best_day_message: str                       # {day} {mood}
    top_symptoms_title: str
    top_symptoms_message: str                   # {symptoms}
    time_pattern_title: str
    time_pattern_morning: str
    time_pattern_evening: str
    energy_title: str
    energy_message: str                         # {avg}
    energy_good: str
    energy_watch: str
    consistency_title: str
    consistency_message: str                    # {count}

    # Monthly insights
    monthly_overview_title: str
    monthly_overview_message: str               # {mood} {sleep} {energy}
    monthly_symptom_message: str                # {count}

    # Red-flag alerts, keyed by alert id
    alerts: Mapping[str, AlertText]

    # Sentiment companion messages
    encouragement_positive: Tuple[str, ...]
    encouragement_negative: Tuple[str, ...]
    encouragement_neutral: str
    empathetic_fallbacks: Tuple[str, ...]

    # Assistant digest
    digest_header: str
    digest_sentiment_line: str                  # {average} {direction} {positive} {negative} {neutral} {total}
    digest_no_sentiment: str
    digest_directions: Mapping[str, str]        # improving, declining, stable
    digest_symptoms_line: str                   # {symptoms}
    intensity_words: Tuple[str, ...]            # index = intensity bucket 0..3

    def alert(self, alert_id: str) -> AlertText:
        """Wording for an alert id. Raises KeyError for unknown ids."""
        return self.alerts[alert_id]

    def symptom_label(self, symptom_id: str) -> str:
        return self.symptom_labels.get(symptom_id, symptom_id)

    def days(self, count: int) -> str:
        return self.day_singular if count == 1 else self.day_plural


_BUNDLES: Dict[Locale, TemplateBundle] = {}


def register_bundle(bundle: TemplateBundle) -> None:
    """Register the bundle for its locale (called by the locale modules)."""
    _BUNDLES[bundle.locale] = bundle


def resolve_locale(tag: Optional[str]) -> Locale:
    """Map a free-form locale tag (fr, fr-FR, en_US, ...) to a Locale.

    Tags starting with "en" resolve to English; anything else, including an
    empty tag, falls back to the French default.
    """
    normalized = (tag or DEFAULT_LOCALE.value).strip().lower()
    if normalized.startswith("en"):
        return Locale.EN
    if not normalized.startswith("fr"):
        logger.debug(
            "LOCALE_FALLBACK",
            extra={"requested": normalized, "resolved": DEFAULT_LOCALE.value}
        )
    return DEFAULT_LOCALE


def get_bundle(tag: Optional[str] = None) -> TemplateBundle:
    """Template bundle for a locale tag."""
    return _BUNDLES[resolve_locale(tag)]
