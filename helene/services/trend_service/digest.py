"""Compact text context for the conversational assistant.

The assistant only ever sees this digest, never the raw entries or the
internal report structures.
"""
import logging
from typing import Dict, List, Optional, Sequence

from helene.shared.i18n import TemplateBundle, get_bundle, resolve_locale
from helene.shared.models import DailyLogEntry, SymptomCatalog, most_recent_first
from .aggregator import TrendSummary
from .config import TrendConfig

logger = logging.getLogger(__name__)


def intensity_bucket(symptom_id: str, intensity: int) -> int:
    """Map an intensity on the symptom's own scale to 0 (none) .. 3 (severe)."""
    scale = SymptomCatalog.symptom(symptom_id).max_intensity
    # ceil(intensity * 3 / scale) in integers
    return (intensity * 3 + scale - 1) // scale


def recent_peak_intensities(
    entries: Sequence[DailyLogEntry],
    recent_entries: int,
) -> Dict[str, int]:
    """Highest intensity per present symptom over the most recent entries.

    Keys follow catalog scan order.
    """
    recent = most_recent_first(entries)[:recent_entries]
    peaks = {
        symptom_id: max((entry.intensity(symptom_id) for entry in recent), default=0)
        for symptom_id in SymptomCatalog.symptom_ids()
    }
    return {symptom_id: peak for symptom_id, peak in peaks.items() if peak > 0}


def _symptom_phrases(peaks: Dict[str, int], bundle: TemplateBundle) -> List[str]:
    return [
        f"{bundle.symptom_label(symptom_id)} ({bundle.intensity_words[intensity_bucket(symptom_id, peak)]})"
        for symptom_id, peak in peaks.items()
    ]


def build_assistant_digest(
    summary: TrendSummary,
    entries: Sequence[DailyLogEntry],
    locale: Optional[str] = None,
    config: Optional[TrendConfig] = None,
) -> str:
    """Personalization context for the assistant prompt.

    Args:
        summary: Trend summary of the same window
        entries: Entries of the window, any order
        locale: Locale tag for the wording
        config: Trend configuration (recent window for symptoms)

    Returns:
        Multi-line text: header, sentiment line, and a symptom line when
        any symptom was logged recently
    """
    config = config or TrendConfig()
    bundle = get_bundle(resolve_locale(locale).value)

    lines = [bundle.digest_header]
    if summary.total_analyzed:
        lines.append(bundle.digest_sentiment_line.format(
            average=f"{summary.average_sentiment:.2f}",
            direction=bundle.digest_directions[summary.trend_direction],
            positive=summary.positive_count,
            negative=summary.negative_count,
            neutral=summary.neutral_count,
            total=summary.total_analyzed,
        ))
    else:
        lines.append(bundle.digest_no_sentiment)

    phrases = _symptom_phrases(recent_peak_intensities(entries, config.digest_recent_entries), bundle)
    if phrases:
        lines.append(bundle.digest_symptoms_line.format(symptoms=", ".join(phrases)))

    logger.debug(
        "ASSISTANT_DIGEST_BUILT",
        extra={"lines": len(lines), "symptoms": len(phrases)}
    )
    return "\n".join(lines)
