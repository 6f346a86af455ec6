"""Domain quality-of-life scorer (MENQOL-style, 0-8 per domain).

For every entry and domain, each contributing item is rescaled to 0-8:
- symptoms: round(raw / max_intensity * 8), only when raw > 0
- mood / sleep_quality / energy_level: inverted burden
  round((max - raw) / max * 8), only when max - raw > 0

The per-day domain score is the mean of that day's contributing items; days
without any contributing item are left out of the domain aggregate instead
of counting as zero. The global score is the mean of all four domain
aggregates, including domains that aggregated to zero for lack of data.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple

from helene.shared.i18n import get_bundle, resolve_locale
from helene.shared.models import DailyLogEntry, QoLDomain, SymptomCatalog
from helene.shared.utils import mean, round_half_up, round_to_int
from .config import QualityOfLifeConfig

logger = logging.getLogger(__name__)


SEVERITY_LEVELS = ("none", "mild", "moderate", "severe", "very_severe")


@dataclass(frozen=True)
class ItemContribution:
    """One item's 0-8 contribution on one day."""
    item_id: str
    raw_value: int
    scaled_value: int


@dataclass(frozen=True)
class ItemDetail:
    """One item aggregated over the analysis window."""
    item_id: str
    days_present: int
    average_raw: float
    average_scaled: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "item": self.item_id,
            "daysPresent": self.days_present,
            "averageRaw": self.average_raw,
            "averageScore": self.average_scaled,
        }


@dataclass(frozen=True)
class DomainScore:
    """Aggregate burden of one domain over the window."""
    domain: QoLDomain
    score: float
    severity: str
    days_affected: int
    item_details: Tuple[ItemDetail, ...] = ()

    def __post_init__(self):
        if not 0.0 <= self.score <= 8.0:
            raise ValueError(f"Domain score must be 0.0-8.0, got {self.score}")
        if self.severity not in SEVERITY_LEVELS:
            raise ValueError(f"Unknown severity: {self.severity}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "severity": self.severity,
            "daysAffected": self.days_affected,
            "itemDetails": [detail.to_dict() for detail in self.item_details],
        }


@dataclass(frozen=True)
class QualityOfLifeReport:
    """Quality-of-life report for one user and window. Never persisted."""
    global_score: float
    domains: Dict[QoLDomain, DomainScore]
    interpretation: str
    recommendation: str
    entries_analyzed: int
    locale: str = "fr"
    dominant_domain: Optional[QoLDomain] = None

    def __post_init__(self):
        if not 0.0 <= self.global_score <= 8.0:
            raise ValueError(f"Global score must be 0.0-8.0, got {self.global_score}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            "globalScore": self.global_score,
            "domains": {domain.value: score.to_dict() for domain, score in self.domains.items()},
            "interpretation": self.interpretation,
            "recommendation": self.recommendation,
            "entriesAnalyzed": self.entries_analyzed,
            "locale": self.locale,
        }


class QualityOfLifeScorer:
    """Computes QualityOfLifeReport from a window of entries.

    Stateless apart from configuration; reports are recomputed from
    scratch on every call.
    """

    def __init__(self, config: Optional[QualityOfLifeConfig] = None):
        self.config = config or QualityOfLifeConfig()

    def score(
        self,
        entries: Sequence[DailyLogEntry],
        locale: Optional[str] = None,
    ) -> QualityOfLifeReport:
        """Score a window of entries (7, 14, 30 days ...).

        Args:
            entries: Entries of the window, any order
            locale: Locale tag for interpretation and recommendation

        Returns:
            QualityOfLifeReport; all zeros with a "no data" interpretation
            when entries is empty
        """
        resolved = resolve_locale(locale)
        bundle = get_bundle(resolved.value)

        if not entries:
            logger.info("QOL_SCORE_EMPTY_WINDOW", extra={"locale": resolved.value})
            return QualityOfLifeReport(
                global_score=0.0,
                domains={domain: self._empty_domain(domain) for domain in QoLDomain},
                interpretation=bundle.qol_interpretations["no_data"],
                recommendation=bundle.qol_recommendation_balanced,
                entries_analyzed=0,
                locale=resolved.value,
            )

        domains = {domain: self.score_domain(entries, domain) for domain in QoLDomain}
        global_score = round_half_up(
            mean(d.score for d in domains.values()), self.config.score_decimals
        )
        dominant = max(QoLDomain, key=lambda domain: domains[domain].score)

        report = QualityOfLifeReport(
            global_score=global_score,
            domains=domains,
            interpretation=bundle.qol_interpretations[self.interpretation_key(global_score)],
            recommendation=self._recommendation(dominant, domains[dominant].score, bundle),
            entries_analyzed=len(entries),
            locale=resolved.value,
            dominant_domain=dominant,
        )

        logger.info(
            "QOL_SCORE_COMPLETED",
            extra={
                "entries_analyzed": len(entries),
                "global_score": global_score,
                "dominant_domain": dominant.value,
                "domain_scores": {d.value: s.score for d, s in domains.items()},
            }
        )
        return report

    def score_domain(self, entries: Iterable[DailyLogEntry], domain: QoLDomain) -> DomainScore:
        """Aggregate one domain over the window.

        Raises:
            KeyError: If domain is not a registered QoLDomain
        """
        item_ids = SymptomCatalog.items_for(domain)
        days = [self.contributions(entry, item_ids) for entry in entries]
        scored_days = [day for day in days if day]

        day_scores = [self.day_score(day) for day in scored_days]
        score = round_half_up(mean(day_scores), self.config.score_decimals)

        return DomainScore(
            domain=domain,
            score=score,
            severity=self.severity(score),
            days_affected=len(scored_days),
            item_details=self._item_details(item_ids, scored_days),
        )

    def contributions(
        self,
        entry: DailyLogEntry,
        item_ids: Iterable[str],
    ) -> Tuple[ItemContribution, ...]:
        """Rescaled 0-8 contributions of the given items for one entry."""
        contributions = (self._contribution(entry, item_id) for item_id in item_ids)
        return tuple(c for c in contributions if c is not None)

    def day_score(self, contributions: Sequence[ItemContribution]) -> float:
        """Mean of one day's contributions for a domain."""
        return round_half_up(
            mean(c.scaled_value for c in contributions), self.config.score_decimals
        )

    def severity(self, score: float) -> str:
        """Severity tier of a 0-8 score."""
        if score <= 0:
            return "none"
        if score < self.config.mild_max:
            return "mild"
        if score < self.config.moderate_max:
            return "moderate"
        if score < self.config.severe_max:
            return "severe"
        return "very_severe"

    def interpretation_key(self, global_score: float) -> str:
        """Bundle key of the interpretation for a global score."""
        return {
            "none": "none",
            "mild": "mild",
            "moderate": "moderate",
            "severe": "high",
            "very_severe": "very_high",
        }[self.severity(global_score)]

    def _contribution(self, entry: DailyLogEntry, item_id: str) -> Optional[ItemContribution]:
        if SymptomCatalog.is_registered(item_id):
            raw = entry.intensity(item_id)
            burden = raw
            scale = SymptomCatalog.symptom(item_id).max_intensity
        else:
            raw = entry.signal(item_id)
            if raw is None:
                return None
            scale = SymptomCatalog.signal(item_id).max_value
            burden = scale - raw

        if burden <= 0:
            return None
        return ItemContribution(
            item_id=item_id,
            raw_value=raw,
            scaled_value=round_to_int(burden / scale * self.config.menqol_max),
        )

    def _item_details(
        self,
        item_ids: Sequence[str],
        scored_days: Sequence[Tuple[ItemContribution, ...]],
    ) -> Tuple[ItemDetail, ...]:
        details = []
        for item_id in item_ids:
            hits = [c for day in scored_days for c in day if c.item_id == item_id]
            if not hits:
                continue
            details.append(ItemDetail(
                item_id=item_id,
                days_present=len(hits),
                average_raw=round_half_up(mean(c.raw_value for c in hits), 1),
                average_scaled=round_half_up(mean(c.scaled_value for c in hits), 1),
            ))
        return tuple(details)

    def _recommendation(self, dominant: QoLDomain, score: float, bundle) -> str:
        if score <= 0:
            return bundle.qol_recommendation_balanced
        label = bundle.qol_domain_labels[dominant.value]
        if score < self.config.recommendation_high_min:
            return bundle.qol_recommendation_moderate.format(domain=label)
        return bundle.qol_recommendation_high.format(domain=label)

    @staticmethod
    def _empty_domain(domain: QoLDomain) -> DomainScore:
        return DomainScore(domain=domain, score=0.0, severity="none", days_affected=0)


def summarize_report(report: QualityOfLifeReport) -> str:
    """Plain-text summary for the clinical report document.

    Lists only domains with a non-zero score; values are copied from the
    report unchanged.
    """
    bundle = get_bundle(report.locale)
    lines = [
        bundle.qol_summary_domain_line.format(
            label=bundle.qol_domain_short_labels[domain.value],
            score=score.score,
            days=score.days_affected,
        )
        for domain, score in report.domains.items()
        if score.score > 0
    ]
    details = " • ".join(lines) or bundle.qol_summary_no_symptoms

    return "\n".join([
        bundle.qol_summary_header.format(score=report.global_score),
        report.interpretation,
        "",
        bundle.qol_summary_details.format(details=details),
    ])
