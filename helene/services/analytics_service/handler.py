"""Analytics Service HTTP Handler - health-log analytics API.

Exposes every analytics component to the presentation layer. The service
keeps no per-user state: each request carries its window of entries and
every report is recomputed from scratch.

Endpoints:
- GET /health - Health check
- GET /ready - Readiness check
- POST /sentiment - Classify one note
- POST /quality-of-life - Domain quality-of-life report
- POST /insights - Weekly or monthly insights
- POST /red-flags - Priority-sorted safety alerts
- POST /trends - Sentiment trend and assistant digest
"""
import logging
import os
import random
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from flask import Flask, request, jsonify

from helene.services.insight_service import InsightGenerator
from helene.services.qol_service import QualityOfLifeScorer, summarize_report
from helene.services.safety_service import RedFlagDetector, RedFlagEventPublisher
from helene.services.sentiment_service import SentimentClassifier, encouragement_message
from helene.services.trend_service import TrendAggregator, build_assistant_digest
from helene.shared.i18n import resolve_locale
from helene.shared.models import DailyLogEntry, entries_from_dicts
from helene.shared.utils import configure_pii_salt_from_env, hash_pii

logger = logging.getLogger(__name__)

app = Flask(__name__)

# Configure PII salt from environment
configure_pii_salt_from_env()


INSIGHT_PERIODS = ("weekly", "monthly")


@dataclass
class AnalyticsConfig:
    """Configuration for analytics service."""
    max_entries_per_request: int = 60


class InvalidRequest(ValueError):
    """Malformed request body; reported as HTTP 400."""


def parse_entries(data: Mapping[str, Any], limit: int) -> List[DailyLogEntry]:
    """Entries from a request body.

    Raises:
        InvalidRequest: If "entries" is missing, not a list of objects,
            longer than limit, or holds a row without a valid log_date
    """
    rows = data.get("entries")
    if not isinstance(rows, list):
        raise InvalidRequest("entries must be a list")
    if len(rows) > limit:
        raise InvalidRequest(f"at most {limit} entries per request")
    if not all(isinstance(row, dict) for row in rows):
        raise InvalidRequest("every entry must be an object")
    try:
        return entries_from_dicts(rows)
    except ValueError as e:
        raise InvalidRequest(str(e)) from e


class AnalyticsHandler:
    """Handler wiring the analytics components together."""

    def __init__(
        self,
        config: Optional[AnalyticsConfig] = None,
        scorer: Optional[QualityOfLifeScorer] = None,
        insight_generator: Optional[InsightGenerator] = None,
        detector: Optional[RedFlagDetector] = None,
        aggregator: Optional[TrendAggregator] = None,
        publisher: Optional[RedFlagEventPublisher] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize handler with dependencies.

        Args:
            config: Analytics configuration
            scorer: Quality-of-life scorer
            insight_generator: Insight generator
            detector: Red-flag detector
            aggregator: Trend aggregator
            publisher: Red-flag event publisher (injected for testing)
            rng: Random source for companion messages (seeded in tests)
        """
        self.config = config or AnalyticsConfig()
        self.scorer = scorer or QualityOfLifeScorer()
        self.insight_generator = insight_generator or InsightGenerator()
        self.detector = detector or RedFlagDetector()
        self.aggregator = aggregator or TrendAggregator()
        self.publisher = publisher or RedFlagEventPublisher.from_env()
        self.rng = rng or random.Random()
        self._classifiers: Dict[str, SentimentClassifier] = {}

        logger.info(
            "ANALYTICS_HANDLER_INITIALIZED",
            extra={
                "max_entries_per_request": self.config.max_entries_per_request,
                "publisher_enabled": self.publisher.enabled,
            }
        )

    def classifier(self, locale: Optional[str]) -> SentimentClassifier:
        resolved = resolve_locale(locale).value
        if resolved not in self._classifiers:
            self._classifiers[resolved] = SentimentClassifier(locale=resolved)
        return self._classifiers[resolved]

    def analyze_note(self, note: Optional[str], locale: Optional[str]) -> Dict[str, Any]:
        result = self.classifier(locale).analyze(note)
        response = result.to_dict()
        response["encouragement"] = encouragement_message(result, self.rng, locale)
        return response

    def quality_of_life(self, entries: List[DailyLogEntry], locale: Optional[str]) -> Dict[str, Any]:
        report = self.scorer.score(entries, locale)
        response = report.to_dict()
        response["summary"] = summarize_report(report)
        return response

    def insights(self, entries: List[DailyLogEntry], locale: Optional[str], period: str) -> Dict[str, Any]:
        if period == "monthly":
            insights = self.insight_generator.monthly(entries, locale)
        else:
            insights = self.insight_generator.weekly(entries, locale)
        return {
            "period": period,
            "insights": [insight.to_dict() for insight in insights],
        }

    def red_flags(
        self,
        entries: List[DailyLogEntry],
        locale: Optional[str],
        user_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        alerts = self.detector.detect(entries, locale)

        published = 0
        if user_id and any(alert.is_critical for alert in alerts):
            # The alerts are returned even when forwarding fails
            try:
                user_id_hash = hash_pii(user_id)
                published = self.publisher.publish_critical(alerts, user_id_hash)
            except Exception as e:
                logger.critical(
                    "RED_FLAG_FORWARD_FAILED",
                    extra={
                        "error": str(e),
                        "alert_ids": [alert.id for alert in alerts if alert.is_critical],
                    }
                )
            else:
                logger.info(
                    "RED_FLAG_ALERTS_FORWARDED",
                    extra={"user_id_hash": user_id_hash, "published": published}
                )

        return {
            "alerts": [alert.to_dict() for alert in alerts],
            "published": published,
        }

    def trends(self, entries: List[DailyLogEntry], locale: Optional[str]) -> Dict[str, Any]:
        summary = self.aggregator.summarize(entries)
        return {
            "summary": summary.to_dict(),
            "digest": build_assistant_digest(summary, entries, locale),
        }


# Global handler instance
_handler: Optional[AnalyticsHandler] = None


def get_handler() -> AnalyticsHandler:
    """Get or create the global handler instance."""
    global _handler
    if _handler is None:
        _handler = AnalyticsHandler()
    return _handler


def set_handler(handler: AnalyticsHandler) -> None:
    """Set the global handler (for testing)."""
    global _handler
    _handler = handler


def _json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidRequest("Request body required")
    return data


@app.errorhandler(InvalidRequest)
def invalid_request(error: InvalidRequest):
    logger.warning(
        "INVALID_REQUEST",
        extra={"path": request.path, "error": str(error)}
    )
    return jsonify({"error": str(error)}), 400


# Flask routes
@app.route("/health", methods=["GET"])
def health():
    """Health check endpoint."""
    return jsonify({"status": "healthy", "service": "analytics-service"})


@app.route("/ready", methods=["GET"])
def ready():
    """Readiness check endpoint."""
    return jsonify({"status": "ready", "service": "analytics-service"})


@app.route("/sentiment", methods=["POST"])
def sentiment():
    """Classify one note.

    Body:
        note: Note text (may be empty)
        locale: Optional - Locale tag (default fr)
    """
    data = _json_body()
    note = data.get("note")
    if note is not None and not isinstance(note, str):
        raise InvalidRequest("note must be a string")

    return jsonify(get_handler().analyze_note(note, data.get("locale")))


@app.route("/quality-of-life", methods=["POST"])
def quality_of_life():
    """Domain quality-of-life report.

    Body:
        entries: Required - Entries of the analysis window
        locale: Optional - Locale tag
    """
    data = _json_body()
    handler = get_handler()
    entries = parse_entries(data, handler.config.max_entries_per_request)

    return jsonify(handler.quality_of_life(entries, data.get("locale")))


@app.route("/insights", methods=["POST"])
def insights():
    """Weekly or monthly insights.

    Body:
        entries: Required - Up to 14 days (weekly) or a month of entries
        locale: Optional - Locale tag
        period: Optional - weekly (default) or monthly
    """
    data = _json_body()
    period = data.get("period", "weekly")
    if period not in INSIGHT_PERIODS:
        raise InvalidRequest(f"period must be one of {list(INSIGHT_PERIODS)}")

    handler = get_handler()
    entries = parse_entries(data, handler.config.max_entries_per_request)

    return jsonify(handler.insights(entries, data.get("locale"), period))


@app.route("/red-flags", methods=["POST"])
def red_flags():
    """Priority-sorted red-flag alerts.

    Body:
        entries: Required - Up to 14 days of entries
        locale: Optional - Locale tag
        user_id: Optional - Critical alerts are forwarded when supplied
    """
    data = _json_body()
    user_id = data.get("user_id")
    if user_id is not None and not isinstance(user_id, str):
        raise InvalidRequest("user_id must be a string")

    handler = get_handler()
    entries = parse_entries(data, handler.config.max_entries_per_request)

    return jsonify(handler.red_flags(entries, data.get("locale"), user_id))


@app.route("/trends", methods=["POST"])
def trends():
    """Sentiment trend summary and assistant digest.

    Body:
        entries: Required - Up to 30 days of entries
        locale: Optional - Locale tag
    """
    data = _json_body()
    handler = get_handler()
    entries = parse_entries(data, handler.config.max_entries_per_request)

    return jsonify(handler.trends(entries, data.get("locale")))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    port = int(os.getenv("PORT", "8080"))
    app.run(host="0.0.0.0", port=port)
