"""Tests for Analytics Service HTTP handler."""
import importlib
import random
from datetime import date, timedelta
from unittest.mock import MagicMock

import pytest

from helene.services.analytics_service.handler import (
    app,
    AnalyticsConfig,
    AnalyticsHandler,
    set_handler,
)
from helene.shared.i18n import get_bundle
from helene.shared.utils import configure_pii_salt, hash_pii
from helene.shared.utils import pii


@pytest.fixture(autouse=True)
def setup_pii_salt():
    configure_pii_salt("test_salt_that_is_at_least_32_characters_long")


@pytest.fixture
def client():
    """Flask test client."""
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


@pytest.fixture
def publisher():
    mock = MagicMock()
    mock.enabled = True
    mock.publish_critical.return_value = 1
    return mock


@pytest.fixture
def handler(publisher):
    """Fresh handler for each test."""
    h = AnalyticsHandler(
        config=AnalyticsConfig(max_entries_per_request=40),
        publisher=publisher,
        rng=random.Random(42),
    )
    set_handler(h)
    return h


def rows(count: int, **fields):
    today = date(2026, 3, 15)
    return [
        dict(fields, log_date=(today - timedelta(days=i)).isoformat())
        for i in range(count)
    ]


class TestHealthEndpoints:
    """Tests for /health and /ready."""

    def test_health_returns_200(self, client, handler):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.get_json()
        assert data["status"] == "healthy"
        assert data["service"] == "analytics-service"

    def test_ready_returns_200(self, client, handler):
        response = client.get("/ready")

        assert response.status_code == 200
        assert response.get_json()["status"] == "ready"


class TestSentimentEndpoint:
    """Tests for /sentiment."""

    def test_classifies_note(self, client, handler):
        response = client.post("/sentiment", json={"note": "Je me sens bien et heureuse aujourd'hui"})

        assert response.status_code == 200
        data = response.get_json()
        assert data["sentiment"] == "positive"
        assert data["score"] == 1.0
        assert data["encouragement"] in get_bundle("fr").encouragement_positive

    def test_empty_note_is_neutral(self, client, handler):
        response = client.post("/sentiment", json={"note": "", "locale": "en"})

        data = response.get_json()
        assert data["sentiment"] == "neutral"
        assert data["confidence"] == 0.0
        assert data["encouragement"] == get_bundle("en").encouragement_neutral

    def test_requires_body(self, client, handler):
        response = client.post("/sentiment")

        assert response.status_code == 400
        assert "Request body required" in response.get_json()["error"]

    def test_rejects_non_string_note(self, client, handler):
        response = client.post("/sentiment", json={"note": 42})

        assert response.status_code == 400


class TestQualityOfLifeEndpoint:
    """Tests for /quality-of-life."""

    def test_perfect_week(self, client, handler):
        response = client.post(
            "/quality-of-life",
            json={"entries": rows(7, mood=5, energy_level=5, sleep_quality=10), "locale": "en"},
        )

        assert response.status_code == 200
        data = response.get_json()
        assert data["globalScore"] == 0.0
        assert data["interpretation"] == "No significant impact on quality of life"
        assert data["entriesAnalyzed"] == 7
        assert set(data["domains"]) == {"vasomotor", "psychosocial", "physical", "sexual"}
        assert data["summary"].startswith("Overall MENQOL score: 0.0/8")

    def test_flat_symptom_columns(self, client, handler):
        response = client.post("/quality-of-life", json={"entries": rows(1, hot_flashes=5)})

        assert response.get_json()["domains"]["vasomotor"]["score"] == 8.0

    def test_requires_entries(self, client, handler):
        response = client.post("/quality-of-life", json={"locale": "fr"})

        assert response.status_code == 400
        assert "entries must be a list" in response.get_json()["error"]

    def test_invalid_date_is_rejected(self, client, handler):
        response = client.post("/quality-of-life", json={"entries": [{"log_date": "yesterday"}]})

        assert response.status_code == 400

    def test_non_object_entry_is_rejected(self, client, handler):
        response = client.post("/quality-of-life", json={"entries": ["2026-03-15"]})

        assert response.status_code == 400

    def test_too_many_entries(self, client, handler):
        response = client.post("/quality-of-life", json={"entries": rows(41)})

        assert response.status_code == 400

    def test_overflowing_numbers_are_clamped(self, client, handler):
        body = '{"entries": [{"log_date": "2026-03-15", "hot_flashes": 1e400, "mood": -1e400}]}'

        response = client.post("/quality-of-life", data=body, content_type="application/json")

        assert response.status_code == 200
        assert response.get_json()["domains"]["vasomotor"]["score"] == 8.0


class TestInsightsEndpoint:
    """Tests for /insights."""

    def test_weekly_by_default(self, client, handler):
        response = client.post("/insights", json={"entries": rows(7, mood=4), "locale": "en"})

        data = response.get_json()
        assert data["period"] == "weekly"
        assert [i["id"] for i in data["insights"]] == ["best-day", "consistency"]

    def test_monthly(self, client, handler):
        response = client.post(
            "/insights",
            json={"entries": rows(10, mood=3, sleep_quality=6, energy_level=3), "period": "monthly"},
        )

        data = response.get_json()
        assert data["period"] == "monthly"
        assert data["insights"][0]["id"] == "monthly-overview"

    def test_unknown_period(self, client, handler):
        response = client.post("/insights", json={"entries": [], "period": "yearly"})

        assert response.status_code == 400


class TestRedFlagsEndpoint:
    """Tests for /red-flags."""

    def test_vasomotor_alert(self, client, handler, publisher):
        response = client.post("/red-flags", json={"entries": rows(5, hot_flashes=5)})

        data = response.get_json()
        assert [a["priorityRank"] for a in data["alerts"]] == [5]
        assert data["alerts"][0]["severity"] == "medium"
        assert data["published"] == 0
        publisher.publish_critical.assert_not_called()

    def test_critical_alert_forwarded_with_hashed_user(self, client, handler, publisher):
        response = client.post(
            "/red-flags",
            json={"entries": rows(2, notes="douleur thoracique"), "user_id": "user-123"},
        )

        data = response.get_json()
        assert data["alerts"][0]["id"] == "red-flag-chest-pain"
        assert data["published"] == 1
        args = publisher.publish_critical.call_args.args
        assert args[1] == hash_pii("user-123")

    def test_critical_alert_without_user_is_not_forwarded(self, client, handler, publisher):
        response = client.post("/red-flags", json={"entries": rows(1, note="suicide")})

        assert response.get_json()["alerts"][0]["priorityRank"] == 0
        publisher.publish_critical.assert_not_called()

    def test_rejects_non_string_user_id(self, client, handler):
        response = client.post("/red-flags", json={"entries": [], "user_id": 7})

        assert response.status_code == 400


class TestTrendsEndpoint:
    """Tests for /trends."""

    def test_summary_and_digest(self, client, handler):
        entries = rows(4, notes="ok", notes_sentiment="positive", notes_sentiment_score=0.5)

        response = client.post("/trends", json={"entries": entries, "locale": "en"})

        data = response.get_json()
        assert data["summary"]["totalAnalyzed"] == 4
        assert data["summary"]["trendDirection"] == "stable"
        assert data["digest"].startswith("User context:")


class TestRedFlagForwardingFailures:
    """Alerts reach the caller even when forwarding fails."""

    def test_missing_salt_still_returns_alerts(self, client, handler, publisher, monkeypatch):
        monkeypatch.setattr(pii, "_PII_SALT", None)

        response = client.post(
            "/red-flags",
            json={"entries": rows(2, notes="douleur thoracique"), "user_id": "u1"},
        )

        assert response.status_code == 200
        data = response.get_json()
        assert data["alerts"][0]["id"] == "red-flag-chest-pain"
        assert data["published"] == 0
        publisher.publish_critical.assert_not_called()

    def test_publisher_error_still_returns_alerts(self, client, handler, publisher):
        publisher.publish_critical.side_effect = RuntimeError("stream unavailable")

        response = client.post(
            "/red-flags",
            json={"entries": rows(1, note="je veux mourir"), "user_id": "u1"},
        )

        assert response.status_code == 200
        data = response.get_json()
        assert data["alerts"][0]["priorityRank"] == 0
        assert data["published"] == 0

    def test_salt_configured_on_import(self, monkeypatch):
        monkeypatch.setattr(pii, "_PII_SALT", None)
        monkeypatch.delenv("PII_HASH_SALT", raising=False)

        import helene.services.analytics_service.handler as handler_module
        importlib.reload(handler_module)

        assert pii._PII_SALT == pii.DEV_PII_SALT
