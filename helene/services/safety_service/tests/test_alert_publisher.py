"""Tests for RedFlagEventPublisher.

Publishing must never raise: alerts are already in the caller's hands and
delivery problems are only logged.
"""
import json
from unittest.mock import patch, MagicMock

import pytest

from helene.services.safety_service import (
    RedFlagAlert,
    RedFlagEvent,
    RedFlagEventPublisher,
)


@pytest.fixture
def critical_alert():
    return RedFlagAlert(
        id="red-flag-suicidal",
        severity="critical",
        title="t",
        message="m",
        recommended_action="a",
        priority_rank=0,
        days_matched=1,
    )


@pytest.fixture
def medium_alert():
    return RedFlagAlert(
        id="red-flag-headaches",
        severity="medium",
        title="t",
        message="m",
        recommended_action="a",
        priority_rank=3,
        days_matched=3,
    )


class TestRedFlagEvent:
    """Tests for RedFlagEvent dataclass."""

    def test_payload(self):
        event = RedFlagEvent(
            event_id="evt_123",
            alert_id="red-flag-chest-pain",
            severity="critical",
            priority_rank=1,
            days_matched=2,
            user_id_hash="hash_abc",
        )

        payload = event.to_kinesis_payload()

        assert payload["event_id"] == "evt_123"
        assert payload["event_type"] == "safety.red_flag.detected"
        assert payload["source"] == "helene-safety-service"
        assert "timestamp" in payload
        assert payload["data"]["alert_id"] == "red-flag-chest-pain"
        assert payload["data"]["user_id_hash"] == "hash_abc"
        assert payload["data"]["days_matched"] == 2

    def test_event_is_immutable(self):
        event = RedFlagEvent(
            event_id="evt_123",
            alert_id="red-flag-suicidal",
            severity="critical",
            priority_rank=0,
            days_matched=1,
            user_id_hash="hash_abc",
        )

        with pytest.raises(Exception):  # FrozenInstanceError
            event.severity = "low"


class TestRedFlagEventPublisher:
    """Tests for RedFlagEventPublisher."""

    def test_initialization(self):
        publisher = RedFlagEventPublisher(stream_name="test-stream", enabled=True, region="eu-west-1")

        assert publisher.stream_name == "test-stream"
        assert publisher.enabled is True
        assert publisher.region == "eu-west-1"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("RED_FLAG_STREAM_NAME", "env-stream")
        monkeypatch.setenv("RED_FLAG_PUBLISH_ENABLED", "true")

        publisher = RedFlagEventPublisher.from_env()

        assert publisher.stream_name == "env-stream"
        assert publisher.enabled is True

    def test_from_env_disabled_by_default(self, monkeypatch):
        monkeypatch.delenv("RED_FLAG_PUBLISH_ENABLED", raising=False)

        assert RedFlagEventPublisher.from_env().enabled is False

    def test_publish_disabled_returns_false(self, critical_alert):
        publisher = RedFlagEventPublisher(enabled=False)

        assert publisher.publish_alert(critical_alert, "hash_abc") is False

    def test_publish_success(self, critical_alert):
        mock_kinesis = MagicMock()
        mock_kinesis.put_record.return_value = {"ShardId": "shard-001", "SequenceNumber": "12345"}

        publisher = RedFlagEventPublisher(stream_name="test-stream", enabled=True)
        publisher._kinesis_client = mock_kinesis

        assert publisher.publish_alert(critical_alert, "hash_abc") is True

        call_kwargs = mock_kinesis.put_record.call_args.kwargs
        assert call_kwargs["StreamName"] == "test-stream"
        assert call_kwargs["PartitionKey"] == "hash_abc"
        payload = json.loads(call_kwargs["Data"])
        assert payload["data"]["alert_id"] == "red-flag-suicidal"
        assert payload["data"]["priority_rank"] == 0

    def test_publish_failure_does_not_raise(self, critical_alert):
        mock_kinesis = MagicMock()
        mock_kinesis.put_record.side_effect = Exception("Kinesis unavailable")

        publisher = RedFlagEventPublisher(enabled=True)
        publisher._kinesis_client = mock_kinesis

        assert publisher.publish_alert(critical_alert, "hash_abc") is False

    @patch("boto3.client")
    def test_client_init_failure_falls_back_to_log(self, mock_boto_client, critical_alert):
        mock_boto_client.side_effect = Exception("no credentials")

        publisher = RedFlagEventPublisher(enabled=True)

        assert publisher.publish_alert(critical_alert, "hash_abc") is False

    @patch("boto3.client")
    def test_lazy_client_creation(self, mock_boto_client):
        mock_boto_client.return_value = MagicMock()

        publisher = RedFlagEventPublisher(enabled=True, region="eu-west-3")

        mock_boto_client.assert_not_called()
        assert publisher.kinesis_client is mock_boto_client.return_value
        mock_boto_client.assert_called_once_with("kinesis", region_name="eu-west-3")

    def test_publish_critical_skips_other_severities(self, critical_alert, medium_alert):
        mock_kinesis = MagicMock()
        mock_kinesis.put_record.return_value = {}

        publisher = RedFlagEventPublisher(enabled=True)
        publisher._kinesis_client = mock_kinesis

        published = publisher.publish_critical([critical_alert, medium_alert], "hash_abc")

        assert published == 1
        mock_kinesis.put_record.assert_called_once()
