"""Red-flag event publisher.

Forwards critical red-flag alerts to a Kinesis stream so the notification
side can escalate them. Detection never waits on delivery: a failed publish
is logged at CRITICAL for manual follow-up and reported as False.
"""
import json
import logging
import os
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Optional

from .config import RULES_VERSION
from .detector import RedFlagAlert

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class RedFlagEvent:
    """Immutable red-flag event, one per critical alert."""
    event_id: str
    alert_id: str
    severity: str
    priority_rank: int
    days_matched: int
    user_id_hash: str
    event_type: str = "safety.red_flag.detected"
    rules_version: str = RULES_VERSION
    timestamp: datetime = field(default_factory=_utcnow)

    def to_kinesis_payload(self) -> dict:
        """Payload for the Kinesis put_record Data field."""
        return {
            "event_id": self.event_id,
            "event_type": self.event_type,
            "timestamp": self.timestamp.isoformat(),
            "source": "helene-safety-service",
            "data": {
                "alert_id": self.alert_id,
                "severity": self.severity,
                "priority_rank": self.priority_rank,
                "days_matched": self.days_matched,
                "user_id_hash": self.user_id_hash,
                "rules_version": self.rules_version,
            }
        }


class RedFlagEventPublisher:
    """Publishes critical red-flag alerts to Kinesis.

    Failure Handling:
        - Publishing never raises; alerts are already returned to the caller
        - Failures are logged at CRITICAL level with the payload attached
    """

    def __init__(
        self,
        stream_name: str = "helene-red-flag-events",
        enabled: bool = True,
        region: Optional[str] = None,
    ):
        """Initialize publisher.

        Args:
            stream_name: Kinesis stream name
            enabled: Whether publishing is enabled (disable for local dev)
            region: AWS region (defaults to AWS_REGION env var)
        """
        self.stream_name = stream_name
        self.enabled = enabled
        self.region = region or os.getenv("AWS_REGION", "eu-west-3")
        self._kinesis_client = None

        logger.info(
            "RED_FLAG_PUBLISHER_INITIALIZED",
            extra={
                "stream_name": stream_name,
                "enabled": enabled,
                "region": self.region,
            }
        )

    @classmethod
    def from_env(cls) -> "RedFlagEventPublisher":
        """Publisher configured from RED_FLAG_STREAM_NAME / RED_FLAG_PUBLISH_ENABLED."""
        return cls(
            stream_name=os.getenv("RED_FLAG_STREAM_NAME", "helene-red-flag-events"),
            enabled=os.getenv("RED_FLAG_PUBLISH_ENABLED", "false").lower() == "true",
        )

    @property
    def kinesis_client(self):
        """Lazy initialization of Kinesis client."""
        if self._kinesis_client is None and self.enabled:
            try:
                import boto3
                self._kinesis_client = boto3.client(
                    "kinesis",
                    region_name=self.region,
                )
            except Exception as e:
                logger.error(
                    "KINESIS_CLIENT_INIT_FAILED",
                    extra={"error": str(e)}
                )
        return self._kinesis_client

    def publish_alert(self, alert: RedFlagAlert, user_id_hash: str) -> bool:
        """Publish one alert.

        Args:
            alert: Alert to forward
            user_id_hash: Hashed user identifier, also the partition key

        Returns:
            True if published successfully, False otherwise
        """
        if not self.enabled:
            logger.info(
                "RED_FLAG_PUBLISH_SKIPPED",
                extra={"alert_id": alert.id, "reason": "publishing_disabled"}
            )
            return False

        event = RedFlagEvent(
            event_id=f"evt_{uuid.uuid4().hex[:12]}",
            alert_id=alert.id,
            severity=alert.severity,
            priority_rank=alert.priority_rank,
            days_matched=alert.days_matched,
            user_id_hash=user_id_hash,
        )
        payload = event.to_kinesis_payload()

        try:
            if self.kinesis_client is None:
                logger.critical(
                    "RED_FLAG_EVENT_FALLBACK_LOG",
                    extra={
                        "event_id": event.event_id,
                        "payload": json.dumps(payload),
                        "reason": "kinesis_client_unavailable",
                        "action": "MANUAL_PROCESSING_REQUIRED",
                    }
                )
                return False

            # Same user -> same shard, keeps a user's events ordered
            response = self.kinesis_client.put_record(
                StreamName=self.stream_name,
                Data=json.dumps(payload),
                PartitionKey=user_id_hash,
            )

            logger.info(
                "RED_FLAG_EVENT_PUBLISHED",
                extra={
                    "event_id": event.event_id,
                    "alert_id": alert.id,
                    "user_id_hash": user_id_hash,
                    "shard_id": response.get("ShardId"),
                    "sequence_number": response.get("SequenceNumber"),
                }
            )
            return True

        except Exception as e:
            logger.critical(
                "RED_FLAG_EVENT_PUBLISH_FAILED",
                extra={
                    "event_id": event.event_id,
                    "alert_id": alert.id,
                    "user_id_hash": user_id_hash,
                    "error": str(e),
                    "error_type": type(e).__name__,
                    "action": "MANUAL_REVIEW_REQUIRED",
                    "payload": json.dumps(payload),
                }
            )
            return False

    def publish_critical(self, alerts: Iterable[RedFlagAlert], user_id_hash: str) -> int:
        """Publish every critical alert of a detection result.

        Returns:
            Number of successfully published events
        """
        return sum(
            1 for alert in alerts
            if alert.is_critical and self.publish_alert(alert, user_id_hash)
        )
