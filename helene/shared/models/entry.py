"""Daily log entry domain model.

A DailyLogEntry is the immutable snapshot of one user's check-in for one
calendar day, as supplied by the log store. Every numeric field is clamped
to its declared scale on construction; None means "not recorded".
"""
import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional

from helene.shared.utils import clamp, coerce_number, round_to_int
from .symptoms import SymptomCatalog

logger = logging.getLogger(__name__)


SENTIMENT_LABELS = ("positive", "negative", "neutral")


@dataclass(frozen=True)
class SentimentSnapshot:
    """Sentiment of an entry's note, frozen at the time the note was saved."""
    label: str
    score: float
    emoji: str
    confidence: float

    def __post_init__(self):
        if self.label not in SENTIMENT_LABELS:
            raise ValueError(f"Unknown sentiment label: {self.label}")
        if not -1.0 <= self.score <= 1.0:
            raise ValueError(f"Sentiment score must be -1.0-1.0, got {self.score}")
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence must be 0.0-1.0, got {self.confidence}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "score": self.score,
            "emoji": self.emoji,
            "confidence": self.confidence,
        }


def _clamp_signal(signal_id: str, value: Any) -> Optional[int]:
    number = coerce_number(value)
    if number is None:
        return None
    spec = SymptomCatalog.signal(signal_id)
    return round_to_int(clamp(number, spec.min_value, spec.max_value))


def _clamp_symptoms(raw: Mapping[str, Any]) -> Dict[str, int]:
    symptoms: Dict[str, int] = {}
    for symptom_id, value in raw.items():
        if not SymptomCatalog.is_registered(symptom_id):
            logger.warning(
                "UNKNOWN_SYMPTOM_DROPPED",
                extra={"symptom_id": symptom_id}
            )
            continue
        number = coerce_number(value)
        if number is None:
            continue
        spec = SymptomCatalog.symptom(symptom_id)
        symptoms[symptom_id] = round_to_int(clamp(number, 0, spec.max_intensity))
    return symptoms


@dataclass(frozen=True)
class DailyLogEntry:
    """One day of self-reported health data.

    Scales: mood 1-5, energy_level 1-5, sleep_quality 1-10, symptom
    intensities 0-5 (physical) or 0-3 (psychological, intimate).
    """
    log_date: date
    mood: Optional[int] = None
    energy_level: Optional[int] = None
    sleep_quality: Optional[int] = None
    symptoms: Dict[str, int] = field(default_factory=dict)
    note: Optional[str] = None
    sentiment: Optional[SentimentSnapshot] = None

    def __post_init__(self):
        # Frozen: normalise through object.__setattr__
        object.__setattr__(self, "mood", _clamp_signal("mood", self.mood))
        object.__setattr__(self, "energy_level", _clamp_signal("energy_level", self.energy_level))
        object.__setattr__(self, "sleep_quality", _clamp_signal("sleep_quality", self.sleep_quality))
        object.__setattr__(self, "symptoms", _clamp_symptoms(self.symptoms or {}))

    def intensity(self, symptom_id: str) -> int:
        """Recorded intensity of a symptom, 0 when not recorded.

        Raises:
            KeyError: If symptom_id is not in the catalog
        """
        SymptomCatalog.symptom(symptom_id)
        return self.symptoms.get(symptom_id, 0)

    def signal(self, signal_id: str) -> Optional[int]:
        """Value of mood / sleep_quality / energy_level, None if absent."""
        SymptomCatalog.signal(signal_id)
        return getattr(self, signal_id)

    @property
    def has_note(self) -> bool:
        return bool(self.note and self.note.strip())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DailyLogEntry":
        """Build an entry from a log-store row.

        Accepts symptoms either as a nested "symptoms" mapping or as flat
        columns (hot_flashes, night_sweats, ...), the note as "note" or
        "notes", and a stored sentiment either nested under "sentiment" or
        as the flat notes_sentiment* columns.

        Raises:
            ValueError: If log_date is missing or not an ISO date
        """
        log_date = _parse_date(data.get("log_date") or data.get("date"))

        symptoms: Dict[str, Any] = dict(data.get("symptoms") or {})
        for symptom_id in SymptomCatalog.symptom_ids():
            if symptom_id in data and symptom_id not in symptoms:
                symptoms[symptom_id] = data[symptom_id]

        note = data.get("note")
        if note is None:
            note = data.get("notes")

        return cls(
            log_date=log_date,
            mood=data.get("mood"),
            energy_level=data.get("energy_level"),
            sleep_quality=data.get("sleep_quality"),
            symptoms=symptoms,
            note=note if isinstance(note, str) else None,
            sentiment=_parse_sentiment(data),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "log_date": self.log_date.isoformat(),
            "mood": self.mood,
            "energy_level": self.energy_level,
            "sleep_quality": self.sleep_quality,
            "symptoms": dict(self.symptoms),
            "note": self.note,
            "sentiment": self.sentiment.to_dict() if self.sentiment else None,
        }


def _parse_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value:
        try:
            return date.fromisoformat(value[:10])
        except ValueError:
            pass
    raise ValueError(f"log_date must be an ISO date, got {value!r}")


def _parse_sentiment(data: Mapping[str, Any]) -> Optional[SentimentSnapshot]:
    nested = data.get("sentiment")
    if isinstance(nested, Mapping):
        label = nested.get("label") or nested.get("sentiment")
        score = nested.get("score")
        emoji = nested.get("emoji", "")
        confidence = nested.get("confidence")
    else:
        label = data.get("notes_sentiment")
        score = data.get("notes_sentiment_score")
        emoji = data.get("notes_sentiment_emoji", "")
        confidence = data.get("notes_sentiment_confidence")

    if label not in SENTIMENT_LABELS:
        return None
    score = coerce_number(score)
    confidence = coerce_number(confidence)
    return SentimentSnapshot(
        label=label,
        score=clamp(score, -1.0, 1.0) if score is not None else 0.0,
        emoji=emoji or "",
        confidence=clamp(confidence, 0.0, 1.0) if confidence is not None else 0.0,
    )


def entries_from_dicts(rows: Iterable[Mapping[str, Any]]) -> List[DailyLogEntry]:
    """Parse a batch of log-store rows, preserving their order."""
    return [DailyLogEntry.from_dict(row) for row in rows]


def most_recent_first(entries: Iterable[DailyLogEntry]) -> List[DailyLogEntry]:
    """Order entries newest first with one entry per calendar day.

    When a window contains two entries for the same date the one supplied
    last wins and a warning is logged.
    """
    by_date: Dict[date, DailyLogEntry] = {}
    for entry in entries:
        if entry.log_date in by_date:
            logger.warning(
                "DUPLICATE_DAY_ENTRY",
                extra={"log_date": entry.log_date.isoformat()}
            )
        by_date[entry.log_date] = entry
    return sorted(by_date.values(), key=lambda e: e.log_date, reverse=True)
