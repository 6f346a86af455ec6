"""Tests for DailyLogEntry and SymptomCatalog."""
from datetime import date, datetime

import pytest

from helene.shared.models import (
    DailyLogEntry,
    QoLDomain,
    SentimentSnapshot,
    SymptomCatalog,
    entries_from_dicts,
    most_recent_first,
)


class TestSymptomCatalog:
    """Closed registry lookups."""

    def test_every_symptom_has_one_domain(self):
        domains = {spec.symptom.value: spec.domain for spec in SymptomCatalog.SYMPTOMS}

        assert domains["hot_flashes"] == QoLDomain.VASOMOTOR
        assert domains["anxiety"] == QoLDomain.PSYCHOSOCIAL
        assert domains["joint_pain"] == QoLDomain.PHYSICAL
        assert domains["low_libido"] == QoLDomain.SEXUAL

    def test_signals_map_to_domains(self):
        assert SymptomCatalog.domain_of("mood") == QoLDomain.PSYCHOSOCIAL
        assert SymptomCatalog.domain_of("sleep_quality") == QoLDomain.PHYSICAL

    def test_scales(self):
        assert SymptomCatalog.symptom("headaches").max_intensity == 5
        assert SymptomCatalog.symptom("brain_fog").max_intensity == 3
        assert SymptomCatalog.symptom("vaginal_dryness").max_intensity == 3

    def test_unregistered_lookups_raise(self):
        with pytest.raises(KeyError):
            SymptomCatalog.symptom("dizziness")
        with pytest.raises(KeyError):
            SymptomCatalog.domain_of("dizziness")
        with pytest.raises(KeyError):
            SymptomCatalog.items_for("sexual")

    def test_items_for_sexual(self):
        assert SymptomCatalog.items_for(QoLDomain.SEXUAL) == ("low_libido", "vaginal_dryness")


class TestDailyLogEntryClamping:
    """Out-of-range values are clamped, never raised."""

    def test_signals_clamped(self):
        entry = DailyLogEntry(log_date=date(2026, 3, 1), mood=0, energy_level=9, sleep_quality=11)

        assert entry.mood == 1
        assert entry.energy_level == 5
        assert entry.sleep_quality == 10

    def test_symptoms_clamped_to_category_scale(self):
        entry = DailyLogEntry(
            log_date=date(2026, 3, 1),
            symptoms={"hot_flashes": 7, "anxiety": 5, "fatigue": -2},
        )

        assert entry.intensity("hot_flashes") == 5
        assert entry.intensity("anxiety") == 3
        assert entry.intensity("fatigue") == 0

    def test_fractional_values_round_half_up(self):
        entry = DailyLogEntry(log_date=date(2026, 3, 1), mood=2.5, symptoms={"headaches": "3.5"})

        assert entry.mood == 3
        assert entry.intensity("headaches") == 4

    def test_huge_and_infinite_values_clamped(self):
        entry = DailyLogEntry(
            log_date=date(2026, 3, 1),
            mood=1e300,
            energy_level=float("-inf"),
            sleep_quality="inf",
            symptoms={"hot_flashes": float("inf"), "anxiety": "-inf", "fatigue": 1e300},
        )

        assert entry.mood == 5
        assert entry.energy_level == 1
        assert entry.sleep_quality == 10
        assert entry.intensity("hot_flashes") == 5
        assert entry.intensity("anxiety") == 0
        assert entry.intensity("fatigue") == 5

    def test_infinite_row_values_clamped(self):
        entry = DailyLogEntry.from_dict({
            "log_date": "2026-01-01",
            "sleep_quality": "inf",
            "mood": "-inf",
            "night_sweats": "1e400",
        })

        assert entry.sleep_quality == 10
        assert entry.mood == 1
        assert entry.intensity("night_sweats") == 5

    def test_garbage_becomes_absent(self):
        entry = DailyLogEntry(log_date=date(2026, 3, 1), mood="great", symptoms={"fatigue": None})

        assert entry.mood is None
        assert entry.intensity("fatigue") == 0

    def test_unknown_symptoms_dropped(self):
        entry = DailyLogEntry(log_date=date(2026, 3, 1), symptoms={"dizziness": 3})

        assert entry.symptoms == {}

    def test_intensity_of_unregistered_symptom_raises(self):
        with pytest.raises(KeyError):
            DailyLogEntry(log_date=date(2026, 3, 1)).intensity("dizziness")

    def test_has_note(self):
        assert DailyLogEntry(log_date=date(2026, 3, 1), note=" x ").has_note
        assert not DailyLogEntry(log_date=date(2026, 3, 1), note="   ").has_note


class TestFromDict:
    """Log-store row parsing."""

    def test_flat_row(self):
        entry = DailyLogEntry.from_dict({
            "log_date": "2026-03-01",
            "mood": 3,
            "hot_flashes": 2,
            "notes": "Journée calme",
            "notes_sentiment": "positive",
            "notes_sentiment_score": 0.5,
            "notes_sentiment_emoji": "🙂",
            "notes_sentiment_confidence": 0.2,
        })

        assert entry.log_date == date(2026, 3, 1)
        assert entry.intensity("hot_flashes") == 2
        assert entry.note == "Journée calme"
        assert entry.sentiment == SentimentSnapshot(label="positive", score=0.5, emoji="🙂", confidence=0.2)

    def test_nested_row(self):
        entry = DailyLogEntry.from_dict({
            "date": "2026-03-01T08:30:00Z",
            "symptoms": {"night_sweats": 4},
            "note": "ok",
            "sentiment": {"label": "neutral", "score": 0.0, "emoji": "😐", "confidence": 0.0},
        })

        assert entry.log_date == date(2026, 3, 1)
        assert entry.intensity("night_sweats") == 4
        assert entry.sentiment.label == "neutral"

    def test_datetime_value(self):
        entry = DailyLogEntry.from_dict({"log_date": datetime(2026, 3, 1, 22, 0)})

        assert entry.log_date == date(2026, 3, 1)

    def test_unknown_sentiment_label_ignored(self):
        entry = DailyLogEntry.from_dict({"log_date": "2026-03-01", "notes_sentiment": "happy"})

        assert entry.sentiment is None

    @pytest.mark.parametrize("value", [None, "", "not a date", 20260301])
    def test_invalid_date_raises(self, value):
        with pytest.raises(ValueError):
            DailyLogEntry.from_dict({"log_date": value})

    def test_round_trip_shape(self):
        row = {"log_date": "2026-03-01", "mood": 4, "symptoms": {"fatigue": 2}, "note": "ok"}

        assert DailyLogEntry.from_dict(DailyLogEntry.from_dict(row).to_dict()) == DailyLogEntry.from_dict(row)


class TestMostRecentFirst:
    """Ordering and per-day uniqueness."""

    def test_sorted_newest_first(self):
        entries = entries_from_dicts([
            {"log_date": "2026-03-01"},
            {"log_date": "2026-03-03"},
            {"log_date": "2026-03-02"},
        ])

        assert [e.log_date.day for e in most_recent_first(entries)] == [3, 2, 1]

    def test_last_supplied_entry_wins(self):
        entries = entries_from_dicts([
            {"log_date": "2026-03-01", "mood": 1},
            {"log_date": "2026-03-01", "mood": 5},
        ])

        ordered = most_recent_first(entries)

        assert len(ordered) == 1
        assert ordered[0].mood == 5


class TestSentimentSnapshot:
    """Snapshot validation."""

    def test_invalid_label(self):
        with pytest.raises(ValueError):
            SentimentSnapshot(label="happy", score=0.0, emoji="", confidence=0.0)

    def test_score_out_of_range(self):
        with pytest.raises(ValueError):
            SentimentSnapshot(label="positive", score=1.2, emoji="", confidence=0.0)
