"""Tests for SentimentClassifier.

The classifier output is persisted with every entry, so these tests pin
the exact scoring arithmetic, not just the label.
"""
import pytest

from helene.services.sentiment_service.classifier import (
    SentimentClassifier,
    SentimentResult,
    analyze_sentiment,
)
from helene.services.sentiment_service.config import SentimentConfig
from helene.shared.models import SentimentSnapshot


@pytest.fixture
def classifier():
    """French classifier (product default)."""
    return SentimentClassifier(locale="fr")


@pytest.fixture
def en_classifier():
    return SentimentClassifier(locale="en")


class TestBlankInput:
    """Blank notes are neutral with zero confidence."""

    @pytest.mark.parametrize("text", ["", "   ", "\n\t", None])
    def test_blank_is_neutral(self, classifier, text):
        result = classifier.analyze(text)

        assert result.sentiment == "neutral"
        assert result.score == 0.0
        assert result.confidence == 0.0
        assert result.positive_keywords == ()
        assert result.negative_keywords == ()
        assert result.emoji == "😐"

    def test_no_keyword_match_is_neutral(self, classifier):
        result = classifier.analyze("Rendez-vous chez le dentiste")

        assert result.sentiment == "neutral"
        assert result.score == 0.0
        assert result.confidence == 0.0


class TestPositiveNotes:
    """Notes dominated by positive keywords."""

    def test_happy_note_is_positive(self, classifier):
        result = classifier.analyze("Je me sens bien et heureuse aujourd'hui")

        assert result.sentiment == "positive"
        assert result.score > 0.2
        assert result.score == 1.0
        assert result.emoji == "😊"
        assert result.positive_keywords == ("bien", "heureuse")
        assert result.confidence == 0.4

    def test_mild_positive_uses_mild_emoji(self, classifier):
        # "malgré" contains "mal": substring matching is intentional
        result = classifier.analyze("Content et calme malgré un souci")

        assert result.sentiment == "positive"
        assert result.score == 0.33
        assert result.emoji == "🙂"
        assert result.negative_keywords == ("mal",)

    def test_english_lexicon(self, en_classifier):
        result = en_classifier.analyze("I feel good and calm today")

        assert result.sentiment == "positive"
        assert result.positive_keywords == ("good", "calm")


class TestNegativeNotes:
    """Notes dominated by negative keywords."""

    def test_health_phrases_weigh_more(self, classifier):
        result = classifier.analyze("Nuit avec des bouffées et des sueurs")

        assert result.sentiment == "negative"
        assert result.score == -1.0
        assert result.emoji == "😢"
        assert result.keyword_weight == 3.0
        assert result.confidence == 0.6

    def test_mild_negative_uses_mild_emoji(self, en_classifier):
        result = en_classifier.analyze("Tired and worried, but a good walk")

        assert result.sentiment == "negative"
        assert result.score == -0.33
        assert result.emoji == "😕"


class TestScoring:
    """Arithmetic of scores, weights and keyword lists."""

    def test_balanced_note_is_neutral(self, classifier):
        result = classifier.analyze("Journée difficile mais je vais mieux")

        assert result.sentiment == "neutral"
        assert result.score == 0.0
        assert result.confidence == 0.4

    def test_generic_and_health_matches_accumulate(self, classifier):
        # "mieux" (1.0) and "mieux dormi" (1.5) both match
        result = classifier.analyze("J'ai mieux dormi")

        assert result.keyword_weight == 2.5
        assert result.confidence == 0.5
        assert result.positive_keywords == ("mieux", "mieux dormi")

    def test_keywords_capped_at_three(self, classifier):
        result = classifier.analyze("bien mieux heureux joie content")

        assert result.positive_keywords == ("bien", "mieux", "heureux")
        assert result.confidence == 1.0

    def test_keywords_follow_lexicon_order_not_text_order(self, classifier):
        result = classifier.analyze("content joie bien")

        assert result.positive_keywords == ("bien", "joie", "content")

    def test_case_insensitive(self, classifier):
        assert classifier.analyze("BIEN").sentiment == "positive"

    def test_custom_thresholds(self):
        config = SentimentConfig(polarity_threshold=0.5)
        classifier = SentimentClassifier(locale="fr", config=config)

        result = classifier.analyze("Content et calme malgré un souci")

        assert result.sentiment == "neutral"


class TestDeterminism:
    """Same (text, locale) must always give the same result."""

    def test_repeated_analysis_is_identical(self, classifier):
        text = "Fatiguée mais contente, moins de symptômes"

        assert classifier.analyze(text) == classifier.analyze(text)

    def test_module_helper_matches_classifier(self, classifier):
        text = "Je me sens bien et heureuse aujourd'hui"

        assert analyze_sentiment(text, "fr-FR") == classifier.analyze(text)

    def test_locale_changes_lexicon(self):
        fr = analyze_sentiment("I feel good", "fr")
        en = analyze_sentiment("I feel good", "en")

        assert fr.sentiment == "neutral"
        assert en.sentiment == "positive"


class TestSentimentResult:
    """Tests for the SentimentResult dataclass."""

    def test_invalid_score_raises(self):
        with pytest.raises(ValueError):
            SentimentResult(sentiment="positive", score=1.5)

    def test_invalid_confidence_raises(self):
        with pytest.raises(ValueError):
            SentimentResult(sentiment="neutral", score=0.0, confidence=2.0)

    def test_to_dict_shape(self, classifier):
        data = classifier.analyze("Je me sens bien").to_dict()

        assert data["sentiment"] == "positive"
        assert data["keywords"] == {"positive": ["bien"], "negative": []}
        assert set(data) >= {"score", "confidence", "emoji"}

    def test_snapshot(self, classifier):
        snapshot = classifier.snapshot("Je me sens bien")

        assert isinstance(snapshot, SentimentSnapshot)
        assert snapshot.label == "positive"
        assert snapshot.score == 1.0
        assert snapshot.emoji == "😊"

    def test_snapshot_none_for_blank_note(self, classifier):
        assert classifier.snapshot("  ") is None
