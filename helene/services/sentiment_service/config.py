"""Sentiment classifier configuration and per-locale lexicons.

Lexicons are ordered tuples, not sets: the order is the scan order, which
decides which three keywords are reported per polarity.
"""
from dataclasses import dataclass
from typing import Dict, Tuple

from helene.shared.i18n import Locale


@dataclass(frozen=True)
class SentimentConfig:
    """Scoring constants for note classification."""

    # |score| above this is polar, otherwise neutral
    polarity_threshold: float = 0.2

    # |score| above this selects the strong emoji of the polarity
    strong_threshold: float = 0.6

    # Generic mood words vs. health phrases (stronger signal)
    generic_weight: float = 1.0
    health_weight: float = 1.5

    # Matched weight at which confidence saturates to 1.0
    confidence_saturation: float = 5.0

    # Keywords reported per polarity
    max_keywords: int = 3

    lexicon_version: str = "2026.10.01"


EMOJI_STRONG_POSITIVE = "😊"
EMOJI_MILD_POSITIVE = "🙂"
EMOJI_NEUTRAL = "😐"
EMOJI_MILD_NEGATIVE = "😕"
EMOJI_STRONG_NEGATIVE = "😢"


@dataclass(frozen=True)
class Lexicon:
    """Keyword lists for one locale, in scan order."""
    positive: Tuple[str, ...]
    negative: Tuple[str, ...]
    health_positive: Tuple[str, ...]
    health_negative: Tuple[str, ...]


FR_LEXICON = Lexicon(
    positive=(
        "bien", "mieux", "heureux", "heureuse", "joie", "content", "contente", "super", "génial",
        "formidable", "excellent", "parfait", "merveilleux", "agréable", "calme", "serein", "sereine",
        "paisible", "reposé", "reposée", "énergique", "motivé", "motivée", "optimiste", "positif",
        "positive", "espoir", "sourire", "rire", "gratitude", "reconnaissant", "reconnaissante",
        "satisfait", "satisfaite", "fier", "fière", "confiant", "confiante", "fort", "forte",
        "bien-être", "équilibré", "équilibrée", "stable", "meilleur", "meilleure", "progrès",
        "amélioration", "réussite", "succès", "victoire", "bonheur", "plaisir", "amour",
    ),
    negative=(
        "mal", "pire", "triste", "douleur", "souffrance", "difficile", "épuisé", "épuisée",
        "fatigué", "fatiguée", "stressé", "stressée", "anxieux", "anxieuse", "inquiet", "inquiète",
        "peur", "angoisse", "déprimé", "déprimée", "découragé", "découragée", "frustré", "frustrée",
        "irrité", "irritée", "énervé", "énervée", "colère", "rage", "désespoir", "perdu", "perdue",
        "seul", "seule", "isolé", "isolée", "vide", "nul", "nulle", "horrible", "terrible",
        "affreux", "mauvais", "mauvaise", "négatif", "négative", "problème", "difficulté",
        "échec", "défaite", "déçu", "déçue", "regret", "culpabilité", "honte", "pleurs",
        "larmes", "crise", "insomnie", "cauchemar", "panique", "nerveux", "nerveuse",
    ),
    health_positive=(
        "amélioration", "moins de symptômes", "mieux dormi", "plus d'énergie",
        "sans bouffées", "calme retrouvé", "meilleur sommeil",
    ),
    health_negative=(
        "bouffées", "sueurs", "insomnie", "fatigue intense", "douleurs", "migraines",
        "anxiété forte", "irritabilité", "brouillard mental", "humeur basse",
    ),
)

EN_LEXICON = Lexicon(
    positive=(
        "good", "better", "happy", "joy", "glad", "great", "wonderful", "excellent", "perfect",
        "pleasant", "calm", "serene", "peaceful", "rested", "energetic", "motivated", "optimistic",
        "positive", "hope", "smile", "laugh", "grateful", "thankful", "satisfied", "proud",
        "confident", "strong", "balanced", "stable", "best", "progress", "improvement",
        "success", "victory", "happiness", "pleasure", "love", "relaxed", "fantastic",
    ),
    negative=(
        "bad", "worse", "sad", "pain", "suffering", "difficult", "exhausted", "tired",
        "stressed", "anxious", "worried", "afraid", "fear", "anguish", "depressed",
        "discouraged", "frustrated", "irritated", "annoyed", "angry", "rage", "despair",
        "lost", "lonely", "alone", "isolated", "empty", "useless", "horrible", "terrible",
        "awful", "negative", "problem", "failure", "disappointed", "regret", "guilt", "shame",
        "crying", "tears", "crisis", "insomnia", "nightmare", "panic", "nervous",
    ),
    health_positive=(
        "improvement", "fewer symptoms", "slept better", "more energy",
        "no hot flashes", "calm again", "better sleep",
    ),
    health_negative=(
        "hot flash", "sweats", "insomnia", "intense fatigue", "aches", "migraines",
        "severe anxiety", "irritability", "brain fog", "low mood",
    ),
)

LEXICONS: Dict[Locale, Lexicon] = {
    Locale.FR: FR_LEXICON,
    Locale.EN: EN_LEXICON,
}
