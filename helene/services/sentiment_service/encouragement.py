"""Companion messages chosen from canned, localized templates.

Selection among equivalent messages takes an injected random source so that
callers (and tests) can seed it; nothing here touches the global random
module state.
"""
import random
from typing import Optional

from helene.shared.i18n import get_bundle
from .classifier import SentimentResult


def encouragement_message(
    result: SentimentResult,
    rng: random.Random,
    locale: Optional[str] = None,
) -> str:
    """Encouragement shown after a note is saved.

    Args:
        result: Classification of the saved note
        rng: Random source used to pick among equivalent messages
        locale: Locale tag for the wording

    Returns:
        One message for positive / negative notes, a fixed thank-you for
        neutral ones
    """
    bundle = get_bundle(locale)
    if result.sentiment == "positive":
        return rng.choice(bundle.encouragement_positive)
    if result.sentiment == "negative":
        return rng.choice(bundle.encouragement_negative)
    return bundle.encouragement_neutral


def empathetic_fallback(rng: random.Random, locale: Optional[str] = None) -> str:
    """Generic empathetic reply used when no contextual reply applies."""
    return rng.choice(get_bundle(locale).empathetic_fallbacks)
