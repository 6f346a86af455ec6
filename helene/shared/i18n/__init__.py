"""Localization: locale resolution and per-locale template bundles."""
from .bundle import (
    AlertText,
    Locale,
    DEFAULT_LOCALE,
    TemplateBundle,
    get_bundle,
    register_bundle,
    resolve_locale,
)
# Importing the locale modules registers their bundles
from . import fr, en  # noqa: F401

__all__ = [
    "AlertText",
    "Locale",
    "DEFAULT_LOCALE",
    "TemplateBundle",
    "get_bundle",
    "register_bundle",
    "resolve_locale",
]
