"""Shared utilities for the Helene analytics services."""
from .pii import hash_pii, hash_text_for_audit, configure_pii_salt, configure_pii_salt_from_env
from .numeric import round_half_up, round_to_int, clamp, mean, coerce_number

__all__ = [
    "hash_pii",
    "hash_text_for_audit",
    "configure_pii_salt",
    "configure_pii_salt_from_env",
    "round_half_up",
    "round_to_int",
    "clamp",
    "mean",
    "coerce_number",
]
