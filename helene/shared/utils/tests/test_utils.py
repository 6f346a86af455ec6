"""Tests for shared numeric and PII helpers."""
import pytest

from helene.shared.utils import (
    clamp,
    coerce_number,
    configure_pii_salt,
    configure_pii_salt_from_env,
    hash_pii,
    hash_text_for_audit,
    mean,
    round_half_up,
    round_to_int,
)
from helene.shared.utils import pii


class TestRounding:
    """Half-up rounding, never banker's rounding."""

    @pytest.mark.parametrize("value,ndigits,expected", [
        (2.5, 0, 3.0),
        (3.5, 0, 4.0),
        (2.45, 1, 2.5),
        (2.75, 1, 2.8),
        (0.125, 2, 0.13),
        (-0.125, 2, -0.13),
        (1.0, 1, 1.0),
    ])
    def test_round_half_up(self, value, ndigits, expected):
        assert round_half_up(value, ndigits) == expected

    def test_round_to_int(self):
        assert round_to_int(0.5) == 1
        assert round_to_int(6.4) == 6
        assert isinstance(round_to_int(2.5), int)


class TestNumericHelpers:
    """clamp, mean and coerce_number."""

    def test_clamp(self):
        assert clamp(9, 0, 5) == 5
        assert clamp(-1, 0, 5) == 0
        assert clamp(3, 0, 5) == 3

    def test_clamp_then_round_handles_infinity(self):
        assert round_to_int(clamp(float("inf"), 0, 5)) == 5
        assert round_to_int(clamp(float("-inf"), 1, 10)) == 1
        assert round_to_int(clamp(1e300, 0, 3)) == 3

    def test_mean_of_empty_is_zero(self):
        assert mean([]) == 0.0

    def test_mean_accepts_generators(self):
        assert mean(x for x in (1, 2, 3)) == 2.0

    @pytest.mark.parametrize("value,expected", [
        (3, 3.0),
        ("4", 4.0),
        ("2.5", 2.5),
        (None, None),
        (True, None),
        ("abc", None),
        ([], None),
        (float("nan"), None),
        ("inf", float("inf")),
    ])
    def test_coerce_number(self, value, expected):
        assert coerce_number(value) == expected


class TestPiiHashing:
    """Salted identifier hashing."""

    def test_short_salt_rejected(self):
        with pytest.raises(ValueError):
            configure_pii_salt("too_short")

    def test_hash_requires_salt(self, monkeypatch):
        monkeypatch.setattr(pii, "_PII_SALT", None)

        with pytest.raises(RuntimeError):
            hash_pii("user-123")

    def test_hash_is_stable_and_salted(self):
        configure_pii_salt("test_salt_that_is_at_least_32_characters_long")
        first = hash_pii("user-123")

        assert first == hash_pii("user-123")
        assert len(first) == 64
        assert first != hash_text_for_audit("user-123")

        configure_pii_salt("another_salt_that_is_at_least_32_characters")
        assert hash_pii("user-123") != first

    def test_salt_from_environment(self, monkeypatch):
        monkeypatch.setattr(pii, "_PII_SALT", None)
        monkeypatch.setenv("PII_HASH_SALT", "env_salt_that_is_at_least_32_characters_long")
        configure_pii_salt_from_env()

        assert pii._PII_SALT == "env_salt_that_is_at_least_32_characters_long"

    def test_salt_falls_back_to_dev_default(self, monkeypatch):
        monkeypatch.setattr(pii, "_PII_SALT", None)
        monkeypatch.delenv("PII_HASH_SALT", raising=False)
        configure_pii_salt_from_env()

        assert pii._PII_SALT == pii.DEV_PII_SALT
        assert len(hash_pii("user-123")) == 64

    def test_no_salt_and_no_default_rejected(self, monkeypatch):
        monkeypatch.delenv("PII_HASH_SALT", raising=False)

        with pytest.raises(ValueError):
            configure_pii_salt_from_env(default=None)
