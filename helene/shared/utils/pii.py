"""Salted hashing of user identifiers and note fingerprints.

A user id is never written to a log line or a red-flag event as is: the
services only ever see hash_pii(user_id). Journal notes are health data and
are fingerprinted with hash_text_for_audit when a log needs to refer to one.
"""
import hashlib
import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

PII_SALT_ENV = "PII_HASH_SALT"
MIN_SALT_LENGTH = 32

# Local development only; deployments set PII_HASH_SALT
DEV_PII_SALT = "helene_dev_salt_not_for_production_use"

_PII_SALT: Optional[str] = None


def configure_pii_salt(salt: str) -> None:
    """Install the salt used by hash_pii().

    Raises:
        ValueError: If salt is shorter than MIN_SALT_LENGTH
    """
    global _PII_SALT
    if not salt or len(salt) < MIN_SALT_LENGTH:
        logger.critical(
            "PII_SALT_REJECTED",
            extra={"salt_length": len(salt or ""), "min_length": MIN_SALT_LENGTH}
        )
        raise ValueError(f"PII salt must be at least {MIN_SALT_LENGTH} characters")

    _PII_SALT = salt
    logger.info("PII_SALT_CONFIGURED", extra={"salt_length": len(salt)})


def configure_pii_salt_from_env(default: Optional[str] = DEV_PII_SALT) -> None:
    """Install the salt from PII_HASH_SALT, falling back to default.

    Called when a service module is imported so that hashing works under any
    WSGI server, not only when the module is run directly.
    """
    salt = os.getenv(PII_SALT_ENV) or default
    if salt == DEV_PII_SALT:
        logger.warning("PII_SALT_DEV_DEFAULT", extra={"env_var": PII_SALT_ENV})
    configure_pii_salt(salt)


def hash_pii(user_id: str) -> str:
    """64-character SHA-256 hex digest of salt + user_id.

    Raises:
        RuntimeError: If no salt has been configured
    """
    if _PII_SALT is None:
        logger.critical("PII_HASH_WITHOUT_SALT", extra={"env_var": PII_SALT_ENV})
        raise RuntimeError(f"PII salt not configured; set {PII_SALT_ENV}")

    return hashlib.sha256(f"{_PII_SALT}{user_id}".encode("utf-8")).hexdigest()


def hash_text_for_audit(text: str) -> str:
    """Fingerprint a note so logs can refer to it without its content."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()
