"""Shared-password authentication for the single household account."""

import logging
from functools import lru_cache

import bcrypt

from app.core.config import settings

logger = logging.getLogger(__name__)


def get_password_hash(password: str) -> str:
    """Hash a password with bcrypt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain password against a bcrypt hash."""
    return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))


@lru_cache
def get_app_password_hash() -> str:
    """Hash of the configured app password, computed once per process."""
    if settings.APP_PASSWORD_HASH:
        return settings.APP_PASSWORD_HASH
    return get_password_hash(settings.APP_PASSWORD)


def authenticate(password: str) -> bool:
    """Return True if ``password`` matches the configured app password."""
    if verify_password(password, get_app_password_hash()):
        return True
    logger.warning("Rejected login attempt with wrong password")
    return False
