"""Tests for password hashing and the shared-password check."""

import pytest

from app.core.config import settings
from app.services.auth import (
    authenticate,
    get_app_password_hash,
    get_password_hash,
    verify_password,
)


@pytest.fixture
def fresh_password_hash():
    """Reset the cached app password hash around a test."""
    get_app_password_hash.cache_clear()
    yield
    get_app_password_hash.cache_clear()


# =============================================================================
# Unit Tests: Password Hashing
# =============================================================================


class TestPasswordHashing:
    """Tests for password hashing functions."""

    def test_get_password_hash_returns_bcrypt_format(self):
        """Test that hash is in bcrypt format."""
        hashed = get_password_hash("password123")
        # bcrypt hashes start with $2b$ or $2a$
        assert hashed.startswith("$2")

    def test_get_password_hash_different_for_same_input(self):
        """Test that same password produces different hashes (due to salt)."""
        assert get_password_hash("password123") != get_password_hash("password123")

    def test_verify_password_correct(self):
        """Test verify_password returns True for correct password."""
        hashed = get_password_hash("wasser")
        assert verify_password("wasser", hashed) is True

    def test_verify_password_incorrect(self):
        """Test verify_password returns False for wrong password."""
        hashed = get_password_hash("correctpassword")
        assert verify_password("wrongpassword", hashed) is False

    def test_verify_password_empty_password(self):
        """Test verify_password with empty password."""
        hashed = get_password_hash("somepassword")
        assert verify_password("", hashed) is False


# =============================================================================
# Unit Tests: App Password
# =============================================================================


class TestAuthenticate:
    """Tests for checking the configured app password."""

    def test_plain_setting(self, monkeypatch, fresh_password_hash):
        """Test the plain APP_PASSWORD is accepted."""
        monkeypatch.setattr(settings, "APP_PASSWORD", "zaehlerstand")
        monkeypatch.setattr(settings, "APP_PASSWORD_HASH", None)

        assert authenticate("zaehlerstand") is True
        assert authenticate("Zaehlerstand") is False

    def test_hash_setting_overrides_plain(self, monkeypatch, fresh_password_hash):
        """Test APP_PASSWORD_HASH takes precedence over APP_PASSWORD."""
        monkeypatch.setattr(settings, "APP_PASSWORD", "plain")
        monkeypatch.setattr(settings, "APP_PASSWORD_HASH", get_password_hash("hashed"))

        assert authenticate("hashed") is True
        assert authenticate("plain") is False

    def test_hash_computed_once(self, monkeypatch, fresh_password_hash):
        """Test the configured password is hashed only once."""
        monkeypatch.setattr(settings, "APP_PASSWORD_HASH", None)

        assert get_app_password_hash() is get_app_password_hash()
