"""
Tests for password hashing and bearer token verification.
"""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from app.config import DEFAULT_JWT_SECRET, Settings
from app.exceptions import InvalidTokenError, UnauthenticatedError
from core.security import PasswordHasher, TokenService


@pytest.fixture
def tokens():
    return TokenService(secret_key="unit-test-secret", algorithm="HS256", expire_hours=8784)


def test_password_hash_roundtrip():
    """Verifies: a hash verifies against its password and never equals it"""
    hasher = PasswordHasher(rounds=4)
    hashed = hasher.hash("secret123")

    assert hashed != "secret123"
    assert hasher.verify("secret123", hashed)
    assert not hasher.verify("wrong-password", hashed)


def test_password_verify_rejects_garbage():
    hasher = PasswordHasher(rounds=4)
    assert not hasher.verify("secret123", "not-a-bcrypt-hash")
    assert not hasher.verify("", "anything")
    assert not hasher.verify("secret123", None)


def test_token_roundtrip_returns_subject(tokens):
    token = tokens.create_access_token("650c1f1e8f1b2c3d4e5f6a7b")
    assert tokens.verify_bearer(f"Bearer {token}") == "650c1f1e8f1b2c3d4e5f6a7b"


def test_token_default_lifetime_is_8784_hours(tokens):
    payload = tokens.decode_token(tokens.create_access_token("abc"))
    assert payload["exp"] - payload["iat"] == 8784 * 3600


def test_missing_header_is_unauthenticated(tokens):
    with pytest.raises(UnauthenticatedError) as exc_info:
        tokens.verify_bearer(None)
    assert exc_info.value.http_status == 403
    assert exc_info.value.message == "Access denied, no token provided"


@pytest.mark.parametrize("header", ["Token abc", "Bearer", "Bearer    ", "abc.def.ghi"])
def test_malformed_header_is_invalid_token(tokens, header):
    with pytest.raises(InvalidTokenError):
        tokens.verify_bearer(header)


def test_expired_token_rejected(tokens):
    token = tokens.create_access_token("abc", expires_delta=timedelta(seconds=-5))
    with pytest.raises(InvalidTokenError) as exc_info:
        tokens.verify_bearer(f"Bearer {token}")
    assert exc_info.value.http_status == 400
    assert exc_info.value.message == "Invalid or expired token"


def test_token_signed_with_other_secret_rejected(tokens):
    foreign = TokenService(secret_key="someone-else").create_access_token("abc")
    with pytest.raises(InvalidTokenError):
        tokens.verify_bearer(f"Bearer {foreign}")


def test_empty_secret_not_allowed():
    with pytest.raises(ValueError):
        TokenService(secret_key="")


def test_production_refuses_placeholder_secret():
    with pytest.raises(ValidationError) as exc_info:
        Settings(environment="production", jwt_secret_key=DEFAULT_JWT_SECRET)
    assert "JWT_SECRET_KEY must be set in production" in str(exc_info.value)


def test_placeholder_secret_allowed_outside_production():
    assert Settings(environment="development", jwt_secret_key=DEFAULT_JWT_SECRET).jwt_secret_key == DEFAULT_JWT_SECRET
    assert Settings(environment="production", jwt_secret_key="a-real-secret").is_production()
