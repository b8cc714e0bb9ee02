"""Unit tests for password hashing and access tokens."""

from datetime import timedelta

import pytest

from jobmatch.core.security import create_access_token, decode_token, hash_password, verify_password


@pytest.mark.unit
def test_password_round_trip():
    """Test hashing and verification."""
    hashed = hash_password("secret123")
    assert hashed != "secret123"
    assert verify_password("secret123", hashed)
    assert not verify_password("wrong", hashed)


@pytest.mark.unit
def test_tokens_carry_unique_jti():
    """Test that every token can be revoked on its own."""
    first = decode_token(create_access_token("user-1"))
    second = decode_token(create_access_token("user-1"))

    assert first["sub"] == "user-1"
    assert first["jti"] and second["jti"]
    assert first["jti"] != second["jti"]


@pytest.mark.unit
def test_expired_token_is_rejected():
    """Test that expired tokens decode to None."""
    token = create_access_token("user-1", expires_delta=timedelta(seconds=-1))
    assert decode_token(token) is None


@pytest.mark.unit
def test_garbage_token_is_rejected():
    assert decode_token("not-a-jwt") is None
