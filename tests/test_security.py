# tests/test_security.py
"""Tests for bearer token helpers."""

import pytest
from jose import JWTError, jwt

from thread_stage.core.auth import PERMISSION_BAN_POST
from thread_stage.core.security import create_access_token, decode_access_token
from thread_stage.core.settings import settings


def test_token_round_trip_keeps_permissions() -> None:
    auth = decode_access_token(create_access_token(42, {PERMISSION_BAN_POST}))

    assert auth.login
    assert auth.user_id == 42
    assert auth.ban_post


def test_token_signed_with_another_key_is_rejected() -> None:
    token = jwt.encode({"sub": "1"}, "other-key", algorithm=settings.jwt_algorithm)
    with pytest.raises(JWTError):
        decode_access_token(token)


def test_token_without_subject_is_rejected() -> None:
    token = jwt.encode({"permissions": []}, settings.secret_key, algorithm=settings.jwt_algorithm)
    with pytest.raises(ValueError):
        decode_access_token(token)
