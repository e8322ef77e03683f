import asyncio
from datetime import datetime, timedelta, timezone

import pytest
from fastapi import HTTPException

from app.core import security
from app.core.config import settings


@pytest.fixture(autouse=True)
def jwt_secret(monkeypatch):
    monkeypatch.setattr(settings, "JWT_SECRET_KEY", "test-secret-key-with-enough-length-0123456789")


def test_token_round_trip():
    token = security.create_access_token({"sub": "u1", "role": "farmer"})
    payload = asyncio.run(security.verify_jwt(token))
    assert payload["sub"] == "u1"
    assert "exp" in payload


def test_expired_token_is_rejected():
    token = security.create_access_token({"sub": "u1"}, expires_delta=timedelta(minutes=-5))
    with pytest.raises(HTTPException) as exc_info:
        asyncio.run(security.verify_jwt(token))
    assert exc_info.value.status_code == 401
    assert exc_info.value.detail == "Token has expired"


def test_token_without_subject_is_rejected():
    token = security.create_access_token({"role": "farmer"})
    with pytest.raises(HTTPException) as exc_info:
        asyncio.run(security.verify_jwt(token))
    assert exc_info.value.detail == "Could not validate credentials"


def test_garbage_token_is_rejected():
    with pytest.raises(HTTPException) as exc_info:
        asyncio.run(security.verify_jwt("not-a-token"))
    assert exc_info.value.status_code == 401


def test_admin_check():
    admin = {"sub": "a1", "role": "admin"}
    assert asyncio.run(security.verify_admin(admin)) == admin
    with pytest.raises(HTTPException) as exc_info:
        asyncio.run(security.verify_admin({"sub": "u1", "role": "farmer"}))
    assert exc_info.value.status_code == 403


def test_mock_one_time_code():
    assert asyncio.run(security.get_otp("farmer@example.com")) == "123456"
    assert asyncio.run(security.validate_otp("farmer@example.com", "123456")) is True
    assert asyncio.run(security.validate_otp("farmer@example.com", "000000")) is False


def test_default_lifetime_follows_settings(monkeypatch):
    monkeypatch.setattr(settings, "ACCESS_TOKEN_EXPIRE_DAYS", 1)
    before = datetime.now(timezone.utc)
    token = security.create_access_token({"sub": "u1"})
    payload = asyncio.run(security.verify_jwt(token))
    expires_at = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
    assert timedelta(hours=23) < expires_at - before <= timedelta(days=1, seconds=5)
