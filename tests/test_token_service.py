"""Tests for session token issuance and verification."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from task_manager.errors import TokenError, TokenExpiredError, TokenInvalidError
from task_manager.services.token_service import TokenService

SECRET = "unit-test-signing-secret-0123456789abcdef"


@pytest.fixture
def service() -> TokenService:
    return TokenService(SECRET)


def test_issue_then_verify_returns_user_id(service):
    token = service.issue("user-123")
    assert service.verify(token) == "user-123"


def test_default_ttl_is_one_hour(service):
    payload = jwt.decode(service.issue("user-123"), SECRET, algorithms=["HS256"])
    assert payload["exp"] - payload["iat"] == 3600


def test_expired_token_is_rejected_as_expired(service):
    token = service.issue("user-123", ttl=timedelta(seconds=-10))
    with pytest.raises(TokenExpiredError):
        service.verify(token)


def test_token_signed_with_other_key_is_invalid(service):
    token = TokenService("another-signing-secret-0123456789abcdef").issue("user-123")
    with pytest.raises(TokenInvalidError):
        service.verify(token)


def test_tampered_token_is_invalid(service):
    header, payload, signature = service.issue("user-123").split(".")
    forged = jwt.encode(
        {"sub": "someone-else", "exp": 9999999999},
        "guessed-signing-secret-0123456789abcdef",
        algorithm="HS256",
    )
    tampered = ".".join([header, forged.split(".")[1], signature])
    with pytest.raises(TokenInvalidError):
        service.verify(tampered)


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
def test_malformed_token_is_invalid(service, token):
    with pytest.raises(TokenInvalidError):
        service.verify(token)


def test_token_without_subject_is_invalid(service):
    exp = datetime.now(timezone.utc) + timedelta(hours=1)
    token = jwt.encode({"exp": exp}, SECRET, algorithm="HS256")
    with pytest.raises(TokenInvalidError):
        service.verify(token)


def test_token_without_expiry_is_invalid(service):
    token = jwt.encode({"sub": "user-123"}, SECRET, algorithm="HS256")
    with pytest.raises(TokenInvalidError):
        service.verify(token)


def test_all_token_failures_share_a_base_class():
    assert issubclass(TokenExpiredError, TokenError)
    assert issubclass(TokenInvalidError, TokenError)


def test_empty_secret_is_refused():
    with pytest.raises(ValueError):
        TokenService("")
