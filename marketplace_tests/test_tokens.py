from datetime import datetime, timedelta, timezone

import jwt
import pytest

from marketplace.common.errors import UnauthorizedError
from marketplace.common.tokens import TokenService


@pytest.fixture
def tokens():
    return TokenService("unit-secret")


def test_issue_embeds_user_id_and_email(tokens):
    token = tokens.issue("user-1", "a@x.com")

    payload = tokens.verify(token)
    assert payload.user_id == "user-1"
    assert payload.email == "a@x.com"


def test_default_expiry_is_24_hours(tokens):
    before = datetime.now(timezone.utc)
    payload = tokens.verify(tokens.issue("user-1", "a@x.com"))

    assert timedelta(hours=23, minutes=59) <= payload.expires_at - before <= timedelta(hours=24, seconds=5)


def test_expired_token_is_rejected():
    expired = TokenService("unit-secret", expires_in=timedelta(seconds=-1))
    token = expired.issue("user-1", "a@x.com")

    with pytest.raises(UnauthorizedError):
        TokenService("unit-secret").verify(token)


def test_wrong_signature_is_rejected(tokens):
    forged = TokenService("another-secret").issue("user-1", "a@x.com")

    with pytest.raises(UnauthorizedError) as exc_info:
        tokens.verify(forged)
    assert exc_info.value.message == "Invalid or expired token"


def test_malformed_token_is_rejected(tokens):
    with pytest.raises(UnauthorizedError):
        tokens.verify("not.a.jwt")


def test_token_without_user_id_is_rejected(tokens):
    token = jwt.encode(
        {"email": "a@x.com", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        "unit-secret",
        algorithm="HS256",
    )

    with pytest.raises(UnauthorizedError):
        tokens.verify(token)
