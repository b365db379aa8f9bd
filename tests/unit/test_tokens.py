"""Tests for access token verification."""

from datetime import timedelta
from uuid import uuid4

import pytest

from src.louvores.core.security import account_from_claims, decode_access_token
from tests.helpers import make_access_token

pytestmark = pytest.mark.unit


class TestDecodeAccessToken:
    def test_valid_token(self):
        account_id = uuid4()
        claims = decode_access_token(make_access_token(account_id, "a@example.com"))
        assert claims["sub"] == str(account_id)

    def test_expired_token(self):
        assert decode_access_token(make_access_token(expires_in=timedelta(minutes=-5))) is None

    def test_wrong_audience(self):
        assert decode_access_token(make_access_token(audience="anon")) is None

    def test_wrong_secret(self):
        token = make_access_token(secret="another-secret-that-is-long-enough-as-well")
        assert decode_access_token(token) is None

    def test_garbage(self):
        assert decode_access_token("not-a-jwt") is None


class TestAccountFromClaims:
    def test_normalizes_email_and_reads_name(self):
        account_id = uuid4()
        account = account_from_claims(
            {"sub": str(account_id), "email": " Ana@Example.COM", "user_metadata": {"name": "Ana"}}
        )
        assert account.id == account_id
        assert account.email == "ana@example.com"
        assert account.name == "Ana"

    @pytest.mark.parametrize("sub", [None, "service_role", ""])
    def test_subject_must_be_uuid(self, sub):
        assert account_from_claims({"sub": sub}) is None
