"""Tests for FirebaseIdentityProvider with locally signed RS256 tokens and a stubbed JWKS client."""
import logging
import time
from types import SimpleNamespace
from unittest.mock import MagicMock

import jwt
import pytest
from cryptography.hazmat.primitives.asymmetric import rsa
from jwt import PyJWKClientConnectionError, PyJWKClientError

from postwall.core.errors import IdentityProviderUnavailableError, TokenVerificationError
from postwall.identity.provider import FirebaseIdentityProvider

PROJECT = "test-project"
ISSUER = f"https://securetoken.google.com/{PROJECT}"


@pytest.fixture(scope="module")
def signing_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture
def jwks_client(signing_key):
    client = MagicMock()
    client.get_signing_key_from_jwt.return_value = SimpleNamespace(key=signing_key.public_key())
    return client


@pytest.fixture
def provider(jwks_client):
    return FirebaseIdentityProvider(
        PROJECT,
        jwks_url="https://keys.invalid/jwks",
        issuer=ISSUER,
        jwks_client=jwks_client,
    )


def _token(key, **overrides):
    now = int(time.time())
    claims = {
        "iss": ISSUER,
        "aud": PROJECT,
        "sub": "uid-123",
        "email": "user@example.com",
        "iat": now - 10,
        "exp": now + 3600,
    }
    claims.update(overrides)
    claims = {k: v for k, v in claims.items() if v is not None}
    return jwt.encode(claims, key, algorithm="RS256", headers={"kid": "k1"})


def test_valid_token(provider, signing_key):
    identity = provider.verify(_token(signing_key))
    assert identity.uid == "uid-123"
    assert identity.email == "user@example.com"


def test_email_is_optional(provider, signing_key):
    identity = provider.verify(_token(signing_key, email=None))
    assert identity.email is None


def test_expired_token(provider, signing_key):
    now = int(time.time())
    with pytest.raises(TokenVerificationError, match="expired"):
        provider.verify(_token(signing_key, iat=now - 7200, exp=now - 3600))


@pytest.mark.parametrize("claim,value", [("aud", "other-project"), ("iss", "https://evil.example")])
def test_wrong_audience_or_issuer(provider, signing_key, claim, value):
    with pytest.raises(TokenVerificationError):
        provider.verify(_token(signing_key, **{claim: value}))


def test_missing_subject(provider, signing_key):
    with pytest.raises(TokenVerificationError):
        provider.verify(_token(signing_key, sub=None))


def test_foreign_signature(provider):
    other = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    with pytest.raises(TokenVerificationError):
        provider.verify(_token(other))


def test_garbage_token(provider):
    with pytest.raises(TokenVerificationError):
        provider.verify("not-a-jwt")


def test_unknown_signing_key(provider, jwks_client, signing_key):
    jwks_client.get_signing_key_from_jwt.side_effect = PyJWKClientError("Unable to find a signing key")
    with pytest.raises(TokenVerificationError):
        provider.verify(_token(signing_key))


def test_jwks_unreachable(provider, jwks_client, signing_key):
    jwks_client.get_signing_key_from_jwt.side_effect = PyJWKClientConnectionError("timed out")
    with pytest.raises(IdentityProviderUnavailableError):
        provider.verify(_token(signing_key))


@pytest.mark.parametrize("error", [ValueError("Expecting value"), ConnectionResetError("reset")])
def test_jwks_bad_response_is_unavailable(provider, jwks_client, signing_key, error):
    jwks_client.get_signing_key_from_jwt.side_effect = error
    with pytest.raises(IdentityProviderUnavailableError):
        provider.verify(_token(signing_key))


def test_jwks_unreachable_logs_at_debug(provider, jwks_client, signing_key, caplog):
    jwks_client.get_signing_key_from_jwt.side_effect = PyJWKClientConnectionError("timed out")
    with caplog.at_level(logging.DEBUG, logger="postwall.identity.provider"):
        with pytest.raises(IdentityProviderUnavailableError):
            provider.verify(_token(signing_key))
    assert caplog.records
    assert all(r.levelno == logging.DEBUG for r in caplog.records if r.name == "postwall.identity.provider")


def test_from_settings_uses_project_issuer():
    settings = SimpleNamespace(
        identity_project_id=PROJECT,
        identity_jwks_url="https://keys.invalid/jwks",
        identity_issuer=ISSUER,
        identity_timeout_seconds=1.0,
        identity_jwks_cache_seconds=60,
    )
    provider = FirebaseIdentityProvider.from_settings(settings)
    assert provider._issuer == ISSUER
    assert provider._project_id == PROJECT
