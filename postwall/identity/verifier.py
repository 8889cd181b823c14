"""
IdentityVerifier: one verification attempt, two failure policies.

REQUIRED: missing/malformed header or invalid token -> UnauthenticatedError;
provider unreachable -> IdentityProviderUnavailableError (500).
OPTIONAL: every verification failure degrades to an anonymous caller (None).
"""
from __future__ import annotations

import logging
from enum import Enum

from postwall.core.errors import (
    IdentityProviderUnavailableError,
    TokenVerificationError,
    UnauthenticatedError,
)
from postwall.identity.models import Identity
from postwall.identity.provider import IdentityProvider
from postwall.utils.metrics import identity_verifications_total

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class VerificationPolicy(str, Enum):
    REQUIRED = "required"
    OPTIONAL = "optional"


def extract_bearer_token(authorization: str | None) -> str | None:
    """Token from an `Authorization: Bearer <token>` header; None if absent or malformed."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):].strip()
    if not token or any(ch.isspace() for ch in token):
        return None
    return token


class IdentityVerifier:
    def __init__(self, provider: IdentityProvider) -> None:
        self.provider = provider

    def attempt(self, authorization: str | None) -> Identity:
        """Single verification attempt, no retries. Raises on any failure."""
        token = extract_bearer_token(authorization)
        if token is None:
            raise UnauthenticatedError("No token provided")
        try:
            return self.provider.verify(token)
        except TokenVerificationError as e:
            raise UnauthenticatedError("Invalid or expired token") from e

    def verify(self, authorization: str | None, policy: VerificationPolicy) -> Identity | None:
        try:
            identity = self.attempt(authorization)
        except (UnauthenticatedError, IdentityProviderUnavailableError) as e:
            if isinstance(e, IdentityProviderUnavailableError):
                outcome = "unavailable"
            elif extract_bearer_token(authorization) is None:
                outcome = "missing"
            else:
                outcome = "rejected"
            identity_verifications_total.labels(policy=policy.value, outcome=outcome).inc()
            if policy is VerificationPolicy.OPTIONAL:
                # Anonymous browsing must keep working on stale or missing tokens
                logger.debug(
                    "identity_optional_fallback",
                    extra={"policy": policy.value, "outcome": outcome},
                )
                return None
            raise
        identity_verifications_total.labels(policy=policy.value, outcome="verified").inc()
        return identity
