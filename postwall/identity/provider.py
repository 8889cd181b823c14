"""Identity provider collaborator: verifies ID tokens issued by the external identity service.

The provider signs ID tokens with rotating RS256 keys published as a JWKS
document. Keys are fetched lazily and cached by PyJWKClient; every token is
verified for signature, issuer, audience (project id) and expiry.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

import jwt
from jwt import PyJWKClient, PyJWKClientConnectionError, PyJWKClientError

from postwall.core.errors import IdentityProviderUnavailableError, TokenVerificationError
from postwall.identity.models import Identity

logger = logging.getLogger(__name__)


class IdentityProvider(ABC):
    @abstractmethod
    def verify(self, token: str) -> Identity:
        """Verify a raw ID token.

        Raises:
            TokenVerificationError: token is malformed, invalid or expired.
            IdentityProviderUnavailableError: provider could not be reached.
        """
        raise NotImplementedError


class FirebaseIdentityProvider(IdentityProvider):
    """Verifies identity-provider ID tokens (RS256 JWTs) against the public JWKS.

    Usage:
        provider = FirebaseIdentityProvider(project_id="my-project")
        identity = provider.verify(id_token)
    """

    ALGORITHMS = ["RS256"]

    def __init__(
        self,
        project_id: str,
        *,
        jwks_url: str,
        issuer: str,
        timeout: float = 5.0,
        cache_seconds: int = 600,
        jwks_client: PyJWKClient | None = None,
    ) -> None:
        self._project_id = project_id
        self._issuer = issuer
        self._jwks_url = jwks_url
        self._jwks_client = jwks_client or PyJWKClient(
            jwks_url,
            cache_keys=True,
            lifespan=cache_seconds,
            timeout=timeout,
        )

    @classmethod
    def from_settings(cls, settings: Any) -> "FirebaseIdentityProvider":
        return cls(
            settings.identity_project_id,
            jwks_url=settings.identity_jwks_url,
            issuer=settings.identity_issuer,
            timeout=settings.identity_timeout_seconds,
            cache_seconds=settings.identity_jwks_cache_seconds,
        )

    def verify(self, token: str) -> Identity:
        # Connection errors subclass PyJWKClientError, so they are checked first
        try:
            signing_key = self._jwks_client.get_signing_key_from_jwt(token)
        except PyJWKClientConnectionError as e:
            logger.debug("identity_provider_unreachable", extra={"error": str(e)})
            raise IdentityProviderUnavailableError("Identity provider unavailable") from e
        except PyJWKClientError as e:
            raise TokenVerificationError(f"Failed to get signing key: {e}") from e
        except jwt.PyJWTError as e:
            raise TokenVerificationError(f"Token decode error: {e}") from e
        except (ValueError, OSError) as e:
            # Non-JSON key document or a connection dropped mid-read
            logger.debug("identity_provider_bad_response", extra={"error": str(e)})
            raise IdentityProviderUnavailableError("Identity provider unavailable") from e

        try:
            claims = jwt.decode(
                token,
                signing_key.key,
                algorithms=self.ALGORITHMS,
                audience=self._project_id,
                issuer=self._issuer,
                options={"require": ["exp", "iat", "sub", "iss", "aud"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenVerificationError("Token has expired") from e
        except jwt.PyJWTError as e:
            raise TokenVerificationError(f"Token validation error: {e}") from e

        uid = claims["sub"]
        if not isinstance(uid, str) or not uid:
            raise TokenVerificationError("Token subject is empty")

        return Identity(uid=uid, email=claims.get("email"))
