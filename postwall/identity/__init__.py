"""
Identity verification: bearer token -> Identity via the external identity provider.
One verification path, two failure policies (required = fail-closed, optional = fail-open).
"""
from postwall.identity.models import Identity
from postwall.identity.provider import FirebaseIdentityProvider, IdentityProvider
from postwall.identity.verifier import IdentityVerifier, VerificationPolicy, extract_bearer_token

__all__ = [
    "Identity",
    "IdentityProvider",
    "FirebaseIdentityProvider",
    "IdentityVerifier",
    "VerificationPolicy",
    "extract_bearer_token",
]
