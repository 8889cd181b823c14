"""
Error taxonomy for the HTTP surface.

Every ApiError renders the uniform envelope {"error": message}; the paywall
case additionally carries code and the teaser payload.
"""
from __future__ import annotations

from typing import Any


class ApiError(Exception):
    """Base exception for errors that map onto an HTTP status."""

    http_status: int = 500
    code: str = "INTERNAL"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, Any]:
        return {"error": self.message}


class BadRequestError(ApiError):
    """Missing required fields or a collaborator-reported validation failure."""

    http_status = 400
    code = "BAD_REQUEST"


class UnauthenticatedError(ApiError):
    """Required identity missing, or token invalid/expired."""

    http_status = 401
    code = "UNAUTHENTICATED"


class PaywallBlockedError(ApiError):
    """Content exists but is gated; carries the preview so the caller can render a teaser."""

    http_status = 402
    code = "PAYWALL_BLOCKED"

    def __init__(self, message: str, post: dict[str, Any]):
        super().__init__(message)
        self.post = post

    def to_response(self) -> dict[str, Any]:
        return {"error": self.message, "code": self.code, "post": self.post}


class NotFoundError(ApiError):
    http_status = 404
    code = "NOT_FOUND"


class InternalError(ApiError):
    """Unexpected collaborator failure (store unreachable, unexpected shape)."""

    http_status = 500
    code = "INTERNAL"


class IdentityProviderUnavailableError(InternalError):
    """Identity provider could not be reached to verify a token."""


class StoreError(InternalError):
    """Profile or content store operation failed."""


class TokenVerificationError(Exception):
    """
    Raised by an identity provider when a token is invalid or expired.
    Not an ApiError: the verifier decides whether it becomes 401 or anonymous.
    """
