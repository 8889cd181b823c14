"""
Decision only: decide_access(ctx) -> AccessDecision.
Pure function, no I/O. Only a verified subscriber sees the full post.
"""
from __future__ import annotations

from postwall.paywall.models import AccessContext, AccessDecision, AccessState


def decide_access(ctx: AccessContext) -> AccessDecision:
    """
    | identity | subscriber | state                        | full? |
    | absent   | n/a        | ANONYMOUS                    | no    |
    | present  | False      | AUTHENTICATED_NON_SUBSCRIBER | no    |
    | present  | True       | AUTHENTICATED_SUBSCRIBER     | yes   |
    """
    if not ctx.has_identity:
        # is_subscriber is ignored without a verified identity
        return AccessDecision(state=AccessState.ANONYMOUS, show_full=False)

    if ctx.is_subscriber:
        return AccessDecision(state=AccessState.AUTHENTICATED_SUBSCRIBER, show_full=True)

    return AccessDecision(state=AccessState.AUTHENTICATED_NON_SUBSCRIBER, show_full=False)
