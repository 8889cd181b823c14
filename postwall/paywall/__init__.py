"""
Paywall: who sees the full post and who sees a teaser.
Decision (decide_access) is pure; AccessResolver composes it with the stores.
"""
from postwall.paywall.access import decide_access
from postwall.paywall.audit import record_access
from postwall.paywall.entitlement import EntitlementChecker
from postwall.paywall.models import AccessContext, AccessDecision, AccessState, Preview
from postwall.paywall.preview import make_preview
from postwall.paywall.resolver import AccessResolver

__all__ = [
    "AccessContext",
    "AccessDecision",
    "AccessState",
    "Preview",
    "AccessResolver",
    "EntitlementChecker",
    "decide_access",
    "make_preview",
    "record_access",
]
