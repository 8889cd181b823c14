"""
Dev/testing affordances. Mounted only when settings.dev_routes_enabled is true.
"""
from fastapi import APIRouter, Depends

from postwall.api.deps import get_profile_store, require_identity
from postwall.identity.models import Identity
from postwall.schemas.errors import ErrorOut
from postwall.schemas.users import ToggleSubscriptionOut
from postwall.services.subscriptions.service import toggle_subscription
from postwall.storage.base import ProfileStore


router = APIRouter(prefix="/dev", tags=["dev"])


@router.post(
    "/toggle-subscription",
    response_model=ToggleSubscriptionOut,
    responses={401: {"model": ErrorOut}, 404: {"model": ErrorOut}},
)
def toggle_own_subscription(
    identity: Identity = Depends(require_identity),
    profiles: ProfileStore = Depends(get_profile_store),
) -> ToggleSubscriptionOut:
    return ToggleSubscriptionOut(active=toggle_subscription(profiles, identity.uid))
