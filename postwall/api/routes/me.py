from fastapi import APIRouter, Depends

from postwall.api.deps import get_profile_store, require_identity
from postwall.identity.models import Identity
from postwall.schemas.errors import ErrorOut
from postwall.schemas.users import MeOut, SubscriptionOut
from postwall.storage.base import ProfileStore


router = APIRouter(tags=["me"])


@router.get(
    "/me",
    response_model=MeOut,
    response_model_exclude_none=True,
    responses={401: {"model": ErrorOut}},
)
def get_me(
    identity: Identity = Depends(require_identity),
    profiles: ProfileStore = Depends(get_profile_store),
) -> MeOut:
    """Caller identity plus subscription; {active: false} when no profile exists."""
    profile = profiles.get(identity.uid)
    subscription = SubscriptionOut()
    if profile is not None and profile.subscription is not None:
        subscription = SubscriptionOut(
            active=profile.subscription.active,
            updated_at=profile.subscription.updated_at,
        )
    return MeOut(uid=identity.uid, email=identity.email, subscription=subscription)
