from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SubscriptionOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    active: bool = False
    updated_at: datetime | None = None


class MeOut(BaseModel):
    uid: str
    email: str | None = None
    subscription: SubscriptionOut


class ToggleSubscriptionOut(BaseModel):
    active: bool
