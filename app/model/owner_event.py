from pydantic import BaseModel, ConfigDict, Field

OWNER_ROLE = "OWNER"


class OwnerRoleUpdateEvent(BaseModel):
    """Sent when a user becomes an owner of a store for the first time."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    user_id: str = Field(..., alias="userId")
    role: str = OWNER_ROLE
