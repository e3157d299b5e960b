from datetime import datetime

from pydantic import Field

from studyhub.schemas.base_schemas import CamelModel


# --- Study groups ---
class GroupCreate(CamelModel):
    name: str = Field(min_length=2, max_length=100)
    description: str = Field(min_length=10, max_length=200)


class GroupResponse(CamelModel):
    id: int
    name: str
    description: str
    created_by: int
    created_at: datetime
    is_active: bool


class GroupWithCountResponse(GroupResponse):
    member_count: int


# --- Memberships ---
class GroupMemberResponse(CamelModel):
    id: int
    group_id: int
    user_id: int
    joined_at: datetime
