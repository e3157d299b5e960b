from typing import List

from fastapi import APIRouter, Depends, Path, status

from studyhub.core.database import EntityStore
from studyhub.core.dependencies import get_store
from studyhub.core.security import get_current_user
from studyhub.models.base import User
from studyhub.schemas.base_schemas import ID_MAX, ID_MIN
from studyhub.schemas.group_schemas import GroupCreate, GroupMemberResponse, GroupWithCountResponse
from studyhub.schemas.message_schemas import MessageWithUserResponse
from studyhub.services.group_service import (
    create_group_service,
    get_user_groups_service,
    join_group_service,
    list_groups_service,
)
from studyhub.services.message_service import get_group_messages_service

router = APIRouter(prefix="/groups", tags=["Groups"])


@router.get("", response_model=List[GroupWithCountResponse])
def list_groups(
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    """All study groups with their member counts."""
    return list_groups_service(store)


@router.get("/my", response_model=List[GroupWithCountResponse])
def list_my_groups(
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    """Groups the caller belongs to or created."""
    return get_user_groups_service(store, current_user)


@router.post("", response_model=GroupWithCountResponse, status_code=status.HTTP_201_CREATED)
def create_group(
    group_data: GroupCreate,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    """Create a group. The creator becomes its first member."""
    return create_group_service(store, group_data, current_user)


@router.post("/{group_id}/join", response_model=GroupMemberResponse, status_code=status.HTTP_201_CREATED)
def join_group(
    group_id: int = Path(ge=ID_MIN, le=ID_MAX),
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    return join_group_service(store, group_id, current_user)


@router.get("/{group_id}/messages", response_model=List[MessageWithUserResponse])
def list_group_messages(
    group_id: int = Path(ge=ID_MIN, le=ID_MAX),
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    """Chat history of a group, oldest first. Members only."""
    return get_group_messages_service(store, group_id, current_user)
