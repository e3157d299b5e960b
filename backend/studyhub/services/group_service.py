import logging
from typing import List

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from studyhub.core.database import EntityStore
from studyhub.models.base import StudyGroup, User
from studyhub.repositories.group_repository import (
    create_group_with_creator_db,
    get_all_groups_db,
    get_group_by_id_db,
    get_user_groups_db,
    join_group_db,
)
from studyhub.schemas.group_schemas import (
    GroupCreate,
    GroupMemberResponse,
    GroupResponse,
    GroupWithCountResponse,
)
from studyhub.services.membership_service import membership_count

logger = logging.getLogger(__name__)


def _with_member_count(store: EntityStore, group: StudyGroup) -> GroupWithCountResponse:
    """Attaches the derived memberCount to a group record."""
    base = GroupResponse.model_validate(group).model_dump()
    return GroupWithCountResponse(**base, member_count=membership_count(store, group.id))


def list_groups_service(store: EntityStore) -> List[GroupWithCountResponse]:
    return [_with_member_count(store, g) for g in get_all_groups_db(store)]


def get_user_groups_service(store: EntityStore, user: User) -> List[GroupWithCountResponse]:
    return [_with_member_count(store, g) for g in get_user_groups_db(store, user.id)]


def create_group_service(store: EntityStore, group_data: GroupCreate, user: User) -> GroupWithCountResponse:
    group = StudyGroup(
        name=group_data.name,
        description=group_data.description,
        created_by=user.id,
    )
    try:
        created_group = create_group_with_creator_db(store, group)
    except SQLAlchemyError:
        logger.exception("Failed to create study group for user %s", user.id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create study group")

    logger.info("User %s created group %s", user.id, created_group.id)
    return _with_member_count(store, created_group)


def join_group_service(store: EntityStore, group_id: int, user: User) -> GroupMemberResponse:
    group = get_group_by_id_db(store, group_id)
    if not group:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Group not found")

    try:
        membership = join_group_db(store, group_id, user.id)
    except SQLAlchemyError:
        logger.exception("Failed to add user %s to group %s", user.id, group_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to join study group")

    if membership is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Already a member of this group")
    return GroupMemberResponse.model_validate(membership)
