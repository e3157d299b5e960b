"""
Membership gate.

Every group-scoped operation asks the same question: does a membership
record exist for this (user, group) pair. Group existence is not checked
here, so an unknown group id is simply a group nobody belongs to.
"""

from fastapi import HTTPException, status

from studyhub.core.database import EntityStore
from studyhub.repositories.group_repository import (
    get_group_membership_count_db,
    is_user_in_group_db,
)


def is_member(store: EntityStore, user_id: int, group_id: int) -> bool:
    return is_user_in_group_db(store, user_id, group_id)


def membership_count(store: EntityStore, group_id: int) -> int:
    """Number of membership records for the group. Display only."""
    return get_group_membership_count_db(store, group_id)


def require_membership(store: EntityStore, user_id: int, group_id: int, detail: str) -> None:
    if not is_member(store, user_id, group_id):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)
