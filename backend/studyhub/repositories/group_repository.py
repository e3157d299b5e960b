from typing import List, Optional

from sqlalchemy import and_, func, or_, select

from studyhub.core.database import EntityStore
from studyhub.models.base import GroupMember, StudyGroup


def create_group_db(store: EntityStore, group: StudyGroup) -> StudyGroup:
    with store.session() as db:
        db.add(group)
        db.commit()
        db.refresh(group)
        return group


def create_group_with_creator_db(store: EntityStore, group: StudyGroup) -> StudyGroup:
    """Insert the group and its creator's membership in a single unit of work."""
    with store.session() as db:
        db.add(group)
        db.flush()  # assigns group.id
        db.add(GroupMember(group_id=group.id, user_id=group.created_by))
        db.commit()
        db.refresh(group)
        return group


def get_all_groups_db(store: EntityStore) -> List[StudyGroup]:
    with store.session() as db:
        return db.query(StudyGroup).order_by(StudyGroup.id).all()


def get_group_by_id_db(store: EntityStore, group_id: int) -> Optional[StudyGroup]:
    with store.session() as db:
        return db.get(StudyGroup, group_id)


def get_user_groups_db(store: EntityStore, user_id: int) -> List[StudyGroup]:
    """Groups the user belongs to or created."""
    with store.session() as db:
        member_of = select(GroupMember.group_id).where(GroupMember.user_id == user_id)
        return (
            db.query(StudyGroup)
            .filter(or_(StudyGroup.id.in_(member_of), StudyGroup.created_by == user_id))
            .order_by(StudyGroup.id)
            .all()
        )


def add_member_to_group_db(store: EntityStore, member: GroupMember) -> GroupMember:
    with store.session() as db:
        db.add(member)
        db.commit()
        db.refresh(member)
        return member


def join_group_db(store: EntityStore, group_id: int, user_id: int) -> Optional[GroupMember]:
    """Add a membership unless one exists; returns None for an existing member."""
    with store.session() as db:
        if _find_membership(db, group_id, user_id) is not None:
            return None
        member = GroupMember(group_id=group_id, user_id=user_id)
        db.add(member)
        db.commit()
        db.refresh(member)
        return member


def get_group_members_db(store: EntityStore, group_id: int) -> List[GroupMember]:
    with store.session() as db:
        return (
            db.query(GroupMember)
            .filter(GroupMember.group_id == group_id)
            .order_by(GroupMember.id)
            .all()
        )


def is_user_in_group_db(store: EntityStore, user_id: int, group_id: int) -> bool:
    with store.session() as db:
        return _find_membership(db, group_id, user_id) is not None


def get_group_membership_count_db(store: EntityStore, group_id: int) -> int:
    with store.session() as db:
        return (
            db.query(func.count(GroupMember.id))
            .filter(GroupMember.group_id == group_id)
            .scalar()
        )


def _find_membership(db, group_id: int, user_id: int) -> Optional[GroupMember]:
    return (
        db.query(GroupMember)
        .filter(and_(GroupMember.group_id == group_id, GroupMember.user_id == user_id))
        .first()
    )
