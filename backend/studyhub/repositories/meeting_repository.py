from typing import List, Optional

from studyhub.core.database import EntityStore
from studyhub.models.base import Meeting


def create_meeting_db(store: EntityStore, meeting: Meeting) -> Meeting:
    with store.session() as db:
        db.add(meeting)
        db.commit()
        db.refresh(meeting)
        return meeting


def get_meeting_by_id_db(store: EntityStore, meeting_id: int) -> Optional[Meeting]:
    with store.session() as db:
        return db.get(Meeting, meeting_id)


def get_meetings_db(store: EntityStore) -> List[Meeting]:
    with store.session() as db:
        return db.query(Meeting).order_by(Meeting.id).all()


def get_meetings_by_group_db(store: EntityStore, group_id: int) -> List[Meeting]:
    with store.session() as db:
        return db.query(Meeting).filter(Meeting.group_id == group_id).order_by(Meeting.id).all()
