from typing import List, Optional

from sqlalchemy import asc

from studyhub.core.database import EntityStore
from studyhub.models.base import Message


def create_message_db(store: EntityStore, content: str, group_id: int, user_id: int) -> Message:
    with store.session() as db:
        message = Message(content=content, group_id=group_id, user_id=user_id)
        db.add(message)
        db.commit()
        db.refresh(message)
        return message


def get_message_by_id_db(store: EntityStore, message_id: int) -> Optional[Message]:
    with store.session() as db:
        return db.get(Message, message_id)


def get_messages_by_group_db(store: EntityStore, group_id: int) -> List[Message]:
    """Messages of a group, oldest first."""
    with store.session() as db:
        return (
            db.query(Message)
            .filter(Message.group_id == group_id)
            .order_by(asc(Message.sent_at), asc(Message.id))
            .all()
        )
