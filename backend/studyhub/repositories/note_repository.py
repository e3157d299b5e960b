from typing import List, Optional

from studyhub.core.database import EntityStore
from studyhub.models.base import Note


def create_note_db(store: EntityStore, note: Note) -> Note:
    with store.session() as db:
        db.add(note)
        db.commit()
        db.refresh(note)
        return note


def get_note_by_id_db(store: EntityStore, note_id: int) -> Optional[Note]:
    with store.session() as db:
        return db.get(Note, note_id)


def get_notes_db(store: EntityStore) -> List[Note]:
    with store.session() as db:
        return db.query(Note).order_by(Note.id).all()


def get_notes_by_group_db(store: EntityStore, group_id: int) -> List[Note]:
    with store.session() as db:
        return db.query(Note).filter(Note.group_id == group_id).order_by(Note.id).all()
