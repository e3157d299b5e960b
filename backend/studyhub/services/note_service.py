import logging
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from studyhub.core.database import EntityStore
from studyhub.models.base import Note, User
from studyhub.repositories.note_repository import create_note_db, get_notes_by_group_db, get_notes_db
from studyhub.schemas.note_schemas import NoteCreate, NoteResponse
from studyhub.services.membership_service import require_membership

logger = logging.getLogger(__name__)


def list_notes_service(store: EntityStore, group_id: Optional[int] = None) -> List[NoteResponse]:
    notes = get_notes_db(store) if group_id is None else get_notes_by_group_db(store, group_id)
    return [NoteResponse.model_validate(n) for n in notes]


def create_note_service(store: EntityStore, note_data: NoteCreate, user: User) -> NoteResponse:
    require_membership(
        store, user.id, note_data.group_id,
        "You must be a member of the group to upload notes",
    )
    note = Note(
        title=note_data.title,
        file_type=note_data.file_type,
        group_id=note_data.group_id,
        uploaded_by=user.id,
        file_url=note_data.file_url,
    )
    try:
        created = create_note_db(store, note)
    except SQLAlchemyError:
        logger.exception("Failed to upload note to group %s", note_data.group_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to upload note")
    return NoteResponse.model_validate(created)
