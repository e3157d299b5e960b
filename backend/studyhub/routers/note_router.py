from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from studyhub.core.database import EntityStore
from studyhub.core.dependencies import get_store
from studyhub.core.security import get_current_user
from studyhub.models.base import User
from studyhub.schemas.base_schemas import ID_MAX, ID_MIN
from studyhub.schemas.note_schemas import NoteCreate, NoteResponse
from studyhub.services.note_service import create_note_service, list_notes_service

router = APIRouter(prefix="/notes", tags=["Notes"])


@router.get("", response_model=List[NoteResponse])
def list_notes(
    group_id: Optional[int] = Query(None, alias="groupId", ge=ID_MIN, le=ID_MAX),
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    return list_notes_service(store, group_id)


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
def create_note(
    note_data: NoteCreate,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    """Share a note with a group the caller belongs to."""
    return create_note_service(store, note_data, current_user)
