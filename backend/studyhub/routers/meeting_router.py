from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from studyhub.core.database import EntityStore
from studyhub.core.dependencies import get_store
from studyhub.core.security import get_current_user
from studyhub.models.base import User
from studyhub.schemas.base_schemas import ID_MAX, ID_MIN
from studyhub.schemas.meeting_schemas import MeetingCreate, MeetingResponse
from studyhub.services.meeting_service import create_meeting_service, list_meetings_service

router = APIRouter(prefix="/meetings", tags=["Meetings"])


@router.get("", response_model=List[MeetingResponse])
def list_meetings(
    group_id: Optional[int] = Query(None, alias="groupId", ge=ID_MIN, le=ID_MAX),
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    return list_meetings_service(store, group_id)


@router.post("", response_model=MeetingResponse, status_code=status.HTTP_201_CREATED)
def create_meeting(
    meeting_data: MeetingCreate,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    """Schedule a meeting in a group the caller belongs to."""
    return create_meeting_service(store, meeting_data, current_user)
