import logging
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from studyhub.core.database import EntityStore
from studyhub.models.base import Meeting, User
from studyhub.repositories.meeting_repository import (
    create_meeting_db,
    get_meetings_by_group_db,
    get_meetings_db,
)
from studyhub.schemas.meeting_schemas import MeetingCreate, MeetingResponse
from studyhub.services.membership_service import require_membership

logger = logging.getLogger(__name__)


def list_meetings_service(store: EntityStore, group_id: Optional[int] = None) -> List[MeetingResponse]:
    if group_id is None:
        meetings = get_meetings_db(store)
    else:
        meetings = get_meetings_by_group_db(store, group_id)
    return [MeetingResponse.model_validate(m) for m in meetings]


def create_meeting_service(store: EntityStore, meeting_data: MeetingCreate, user: User) -> MeetingResponse:
    require_membership(
        store, user.id, meeting_data.group_id,
        "You must be a member of the group to schedule a meeting",
    )
    meeting = Meeting(
        title=meeting_data.title,
        date=meeting_data.date,
        time=meeting_data.time,
        group_id=meeting_data.group_id,
        created_by=user.id,
    )
    try:
        created = create_meeting_db(store, meeting)
    except SQLAlchemyError:
        logger.exception("Failed to create meeting in group %s", meeting_data.group_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create meeting")
    return MeetingResponse.model_validate(created)
