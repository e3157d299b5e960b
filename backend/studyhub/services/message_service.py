import logging
from typing import List

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from studyhub.core.database import EntityStore
from studyhub.models.base import User
from studyhub.repositories.auth_repository import get_user_by_id
from studyhub.repositories.message_repository import get_messages_by_group_db
from studyhub.schemas.message_schemas import MessageResponse, MessageWithUserResponse
from studyhub.schemas.user_schemas import UserSummary
from studyhub.services.membership_service import require_membership

logger = logging.getLogger(__name__)


def get_group_messages_service(store: EntityStore, group_id: int, user: User) -> List[MessageWithUserResponse]:
    """Chronological history of a group, each message carrying its author's summary."""
    require_membership(
        store, user.id, group_id,
        "You must be a member of the group to access messages",
    )
    try:
        messages = get_messages_by_group_db(store, group_id)
        result = []
        for message in messages:
            author = get_user_by_id(store, message.user_id)
            base = MessageResponse.model_validate(message).model_dump()
            result.append(MessageWithUserResponse(
                **base,
                user=UserSummary.model_validate(author) if author else None,
            ))
    except SQLAlchemyError:
        logger.exception("Failed to load messages of group %s", group_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to retrieve messages")
    return result
