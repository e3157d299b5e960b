from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from studyhub.schemas.base_schemas import CamelModel, RecordId
from studyhub.schemas.user_schemas import UserSummary


class MessageResponse(CamelModel):
    id: int
    content: str
    group_id: int
    user_id: int
    sent_at: datetime


class MessageWithUserResponse(MessageResponse):
    user: Optional[UserSummary] = None


# --- Realtime envelopes ---
class ChatEnvelope(BaseModel):
    """Wire structure of every frame on the chat socket."""

    type: str
    groupId: Optional[RecordId] = None
    data: Dict[str, Any] = Field(default_factory=dict)


class ChatMessageData(BaseModel):
    """Payload of a chat_message frame. The relay drops a zero userId."""

    content: str = Field(min_length=1)
    userId: RecordId
    groupId: Optional[RecordId] = None
