from datetime import datetime

from pydantic import Field

from studyhub.schemas.base_schemas import CamelModel, RecordId


class MeetingCreate(CamelModel):
    title: str = Field(min_length=2, max_length=200)
    date: str = Field(min_length=1, max_length=50)
    time: str = Field(min_length=1, max_length=50)
    group_id: RecordId


class MeetingResponse(CamelModel):
    id: int
    title: str
    date: str
    time: str
    group_id: int
    created_by: int
    created_at: datetime
