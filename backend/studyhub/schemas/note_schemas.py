from datetime import datetime

from pydantic import Field

from studyhub.schemas.base_schemas import CamelModel, RecordId


class NoteCreate(CamelModel):
    title: str = Field(min_length=2, max_length=200)
    file_type: str = Field(min_length=1, max_length=50)
    group_id: RecordId
    file_url: str = Field(min_length=1)


class NoteResponse(CamelModel):
    id: int
    title: str
    file_type: str
    group_id: int
    uploaded_by: int
    uploaded_at: datetime
    file_url: str
