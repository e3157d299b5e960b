from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Ids are stored as SQLite INTEGER, a signed 64-bit value
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1

RecordId = Annotated[int, Field(ge=ID_MIN, le=ID_MAX)]


class CamelModel(BaseModel):
    """Snake-case attributes in Python, camelCase on the wire."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
