from datetime import datetime

from pydantic import Field

from studyhub.schemas.base_schemas import CamelModel


class UserCreate(CamelModel):
    username: str = Field(min_length=3, max_length=100)
    password: str = Field(min_length=6, max_length=128)
    name: str = Field(min_length=1, max_length=200)


class UserLogin(CamelModel):
    username: str
    password: str


class UserResponse(CamelModel):
    id: int
    username: str
    name: str
    created_at: datetime


class UserSummary(CamelModel):
    id: int
    name: str
    username: str


class Token(CamelModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
