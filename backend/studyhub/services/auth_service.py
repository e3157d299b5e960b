import logging
from typing import Tuple

from fastapi import HTTPException, status

from studyhub.core.database import EntityStore
from studyhub.core.security import create_access_token, get_password_hash, verify_password
from studyhub.models.base import User
from studyhub.repositories.auth_repository import create_user, get_user_by_username
from studyhub.schemas.user_schemas import UserCreate

logger = logging.getLogger(__name__)


def authenticate_user(store: EntityStore, username: str, password: str) -> Tuple[User, str]:
    user = get_user_by_username(store, username)
    if not user or not verify_password(password, user.password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid username or password")

    access_token = create_access_token(data={"sub": str(user.id)})
    return user, access_token


def register_new_user(store: EntityStore, user_create: UserCreate) -> Tuple[User, str]:
    password_hash = get_password_hash(user_create.password)
    user = create_user(store, user_create.username, password_hash, user_create.name)
    if user is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Username already exists")

    logger.info("Registered user %s (id=%s)", user.username, user.id)
    access_token = create_access_token(data={"sub": str(user.id)})
    return user, access_token
