import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from fastapi import Depends, HTTPException, Request, status
from jose import JWTError, jwt

from studyhub.core.config import settings
from studyhub.core.dependencies import get_store
from studyhub.core.database import EntityStore
from studyhub.models.base import User
from studyhub.repositories.auth_repository import get_user_by_id

logger = logging.getLogger(__name__)

AUTH_COOKIE_NAME = "Authorization"


def get_password_hash(password: str) -> str:
    # bcrypt only looks at the first 72 bytes
    password_bytes = password.encode("utf-8")[:72]
    hashed = bcrypt.hashpw(password_bytes, bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS))
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    password_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.checkpw(password_bytes, hashed_password.encode("utf-8"))


def create_access_token(data: dict) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def _extract_token(request: Request) -> Optional[str]:
    """Bearer token from the Authorization header, falling back to the cookie."""
    raw = request.headers.get("Authorization") or request.cookies.get(AUTH_COOKIE_NAME)
    if not raw:
        return None
    scheme, _, token = raw.strip().strip('"').partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token


def get_current_user(request: Request, store: EntityStore = Depends(get_store)) -> User:
    unauthorized = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )
    token = _extract_token(request)
    if token is None:
        raise unauthorized
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
        user_id = int(payload.get("sub"))
    except (JWTError, TypeError, ValueError):
        logger.info("Rejected invalid access token")
        raise unauthorized

    user = get_user_by_id(store, user_id)
    if user is None:
        raise unauthorized
    return user
