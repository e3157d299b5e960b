from fastapi import APIRouter, Depends, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from studyhub.core.config import settings
from studyhub.core.database import EntityStore
from studyhub.core.dependencies import get_store
from studyhub.core.security import AUTH_COOKIE_NAME, get_current_user
from studyhub.models.base import User
from studyhub.schemas.user_schemas import Token, UserCreate, UserLogin, UserResponse
from studyhub.services.auth_service import authenticate_user, register_new_user

router = APIRouter(tags=["Authentication"])


def _token_response(user: User, access_token: str, status_code: int) -> JSONResponse:
    body = Token(access_token=access_token, user=UserResponse.model_validate(user))
    response = JSONResponse(
        content=jsonable_encoder(body.model_dump(by_alias=True)),
        status_code=status_code,
    )
    response.set_cookie(
        AUTH_COOKIE_NAME,
        value=f"Bearer {access_token}",
        httponly=True,
        max_age=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        expires=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        samesite="none" if settings.IS_PRODUCTION else "lax",
        secure=settings.IS_PRODUCTION,
    )
    return response


@router.post("/register", response_model=Token, status_code=status.HTTP_201_CREATED)
def register(user: UserCreate, store: EntityStore = Depends(get_store)):
    db_user, access_token = register_new_user(store, user)
    return _token_response(db_user, access_token, status.HTTP_201_CREATED)


@router.post("/login", response_model=Token)
def login(form_data: UserLogin, store: EntityStore = Depends(get_store)):
    db_user, access_token = authenticate_user(store, form_data.username, form_data.password)
    return _token_response(db_user, access_token, status.HTTP_200_OK)


@router.post("/logout")
def logout():
    response = JSONResponse(content={"message": "Logged out"})
    response.delete_cookie(AUTH_COOKIE_NAME)
    return response


@router.get("/user", response_model=UserResponse)
def current_user_profile(current_user: User = Depends(get_current_user)):
    return UserResponse.model_validate(current_user)
