"""Registration, login and the bearer-token dependency (get_current_user_id)."""

from typing import Annotated

import jwt
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import decode_access_token
from app.schemas.auth import (
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    TokenResponse,
)
from app.services import auth as auth_service

router = APIRouter()
security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Create an account. Fails with 400 when the email is already registered."""
    auth_service.register_user(db, body.username, body.email, body.password)
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> TokenResponse:
    """
    Authenticate with email and password; returns a JWT valid for one hour.
    Include the token in the Authorization header as: Bearer <token>
    """
    token = auth_service.login(db, body.email, body.password)
    return TokenResponse(token=token, token_type="bearer")


def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> int:
    """
    Dependency: require a valid Bearer JWT and return the user id it carries.

    Only the signature, expiry and payload shape are checked; the user is not
    looked up.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")
    try:
        payload = decode_access_token(credentials.credentials)
    except jwt.PyJWTError:
        raise _unauthorized("Invalid or expired token")
    sub = payload.get("sub")
    if not sub:
        raise _unauthorized("Invalid token payload")
    try:
        return int(sub)
    except (TypeError, ValueError):
        raise _unauthorized("Invalid token payload")
