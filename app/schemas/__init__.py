"""Pydantic request/response schemas."""

from app.schemas.auth import (
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    TokenResponse,
)
from app.schemas.health import HealthResponse
from app.schemas.nft import NFTRead

__all__ = [
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "NFTRead",
    "RegisterRequest",
    "TokenResponse",
]
