"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """New account details."""

    username: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: str = Field(..., min_length=1, max_length=320, description="Login email")
    password: str = Field(..., min_length=1, description="Password")


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str = Field(..., min_length=1, max_length=320, description="Login email")
    password: str = Field(..., min_length=1, description="Password")


class MessageResponse(BaseModel):
    """Short human-readable outcome."""

    message: str


class TokenResponse(BaseModel):
    """JWT access token returned after successful login."""

    token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
