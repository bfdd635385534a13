"""Authentication and user models."""
from typing import Optional
from pydantic import BaseModel


class AuthRequest(BaseModel):
    """Body of POST /auth/register and POST /auth/login."""

    email: str
    password: str


class UserDto(BaseModel):
    """User object as sent by the backend; both fields may be missing."""

    id: Optional[str] = None
    email: Optional[str] = None


class AuthResponse(BaseModel):
    """Response of the register/login endpoints."""

    token: Optional[str] = None
    user: Optional[UserDto] = None


class UserProfile(BaseModel):
    """Signed-in user's profile."""

    id: Optional[str] = None
    email: str = ""
