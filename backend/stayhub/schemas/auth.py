"""Auth schemas."""

from typing import Optional

from pydantic import EmailStr, Field

from stayhub.models.user import User
from stayhub.schemas.base import BaseSchema


class LoginRequest(BaseSchema):
    """Sign in with email and password."""

    email: EmailStr
    password: str = Field(..., max_length=128)


class RegisterRequest(BaseSchema):
    """Create a guest account."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)
    phone: Optional[str] = Field(None, max_length=50)


class SessionResponse(BaseSchema):
    """Bearer token plus the signed-in user."""

    token: str
    token_type: str = "bearer"
    user: User


class ProfileUpdate(BaseSchema):
    """Partial profile update."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=50)
    avatar: Optional[str] = None
