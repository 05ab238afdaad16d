"""User model."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, EmailStr


class User(BaseModel):
    """A guest or host account."""

    id: str
    name: str
    email: EmailStr
    phone: Optional[str] = None
    avatar: Optional[str] = None
    is_host: bool = False
    joined_date: date
