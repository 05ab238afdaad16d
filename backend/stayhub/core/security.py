"""Bearer session verification for the mock auth service."""

from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from stayhub.core.state import get_auth
from stayhub.models.user import User
from stayhub.services.auth import AuthService

security = HTTPBearer(auto_error=False)


class AuthenticatedUser:
    """The user behind the request's bearer token."""

    def __init__(self, user: User, token: str):
        self.user = user
        self.token = token

    @property
    def id(self) -> str:
        return self.user.id

    @property
    def is_host(self) -> bool:
        return self.user.is_host


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    auth: AuthService = Depends(get_auth),
) -> Optional[AuthenticatedUser]:
    """Resolve the session if a token was sent; anonymous otherwise."""
    if credentials is None:
        return None
    user = auth.resolve(credentials.credentials)
    if user is None:
        return None
    return AuthenticatedUser(user=user, token=credentials.credentials)


async def get_current_user(
    current_user: Optional[AuthenticatedUser] = Depends(get_optional_user),
) -> AuthenticatedUser:
    """Require a signed-in user."""
    if current_user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="You need to be logged in to do that.",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return current_user
