"""Auth router - mock login, registration and profile."""

from fastapi import APIRouter, Depends, Request, Response, status

from stayhub.core.results import http_error
from stayhub.core.security import AuthenticatedUser, get_current_user
from stayhub.core.state import get_audit, get_auth
from stayhub.models.enums import AuditAction
from stayhub.models.user import User
from stayhub.schemas.auth import LoginRequest, ProfileUpdate, RegisterRequest, SessionResponse
from stayhub.services.audit import AuditService
from stayhub.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


def _client_ip(request: Request):
    return request.client.host if request.client else None


@router.post("/login", response_model=SessionResponse)
async def login(
    data: LoginRequest,
    request: Request,
    auth: AuthService = Depends(get_auth),
    audit: AuditService = Depends(get_audit),
):
    """Sign in and receive a bearer token."""
    result = await auth.login(data.email, data.password)
    if not result.ok:
        raise http_error(result)

    user = result.value
    audit.log_user_event(
        AuditAction.USER_LOGGED_IN, user.id, email=user.email, ip_address=_client_ip(request)
    )
    return SessionResponse(token=auth.open_session(user), user=user)


@router.post("/register", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
async def register(
    data: RegisterRequest,
    request: Request,
    auth: AuthService = Depends(get_auth),
    audit: AuditService = Depends(get_audit),
):
    """Create a guest account and sign it in."""
    result = await auth.register(data.name, data.email, data.password, data.phone)
    if not result.ok:
        raise http_error(result, rejected_status=status.HTTP_409_CONFLICT)

    user = result.value
    audit.log_user_event(
        AuditAction.USER_REGISTERED, user.id, email=user.email, ip_address=_client_ip(request)
    )
    return SessionResponse(token=auth.open_session(user), user=user)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    current_user: AuthenticatedUser = Depends(get_current_user),
    auth: AuthService = Depends(get_auth),
    audit: AuditService = Depends(get_audit),
):
    """End the current session."""
    auth.logout(current_user.token)
    audit.log_user_event(AuditAction.USER_LOGGED_OUT, current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me", response_model=User)
async def get_me(current_user: AuthenticatedUser = Depends(get_current_user)):
    """Get current authenticated user info."""
    return current_user.user


@router.patch("/me", response_model=User)
async def update_me(
    data: ProfileUpdate,
    current_user: AuthenticatedUser = Depends(get_current_user),
    auth: AuthService = Depends(get_auth),
    audit: AuditService = Depends(get_audit),
):
    """Update the current user's profile."""
    result = auth.update_profile(current_user.id, data.model_dump(exclude_unset=True))
    if not result.ok:
        raise http_error(result, rejected_status=status.HTTP_409_CONFLICT)

    audit.log_user_event(AuditAction.PROFILE_UPDATED, current_user.id)
    return result.value
