"""
Mock authentication.

Stands in for a remote identity provider. Demo accounts accept any non-empty
password; accounts created through ``register`` keep a password hash and are
checked against it. Sessions are opaque bearer tokens, stored hashed.
"""

import hashlib
import logging
import secrets
import threading
from datetime import date
from typing import Any, Iterable, Optional
from uuid import uuid4

from stayhub.models.user import User
from stayhub.services.processing import Err, Ok, Result, SimulatedGateway

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password. Please try again."
EMAIL_TAKEN = "Email already registered"
USER_NOT_FOUND = "User not found"

# Fields a user may change on their own profile
EDITABLE_FIELDS = {"name", "email", "phone", "avatar"}
# Editable fields that cannot be cleared; a null for these is ignored
REQUIRED_FIELDS = {"name", "email"}


def hash_token(token: str) -> str:
    """Hash a token or password for storage."""
    return hashlib.sha256(token.encode()).hexdigest()


class AuthService:
    """User directory plus session tokens."""

    def __init__(
        self,
        users: Iterable[User] = (),
        gateway: Optional[SimulatedGateway] = None,
    ):
        self._lock = threading.Lock()
        self._users: dict[str, User] = {u.id: u for u in users}
        self._password_hashes: dict[str, str] = {}
        self._sessions: dict[str, str] = {}
        self.gateway = gateway or SimulatedGateway("auth")

    def _find_by_email(self, email: str) -> Optional[User]:
        email = email.strip().lower()
        return next((u for u in self._users.values() if u.email.lower() == email), None)

    def get_user(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    async def login(self, email: str, password: str) -> Result:
        """Check credentials after the simulated round-trip."""

        def check() -> Result:
            user = self._find_by_email(email)
            if user is None or not password:
                return Err(reason=INVALID_CREDENTIALS, code="rejected", retryable=False)
            stored = self._password_hashes.get(user.id)
            if stored is not None and stored != hash_token(password):
                return Err(reason=INVALID_CREDENTIALS, code="rejected", retryable=False)
            logger.info(f"[AUTH] Login succeeded for {user.id}")
            return Ok(user)

        return await self.gateway.call(check)

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        phone: Optional[str] = None,
    ) -> Result:
        """Create a guest account after the simulated round-trip."""

        def create() -> Result:
            with self._lock:
                if self._find_by_email(email) is not None:
                    return Err(reason=EMAIL_TAKEN, code="rejected", retryable=False)
                user = User(
                    id=f"user-{uuid4().hex[:12]}",
                    name=name,
                    email=email,
                    phone=phone,
                    is_host=False,
                    joined_date=date.today(),
                )
                self._users[user.id] = user
                self._password_hashes[user.id] = hash_token(password)
            logger.info(f"[AUTH] Registered {user.id} ({user.email})")
            return Ok(user)

        return await self.gateway.call(create)

    def open_session(self, user: User) -> str:
        """Issue a bearer token for a user."""
        token = secrets.token_urlsafe(32)
        with self._lock:
            self._sessions[hash_token(token)] = user.id
        return token

    def resolve(self, token: str) -> Optional[User]:
        """User behind a bearer token, if the session is still open."""
        user_id = self._sessions.get(hash_token(token))
        if user_id is None:
            return None
        return self._users.get(user_id)

    def logout(self, token: str) -> None:
        with self._lock:
            self._sessions.pop(hash_token(token), None)

    def update_profile(self, user_id: str, updates: dict[str, Any]) -> Result:
        """Apply a partial update.

        Taking an email that belongs to another account is rejected, as in
        ``register``.
        """
        changes = {
            k: v for k, v in updates.items()
            if k in EDITABLE_FIELDS and not (v is None and k in REQUIRED_FIELDS)
        }
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return Err(reason=USER_NOT_FOUND, code="rejected", retryable=False)
            if "email" in changes:
                owner = self._find_by_email(changes["email"])
                if owner is not None and owner.id != user_id:
                    return Err(reason=EMAIL_TAKEN, code="rejected", retryable=False)
            updated = User.model_validate({**user.model_dump(), **changes})
            self._users[user_id] = updated
        logger.info(f"[AUTH] Profile updated for {user_id}: {sorted(changes)}")
        return Ok(updated)
