"""Audit logging service."""

import logging
import threading
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, Field

from stayhub.models.enums import AuditAction

logger = logging.getLogger(__name__)


class AuditEntry(BaseModel):
    """One recorded action."""

    action: AuditAction
    resource_type: str
    resource_id: str
    user_id: Optional[str] = None
    details: dict[str, Any] = Field(default_factory=dict)
    ip_address: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class AuditService:
    """Service for creating audit log entries."""

    def __init__(self):
        self._lock = threading.Lock()
        self._entries: list[AuditEntry] = []

    @property
    def entries(self) -> list[AuditEntry]:
        with self._lock:
            return list(self._entries)

    def log(
        self,
        action: AuditAction,
        resource_type: str,
        resource_id: str,
        user_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        ip_address: Optional[str] = None,
    ) -> AuditEntry:
        """Create an audit log entry."""
        entry = AuditEntry(
            action=action,
            resource_type=resource_type,
            resource_id=resource_id,
            user_id=user_id,
            details=details or {},
            ip_address=ip_address,
        )
        with self._lock:
            self._entries.append(entry)
        logger.info(f"[AUDIT] {action.value} {resource_type}={resource_id} user={user_id}")
        return entry

    def for_resource(self, resource_type: str, resource_id: str) -> list[AuditEntry]:
        return [
            e for e in self.entries
            if e.resource_type == resource_type and e.resource_id == resource_id
        ]

    def log_booking_created(
        self,
        booking_id: str,
        user_id: str,
        apartment_id: str,
        total_price: float,
        ip_address: Optional[str] = None,
    ) -> AuditEntry:
        """Log booking created."""
        return self.log(
            action=AuditAction.BOOKING_CREATED,
            resource_type="booking",
            resource_id=booking_id,
            user_id=user_id,
            details={"apartment_id": apartment_id, "total_price": total_price},
            ip_address=ip_address,
        )

    def log_booking_cancelled(
        self,
        booking_id: str,
        user_id: str,
        ip_address: Optional[str] = None,
    ) -> AuditEntry:
        """Log booking cancellation request."""
        return self.log(
            action=AuditAction.BOOKING_CANCELLED,
            resource_type="booking",
            resource_id=booking_id,
            user_id=user_id,
            ip_address=ip_address,
        )

    def log_user_event(
        self,
        action: AuditAction,
        user_id: str,
        email: Optional[str] = None,
        ip_address: Optional[str] = None,
    ) -> AuditEntry:
        """Log an account event (login, registration, logout, profile change)."""
        return self.log(
            action=action,
            resource_type="user",
            resource_id=user_id,
            user_id=user_id,
            details={"email": email} if email else {},
            ip_address=ip_address,
        )
