"""API Routers for StayHub."""

from stayhub.routers.auth import router as auth_router
from stayhub.routers.properties import router as properties_router
from stayhub.routers.bookings import router as bookings_router
from stayhub.routers.dashboard import router as dashboard_router

__all__ = [
    "auth_router",
    "properties_router",
    "bookings_router",
    "dashboard_router",
]
