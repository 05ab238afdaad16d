"""Domain models for StayHub."""

from stayhub.models.amenity import AmenityDisplay, amenity_display
from stayhub.models.booking import Booking, BookingDraft
from stayhub.models.property import Property
from stayhub.models.user import User

__all__ = [
    "AmenityDisplay",
    "amenity_display",
    "Booking",
    "BookingDraft",
    "Property",
    "User",
]
