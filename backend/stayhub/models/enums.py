"""Enumeration types for the StayHub domain model."""

from enum import Enum


class BookingStatus(str, Enum):
    """Status of a booking."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class Amenity(str, Enum):
    """Amenities a listing can advertise."""
    WIFI = "wifi"
    PARKING = "parking"
    COFFEE = "coffee"


class SortKey(str, Enum):
    """Ordering applied to search results."""
    RELEVANCE = "relevance"    # Catalog order
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    RATING = "rating"


class AuditAction(str, Enum):
    """Actions tracked in audit log."""
    USER_REGISTERED = "user_registered"
    USER_LOGGED_IN = "user_logged_in"
    USER_LOGGED_OUT = "user_logged_out"
    PROFILE_UPDATED = "profile_updated"
    BOOKING_CREATED = "booking_created"
    BOOKING_CANCELLED = "booking_cancelled"
    FAVORITE_TOGGLED = "favorite_toggled"
