"""Demo catalog and user directory loaded at startup."""

from datetime import date

from stayhub.models.property import Property
from stayhub.models.user import User

_IMG = "https://images.unsplash.com/photo-{}?w=600"

_LOFT = _IMG.format("1522708323590-d24dbb6b0267")
_STUDIO = _IMG.format("1560448204-e02f11c3d0e2")
_PENTHOUSE = _IMG.format("1502672260266-1c1ef2d93688")
_GARDEN = _IMG.format("1493809842364-78817add7ffb")
_FLAT = _IMG.format("1505693416388-ac5ce068fe85")
_STUDIO_ART = _IMG.format("1484101403633-562f891dc89a")

SEED_PROPERTIES = [
    {
        "id": "1",
        "title": "Modern Downtown Loft",
        "location": "Manhattan, New York",
        "price": 180,
        "rating": 4.8,
        "reviews": 124,
        "images": [_LOFT, _STUDIO, _PENTHOUSE, _GARDEN],
        "amenities": ["wifi", "parking", "coffee"],
        "availability": True,
        "bedrooms": 2,
        "bathrooms": 2,
        "max_guests": 4,
        "description": (
            "A stunning modern loft in the heart of Manhattan with floor-to-ceiling windows, "
            "exposed brick walls, and a fully equipped kitchen."
        ),
        "host_id": "host1",
        "host_name": "Sarah Johnson",
    },
    {
        "id": "2",
        "title": "Cozy Studio in Historic District",
        "location": "Brooklyn, New York",
        "price": 120,
        "rating": 4.6,
        "reviews": 89,
        "images": [_STUDIO, _LOFT, _PENTHOUSE, _GARDEN],
        "amenities": ["wifi", "coffee"],
        "availability": True,
        "bedrooms": 1,
        "bathrooms": 1,
        "max_guests": 2,
        "description": (
            "Charming studio apartment in Brooklyn's historic district with original hardwood "
            "floors and vintage fixtures. Walking distance to the subway."
        ),
        "host_id": "host2",
        "host_name": "Michael Chen",
    },
    {
        "id": "3",
        "title": "Luxury Penthouse Suite",
        "location": "Midtown, New York",
        "price": 350,
        "rating": 4.9,
        "reviews": 203,
        "images": [_PENTHOUSE, _LOFT, _STUDIO, _GARDEN],
        "amenities": ["wifi", "parking", "coffee"],
        "availability": False,
        "bedrooms": 3,
        "bathrooms": 3,
        "max_guests": 6,
        "description": (
            "Penthouse with panoramic city views, a private terrace, premium furnishings "
            "and concierge service."
        ),
        "host_id": "host3",
        "host_name": "Emma Rodriguez",
    },
    {
        "id": "4",
        "title": "Charming Garden Apartment",
        "location": "Queens, New York",
        "price": 95,
        "rating": 4.4,
        "reviews": 67,
        "images": [_GARDEN, _LOFT, _STUDIO, _PENTHOUSE],
        "amenities": ["wifi", "parking"],
        "availability": True,
        "bedrooms": 2,
        "bathrooms": 1,
        "max_guests": 4,
        "description": (
            "Peaceful garden apartment with private outdoor space and natural light "
            "in a quiet neighborhood."
        ),
        "host_id": "host4",
        "host_name": "David Park",
    },
    {
        "id": "5",
        "title": "Sleek Business District Flat",
        "location": "Financial District, New York",
        "price": 200,
        "rating": 4.7,
        "reviews": 156,
        "images": [_FLAT, _LOFT, _STUDIO, _PENTHOUSE],
        "amenities": ["wifi", "coffee"],
        "availability": True,
        "bedrooms": 1,
        "bathrooms": 1,
        "max_guests": 2,
        "description": (
            "Contemporary apartment for business travelers, steps from Wall Street, "
            "with high-speed internet."
        ),
        "host_id": "host5",
        "host_name": "Lisa Thompson",
    },
    {
        "id": "6",
        "title": "Artist's Creative Space",
        "location": "Williamsburg, Brooklyn",
        "price": 140,
        "rating": 4.5,
        "reviews": 92,
        "images": [_STUDIO_ART, _LOFT, _STUDIO, _PENTHOUSE],
        "amenities": ["wifi"],
        "availability": True,
        "bedrooms": 1,
        "bathrooms": 1,
        "max_guests": 3,
        "description": (
            "Artist's loft in Williamsburg close to galleries, restaurants and nightlife."
        ),
        "host_id": "host6",
        "host_name": "Alex Rivera",
    },
]

SEED_USERS = [
    {
        "id": "user1",
        "name": "John Doe",
        "email": "john@example.com",
        "phone": "+1 (555) 123-4567",
        "avatar": "https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?w=150",
        "is_host": False,
        "joined_date": date(2024, 1, 15),
    },
    {
        "id": "host1",
        "name": "Sarah Johnson",
        "email": "sarah@example.com",
        "phone": "+1 (555) 987-6543",
        "avatar": "https://images.unsplash.com/photo-1494790108755-2616b332c1b1?w=150",
        "is_host": True,
        "joined_date": date(2023, 8, 20),
    },
]


def load_properties() -> list[Property]:
    """Validate the demo listings into Property records."""
    return [Property.model_validate(data) for data in SEED_PROPERTIES]


def load_users() -> list[User]:
    """Validate the demo accounts into User records."""
    return [User.model_validate(data) for data in SEED_USERS]
