"""Property (listing) model."""

from pydantic import BaseModel, ConfigDict, Field

from stayhub.models.enums import Amenity


class Property(BaseModel):
    """A bookable short-term rental listing.

    Loaded once into the catalog and never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title: str
    location: str
    price: float = Field(..., gt=0, description="Nightly price")
    rating: float = Field(..., ge=0.0, le=5.0)
    reviews: int = Field(..., ge=0)
    images: tuple[str, ...] = Field(..., min_length=1)
    amenities: frozenset[Amenity] = frozenset()
    bedrooms: int = Field(..., ge=1)
    bathrooms: int = Field(..., ge=1)
    max_guests: int = Field(..., ge=1)
    description: str = ""
    availability: bool = True

    # Host
    host_id: str
    host_name: str
