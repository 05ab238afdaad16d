"""Property schemas."""

from stayhub.models.amenity import AmenityDisplay
from stayhub.models.enums import Amenity
from stayhub.models.property import Property
from stayhub.schemas.base import BaseSchema


class SearchResponse(BaseSchema):
    """Search results in display order."""

    count: int
    results: list[Property]


class AmenityInfo(BaseSchema):
    amenity: Amenity
    display: AmenityDisplay


class FavoriteToggleResponse(BaseSchema):
    apartment_id: str
    favorited: bool
