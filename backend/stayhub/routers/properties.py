"""Properties router - catalog browsing, search and favorites."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from stayhub.core.security import AuthenticatedUser, get_current_user
from stayhub.core.state import get_audit, get_catalog, get_favorites
from stayhub.models.amenity import amenity_display
from stayhub.models.enums import Amenity, AuditAction, SortKey
from stayhub.models.property import Property
from stayhub.schemas.property import AmenityInfo, FavoriteToggleResponse, SearchResponse
from stayhub.services.audit import AuditService
from stayhub.services.catalog import CatalogStore
from stayhub.services.favorites import FavoritesStore

router = APIRouter(prefix="/properties", tags=["properties"])


@router.get("", response_model=List[Property])
def list_properties(catalog: CatalogStore = Depends(get_catalog)):
    """Every listing in catalog order, bookable or not."""
    return catalog.apartments


@router.get("/search", response_model=SearchResponse)
def search_properties(
    q: str = "",
    location: Optional[str] = None,
    min_price: Optional[float] = Query(None, ge=0),
    max_price: Optional[float] = Query(None, ge=0),
    sort: SortKey = SortKey.RELEVANCE,
    catalog: CatalogStore = Depends(get_catalog),
):
    """Search bookable listings by text, location and price range."""
    results = catalog.search(q, location, min_price, max_price, sort)
    return SearchResponse(count=len(results), results=results)


@router.get("/amenities", response_model=List[AmenityInfo])
def list_amenities():
    """Display metadata for each known amenity."""
    return [AmenityInfo(amenity=a, display=amenity_display(a)) for a in Amenity]


@router.get("/favorites/mine", response_model=List[Property])
def my_favorites(
    current_user: AuthenticatedUser = Depends(get_current_user),
    catalog: CatalogStore = Depends(get_catalog),
    favorites: FavoritesStore = Depends(get_favorites),
):
    """The current user's saved listings, in the order saved."""
    saved = (catalog.get_apartment_by_id(pid) for pid in favorites.list_for(current_user.id))
    return [p for p in saved if p is not None]


@router.get("/{apartment_id}", response_model=Property)
def get_property(apartment_id: str, catalog: CatalogStore = Depends(get_catalog)):
    """Get a listing by ID."""
    prop = catalog.get_apartment_by_id(apartment_id)
    if not prop:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Property not found")
    return prop


@router.post("/{apartment_id}/favorite", response_model=FavoriteToggleResponse)
def toggle_favorite(
    apartment_id: str,
    current_user: AuthenticatedUser = Depends(get_current_user),
    catalog: CatalogStore = Depends(get_catalog),
    favorites: FavoritesStore = Depends(get_favorites),
    audit: AuditService = Depends(get_audit),
):
    """Save or unsave a listing."""
    if not catalog.get_apartment_by_id(apartment_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Property not found")

    favorited = favorites.toggle(current_user.id, apartment_id)
    audit.log(
        action=AuditAction.FAVORITE_TOGGLED,
        resource_type="property",
        resource_id=apartment_id,
        user_id=current_user.id,
        details={"favorited": favorited},
    )
    return FavoriteToggleResponse(apartment_id=apartment_id, favorited=favorited)
