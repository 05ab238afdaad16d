"""Catalog search and result ordering."""

from typing import Iterable, Optional, Union

from stayhub.core.exceptions import StayHubError
from stayhub.models.enums import SortKey
from stayhub.models.property import Property


def matches(
    prop: Property,
    query: str = "",
    location: Optional[str] = None,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
) -> bool:
    """Check one listing against a search. Unavailable listings never match."""
    if not prop.availability:
        return False

    needle = (query or "").lower()
    if needle and needle not in prop.title.lower() and needle not in prop.location.lower():
        return False

    if location and location.lower() not in prop.location.lower():
        return False

    if min_price is not None and prop.price < min_price:
        return False
    if max_price is not None and prop.price > max_price:
        return False

    return True


def search(
    catalog: Iterable[Property],
    query: str = "",
    location: Optional[str] = None,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
) -> list[Property]:
    """Filter the catalog, keeping its original order.

    Returns a new list; the catalog itself is left untouched.
    """
    return [
        prop for prop in catalog
        if matches(prop, query, location, min_price, max_price)
    ]


def sort_properties(
    results: Iterable[Property],
    key: Union[SortKey, str] = SortKey.RELEVANCE,
) -> list[Property]:
    """Order search results. All orderings are stable."""
    try:
        key = SortKey(key)
    except ValueError:
        raise StayHubError(f"Unknown sort key: {key!r}")

    results = list(results)
    if key == SortKey.PRICE_LOW:
        return sorted(results, key=lambda p: p.price)
    if key == SortKey.PRICE_HIGH:
        return sorted(results, key=lambda p: p.price, reverse=True)
    if key == SortKey.RATING:
        return sorted(results, key=lambda p: p.rating, reverse=True)
    return results
