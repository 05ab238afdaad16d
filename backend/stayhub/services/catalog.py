"""Catalog store - the set of listed properties."""

import logging
import threading
from typing import Iterable, Optional, Union

from stayhub.models.enums import SortKey
from stayhub.models.property import Property
from stayhub.services.search import search, sort_properties

logger = logging.getLogger(__name__)


class CatalogStore:
    """
    Holds listings for the lifetime of the process.

    Listings are loaded once and never changed; every read hands out a new
    list so callers cannot reorder or extend the catalog.
    """

    def __init__(self, properties: Iterable[Property] = ()):
        self._lock = threading.Lock()
        self._properties: list[Property] = []
        self._index: dict[str, Property] = {}
        for prop in properties:
            self.add(prop)

    def add(self, prop: Property) -> Property:
        """Load a listing. Ids must be unique."""
        with self._lock:
            if prop.id in self._index:
                raise ValueError(f"Duplicate property id: {prop.id}")
            self._properties.append(prop)
            self._index[prop.id] = prop
        logger.debug(f"[CATALOG] Loaded property {prop.id} ({prop.title})")
        return prop

    @property
    def apartments(self) -> list[Property]:
        with self._lock:
            return list(self._properties)

    def __len__(self) -> int:
        with self._lock:
            return len(self._properties)

    def get_apartment_by_id(self, apartment_id: str) -> Optional[Property]:
        """Look up a listing; None when unknown."""
        with self._lock:
            return self._index.get(apartment_id)

    def filter_by_host(self, host_id: str) -> list[Property]:
        """Listings owned by a host, in catalog order."""
        return [p for p in self.apartments if p.host_id == host_id]

    def search(
        self,
        query: str = "",
        location: Optional[str] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        sort: Union[SortKey, str] = SortKey.RELEVANCE,
    ) -> list[Property]:
        """Bookable listings matching the query, ordered by ``sort``."""
        results = search(self.apartments, query, location, min_price, max_price)
        return sort_properties(results, sort)
