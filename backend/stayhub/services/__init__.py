"""Services for StayHub."""

from stayhub.services.audit import AuditService
from stayhub.services.auth import AuthService
from stayhub.services.catalog import CatalogStore
from stayhub.services.favorites import FavoritesStore
from stayhub.services.ledger import BookingLedger
from stayhub.services.pricing import Quote, compute_quote
from stayhub.services.processing import Err, Ok, SimulatedGateway
from stayhub.services.search import search, sort_properties

__all__ = [
    "AuditService",
    "AuthService",
    "CatalogStore",
    "FavoritesStore",
    "BookingLedger",
    "Quote",
    "compute_quote",
    "Err",
    "Ok",
    "SimulatedGateway",
    "search",
    "sort_properties",
]
