"""Per-user favorite listings."""

import threading


class FavoritesStore:
    """Remembers which listings each user has saved, in the order saved."""

    def __init__(self):
        self._lock = threading.Lock()
        self._favorites: dict[str, list[str]] = {}

    def toggle(self, user_id: str, apartment_id: str) -> bool:
        """Add or remove a favorite. Returns True when it is now a favorite."""
        with self._lock:
            saved = self._favorites.setdefault(user_id, [])
            if apartment_id in saved:
                saved.remove(apartment_id)
                return False
            saved.append(apartment_id)
            return True

    def list_for(self, user_id: str) -> list[str]:
        with self._lock:
            return list(self._favorites.get(user_id, []))
