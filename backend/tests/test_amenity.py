"""Amenity display lookup tests."""

from stayhub.models.amenity import FALLBACK_ICON, amenity_display
from stayhub.models.enums import Amenity


def test_known_amenities():
    assert amenity_display(Amenity.WIFI).label == "WiFi"
    assert amenity_display("coffee").icon == "coffee"


def test_unknown_amenity_falls_back():
    display = amenity_display("hot_tub")
    assert display.label == "Hot Tub"
    assert display.icon == FALLBACK_ICON
