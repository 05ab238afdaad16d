"""Amenity display metadata."""

from typing import Union

from pydantic import BaseModel, ConfigDict

from stayhub.models.enums import Amenity


class AmenityDisplay(BaseModel):
    """How an amenity is presented to guests."""

    model_config = ConfigDict(frozen=True)

    label: str
    icon: str


AMENITY_DISPLAY: dict[Amenity, AmenityDisplay] = {
    Amenity.WIFI: AmenityDisplay(label="WiFi", icon="wifi"),
    Amenity.PARKING: AmenityDisplay(label="Parking", icon="car"),
    Amenity.COFFEE: AmenityDisplay(label="Coffee", icon="coffee"),
}

FALLBACK_ICON = "sparkles"


def amenity_display(amenity: Union[Amenity, str]) -> AmenityDisplay:
    """Look up display metadata, falling back to a generic entry for unknown values."""
    try:
        return AMENITY_DISPLAY[Amenity(amenity)]
    except ValueError:
        label = str(amenity).replace("_", " ").replace("-", " ").title()
        return AmenityDisplay(label=label, icon=FALLBACK_ICON)
