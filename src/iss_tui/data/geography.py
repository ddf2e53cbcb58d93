"""Turn coordinates into the name of whatever the station is flying over."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from iss_tui.data.nominatim_client import GeocodeResult
from iss_tui.errors import GeocodeError

LOGGER = logging.getLogger(__name__)

OCEAN_FALLBACK = "Ocean"

# Nominatim zoom levels: 3 answers with a country, 2 with broad areas such as oceans.
COUNTRY_ZOOM = 3
COARSE_ZOOM = 2

WATER_TYPES = frozenset({"ocean", "sea", "bay", "strait"})
WATER_WORDS = ("ocean", "sea", "gulf", "strait", "bay")


class ReverseGeocoder(Protocol):
    def reverse(self, lat: float, lon: float, zoom: int) -> GeocodeResult:
        ...


def water_body_name(result: GeocodeResult) -> Optional[str]:
    """
    Returns the name of the water body described by ``result``, if it is one.

    Nominatim classifies open water inconsistently, so both the type fields
    and the wording of the name are checked.
    """
    name = result.name or result.display_name.split(",")[0].strip()
    if not name:
        return None

    if result.addresstype.lower() == "ocean":
        return name
    if result.type.lower() in WATER_TYPES or result.category.lower() == "natural":
        return name

    lowered = name.lower()
    if any(word in lowered for word in WATER_WORDS):
        return name
    return None


def resolve_place(geocoder: ReverseGeocoder, lat: float, lon: float) -> str:
    """
    Resolves a place name, raising ``GeocodeError`` only if the first lookup fails.

    The caller can then keep its previous label. Any later failure degrades
    to ``OCEAN_FALLBACK`` like an unclassifiable answer does.
    """
    first = geocoder.reverse(lat, lon, COUNTRY_ZOOM)

    if not first.unresolvable:
        if first.country:
            return first.country
        name = water_body_name(first)
        if name:
            return name

    try:
        coarse = geocoder.reverse(lat, lon, COARSE_ZOOM)
    except GeocodeError as exc:
        LOGGER.debug("Coarse reverse geocode failed for %.4f, %.4f: %s", lat, lon, exc)
        return OCEAN_FALLBACK

    return water_body_name(coarse) or OCEAN_FALLBACK


def resolve(geocoder: ReverseGeocoder, lat: float, lon: float) -> str:
    """Returns a place name for the coordinates, never raising."""
    try:
        return resolve_place(geocoder, lat, lon)
    except GeocodeError as exc:
        LOGGER.warning("Reverse geocode failed for %.4f, %.4f: %s", lat, lon, exc)
        return OCEAN_FALLBACK


__all__ = ["OCEAN_FALLBACK", "ReverseGeocoder", "resolve", "resolve_place", "water_body_name"]
