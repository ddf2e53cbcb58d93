"""Straightforward Nominatim reverse-geocoding client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from iss_tui.config import Settings
from iss_tui.errors import GeocodeError

UNABLE_TO_GEOCODE = "unable to geocode"


@dataclass(frozen=True)
class GeocodeResult:
    """The subset of a Nominatim ``jsonv2`` reverse response we care about."""

    country: str = ""
    name: str = ""
    display_name: str = ""
    type: str = ""
    category: str = ""
    addresstype: str = ""
    error: str = ""

    @property
    def unresolvable(self) -> bool:
        return self.error.strip().lower() == UNABLE_TO_GEOCODE

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "GeocodeResult":
        address = payload.get("address")
        country = address.get("country", "") if isinstance(address, dict) else ""
        return cls(
            country=_text(country),
            name=_text(payload.get("name")),
            display_name=_text(payload.get("display_name")),
            type=_text(payload.get("type")),
            category=_text(payload.get("category")),
            addresstype=_text(payload.get("addresstype")),
            error=_text(payload.get("error")),
        )


class NominatimClient:
    """Looks up what lies under a coordinate at a given zoom (precision tier)."""

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None) -> None:
        self._settings = settings
        self._session = session or requests.Session()

    def reverse(self, lat: float, lon: float, zoom: int) -> GeocodeResult:
        try:
            response = self._session.get(
                self._settings.geocoder_url,
                params=self._build_params(lat, lon, zoom),
                headers={"User-Agent": self._settings.user_agent, "Accept-Language": "en"},
                timeout=self._settings.http_timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            raise GeocodeError(f"nominatim request failed: {exc}") from exc
        except ValueError as exc:
            raise GeocodeError(f"nominatim returned invalid json: {exc}") from exc

        if not isinstance(payload, dict):
            raise GeocodeError(f"unexpected nominatim payload: {payload!r}")
        return GeocodeResult.from_payload(payload)

    @staticmethod
    def _build_params(lat: float, lon: float, zoom: int) -> Dict[str, str]:
        return {
            "format": "jsonv2",
            "lat": repr(float(lat)),
            "lon": repr(float(lon)),
            "zoom": str(zoom),
            "addressdetails": "1",
            "accept-language": "en",
        }


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


__all__ = ["GeocodeResult", "NominatimClient", "UNABLE_TO_GEOCODE"]
