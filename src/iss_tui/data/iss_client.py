"""Minimal ISS telemetry client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests

from iss_tui.config import Settings
from iss_tui.errors import TelemetryError


@dataclass(frozen=True)
class ISSFix:
    latitude: float
    longitude: float
    timestamp: float


class ISSClient:
    """Fetches the latest ISS position from a single API call."""

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None) -> None:
        self._settings = settings
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": settings.user_agent})

    def get_fix(self) -> ISSFix:
        try:
            response = self._session.get(self._settings.iss_api_url, timeout=self._settings.http_timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as exc:
            raise TelemetryError(f"iss api request failed: {exc}") from exc
        except ValueError as exc:
            raise TelemetryError(f"iss api returned invalid json: {exc}") from exc

        return _parse_fix(data)


def _parse_fix(data: object) -> ISSFix:
    if not isinstance(data, dict):
        raise TelemetryError(f"unexpected iss api payload: {data!r}")

    # open-notify wraps the position and reports a status message
    if "iss_position" in data:
        message = str(data.get("message", ""))
        if message.strip().lower() != "success":
            raise TelemetryError(f"open-notify message: {message!r}")
        position = data["iss_position"]
        raw_lat = position.get("latitude") if isinstance(position, dict) else None
        raw_lon = position.get("longitude") if isinstance(position, dict) else None
    else:
        raw_lat = data.get("latitude")
        raw_lon = data.get("longitude")

    lat = _coerce_coordinate("latitude", raw_lat)
    lon = _coerce_coordinate("longitude", raw_lon)
    timestamp = _coerce_optional(data.get("timestamp")) or 0.0
    return ISSFix(latitude=lat, longitude=lon, timestamp=timestamp)


def _coerce_coordinate(name: str, value: object) -> float:
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise TelemetryError(f"invalid {name} {value!r}") from exc


def _coerce_optional(value: object) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None


__all__ = ["ISSClient", "ISSFix"]
