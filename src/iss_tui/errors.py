"""Exception types shared across the tracker."""

from __future__ import annotations


class IssTuiError(RuntimeError):
    """Base class for recoverable tracker failures."""


class TelemetryError(IssTuiError):
    """The position source could not be reached or returned garbage."""


class GeocodeError(IssTuiError):
    """A reverse-geocoding request failed at the transport or decode level."""


class MapRenderError(IssTuiError):
    """The ASCII map could not be rendered for the requested size."""


__all__ = ["IssTuiError", "TelemetryError", "GeocodeError", "MapRenderError"]
