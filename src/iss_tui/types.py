"""Small value types passed between the tracker's components."""

from __future__ import annotations

from typing import NamedTuple


class Coordinates(NamedTuple):
    latitude: float
    longitude: float


class Viewport(NamedTuple):
    """Terminal size in character cells; zero means not known yet."""

    width: int = 0
    height: int = 0


__all__ = ["Coordinates", "Viewport"]
