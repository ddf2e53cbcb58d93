"""Messages background work sends to the reactor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from iss_tui.types import Coordinates


@dataclass(frozen=True)
class ViewportChanged:
    width: int
    height: int


@dataclass(frozen=True)
class TelemetryTick:
    pass


@dataclass(frozen=True)
class TelemetryResult:
    """A completed poll. ``error`` is set when only the place lookup failed."""

    coordinates: Coordinates
    place_name: str
    error: Optional[str] = None


@dataclass(frozen=True)
class TelemetryFailed:
    error: str


@dataclass(frozen=True)
class FrameEvent:
    """One frame (or the failure that ended the run) from animation run ``generation``."""

    generation: int
    frame: str = ""
    error: Optional[str] = None


@dataclass(frozen=True)
class StreamClosed:
    generation: int


@dataclass(frozen=True)
class Quit:
    pass


Event = Union[ViewportChanged, TelemetryTick, TelemetryResult, TelemetryFailed, FrameEvent, StreamClosed, Quit]


__all__ = [
    "Event",
    "FrameEvent",
    "Quit",
    "StreamClosed",
    "TelemetryFailed",
    "TelemetryResult",
    "TelemetryTick",
    "ViewportChanged",
]
