"""The single mutable record behind the display."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from iss_tui.types import Coordinates, Viewport

RESOLVING = "Resolving..."
MAP_UNAVAILABLE = "Map unavailable."


@dataclass
class State:
    """
    Everything the screen shows, owned and mutated by the reactor only.

    ``current_frame`` always holds the last frame that rendered successfully.
    ``active_generation`` identifies the animation run whose frames are
    accepted; anything tagged with another value is stale.
    """

    place_name: str = RESOLVING
    last_coordinates: Optional[Coordinates] = None
    has_coordinates: bool = False
    last_error: Optional[str] = None
    current_frame: str = MAP_UNAVAILABLE
    viewport: Viewport = field(default_factory=Viewport)
    active_generation: int = 0
    running: bool = True


__all__ = ["MAP_UNAVAILABLE", "RESOLVING", "State"]
