"""Compose the map and the telemetry box into the text shown on screen."""

from __future__ import annotations

from typing import List, Optional

from iss_tui.app.state import State
from iss_tui.theme import StatusStyle


def format_latitude(lat: float) -> str:
    hemisphere = "S" if lat < 0 else "N"
    return f"{abs(lat):.4f} {hemisphere}"


def format_longitude(lon: float) -> str:
    hemisphere = "W" if lon < 0 else "E"
    return f"{abs(lon):.4f} {hemisphere}"


def telemetry_lines(state: State, style: Optional[StatusStyle] = None) -> List[str]:
    style = style or StatusStyle()
    lines = [f"{style.title}: {state.place_name}"]
    if state.has_coordinates and state.last_coordinates is not None:
        lines.append("Latitude:  " + format_latitude(state.last_coordinates.latitude))
        lines.append("Longitude: " + format_longitude(state.last_coordinates.longitude))
    else:
        lines.append(f"Coords: {style.pending}")
    return lines


def telemetry_box(lines: List[str]) -> str:
    content_width = max((len(line) for line in lines), default=0)
    border = "+" + "-" * (content_width + 2) + "+"
    body = [f"| {line.ljust(content_width)} |" for line in lines]
    return "\n".join([border, *body, border])


def center_block(block: str, width: int) -> str:
    """Left-pad every line so the widest one sits in the middle of ``width`` columns."""
    if width <= 0:
        return block

    lines = block.split("\n")
    widest = max(len(line) for line in lines)
    if widest >= width:
        return block

    pad = " " * ((width - widest) // 2)
    return "\n".join(pad + line for line in lines)


def project(state: State, style: Optional[StatusStyle] = None) -> str:
    """Render the whole screen for ``state``. Pure: no I/O, no mutation."""
    style = style or StatusStyle()
    width = state.viewport.width

    map_view = center_block(state.current_frame, width)
    telemetry = center_block(telemetry_box(telemetry_lines(state, style)), width)

    advisory = ""
    if style.show_errors and state.last_error:
        advisory = center_block(f"! {state.last_error}", width)

    return "\n" + map_view + "\n\n" + telemetry + "\n" + advisory + "\n"


__all__ = [
    "center_block",
    "format_latitude",
    "format_longitude",
    "project",
    "telemetry_box",
    "telemetry_lines",
]
