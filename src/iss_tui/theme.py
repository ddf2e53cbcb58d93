"""Visual theme constants for the ISS terminal tracker.

Edit ``theme.toml`` to control the map glyphs, the marker shape and the
terminal colours without touching the rendering code. Any field left out of
the file keeps its built-in default.

Example ``theme.toml``::

    [map]
    land_glyph = "@"
    color = "cyan"

    [marker]
    center = "*"
    blink = false

Usage:
    from iss_tui.theme import load_theme
    theme = load_theme()
    width = theme.map.default_width
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional, Union, get_args, get_origin, get_type_hints

# Colour names understood by the terminal view (curses.COLOR_<NAME>)
COLOR_NAMES = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")


# ── Map ───────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class MapStyle:
    """Controls the equirectangular ASCII world map."""

    # Glyphs by land coverage of a character cell
    land_glyph: str = "#"                  # Mostly land
    coast_glyph: str = "."                 # Some land
    water_glyph: str = " "                 # No land

    # Frame
    frame: bool = True
    border_corner: str = "+"
    border_horizontal: str = "-"
    border_vertical: str = "|"
    margin_rows: int = 1                   # Blank rows above and below the map, inside the frame

    # Sampling
    supersample: int = 3                   # Samples per cell edge (3 = 9 samples per character)
    char_aspect: float = 2.0               # Character cell height / width

    # Sizing, in characters
    default_width: int = 60                # Used until the terminal size is known
    min_width: int = 30
    max_width: int = 120

    color: str = "green"


# ── Marker ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class MarkerStyle:
    """ISS position marker: a cross centred on the station."""

    center: str = "X"
    horizontal: str = "-"
    vertical: str = "|"
    arm_x: int = 4                         # Arm length left/right of the centre
    arm_y: int = 2                         # Arm length above/below the centre
    blink: bool = True                     # Alternate marker on/off between frames
    color: str = "blue"


# ── Status box ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class StatusStyle:
    """The telemetry box under the map."""

    title: str = "ISS over"
    pending: str = "Resolving..."
    show_errors: bool = True               # Show the advisory error line
    error_color: str = "yellow"


# ── Top-level Theme ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class Theme:
    """Top-level theme, the single entry point for all visual styling."""

    map: MapStyle = field(default_factory=MapStyle)
    marker: MarkerStyle = field(default_factory=MarkerStyle)
    status: StatusStyle = field(default_factory=StatusStyle)


# ── TOML Loader ──────────────────────────────────────────────────────────

_logger = logging.getLogger(__name__)


def _get_nested_type(cls: type, field_name: str):
    """Return the dataclass type for a nested field, or None."""
    try:
        hints = get_type_hints(cls)
    except Exception:
        return None
    hint = hints.get(field_name)
    if hint is None:
        return None
    # Unwrap Optional[X] → X
    if get_origin(hint) is Union:
        args = [a for a in get_args(hint) if a is not type(None)]
        if len(args) == 1:
            hint = args[0]
    if isinstance(hint, type) and hasattr(hint, '__dataclass_fields__'):
        return hint
    return None


def _build(cls: type, data: dict, base=None):
    """Build a frozen dataclass by merging TOML *data* over a *base* instance.

    Fields present in *data* override the base; missing fields keep the base
    value. Nested tables are recursed into using the base's value for that
    field.
    """
    if base is None:
        base = cls()
    kwargs = {}
    known = {f.name for f in fields(cls)}
    for f in fields(cls):
        if f.name in data:
            val = data[f.name]
            if isinstance(val, dict):
                nested_cls = _get_nested_type(cls, f.name)
                if nested_cls is not None:
                    kwargs[f.name] = _build(nested_cls, val, base=getattr(base, f.name))
                else:
                    kwargs[f.name] = val
            else:
                kwargs[f.name] = val
        else:
            kwargs[f.name] = getattr(base, f.name)
    for key in data:
        if key not in known:
            _logger.warning("Unknown theme key '%s' in [%s], skipping", key, cls.__name__)
    return cls(**kwargs)


def _validate(theme: Theme) -> Theme:
    glyphs = {
        "map.land_glyph": theme.map.land_glyph,
        "map.coast_glyph": theme.map.coast_glyph,
        "map.water_glyph": theme.map.water_glyph,
        "marker.center": theme.marker.center,
        "marker.horizontal": theme.marker.horizontal,
        "marker.vertical": theme.marker.vertical,
    }
    for name, glyph in glyphs.items():
        if not isinstance(glyph, str) or len(glyph) != 1:
            raise ValueError(f"{name} must be a single character, got {glyph!r}")
    if theme.map.supersample < 1:
        raise ValueError("map.supersample must be at least 1")
    if theme.map.char_aspect <= 0:
        raise ValueError("map.char_aspect must be positive")
    if not theme.map.min_width <= theme.map.default_width <= theme.map.max_width:
        raise ValueError("map widths must satisfy min_width <= default_width <= max_width")
    for name in (theme.map.color, theme.marker.color, theme.status.error_color):
        if name not in COLOR_NAMES:
            raise ValueError(f"Unknown colour {name!r}; expected one of {', '.join(COLOR_NAMES)}")
    return theme


def _find_theme_toml() -> Optional[Path]:
    """Walk up from this file to find theme.toml."""
    here = Path(__file__).resolve().parent
    for parent in [here, *here.parents]:
        candidate = parent / "theme.toml"
        if candidate.is_file():
            return candidate
    return None


def load_theme(path: Optional[Path] = None) -> Theme:
    """Load the theme from *path* (or a discovered theme.toml), falling back to built-in defaults."""
    if path is None:
        path = _find_theme_toml()
    if path is None:
        _logger.info("No theme.toml found, using built-in defaults")
        return Theme()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        theme = _validate(_build(Theme, data))
        _logger.info("Loaded theme from %s", path)
        return theme
    except (OSError, tomllib.TOMLDecodeError, TypeError, ValueError) as exc:
        _logger.warning("Failed to load %s: %s, using built-in defaults", path, exc)
        return Theme()
