"""Render the world as ASCII art with an optional position marker."""

from __future__ import annotations

import itertools
import logging
import threading
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np
from PIL import Image, ImageDraw

from iss_tui.data.land_outlines import LAND_MASSES
from iss_tui.errors import MapRenderError
from iss_tui.theme import MapStyle, MarkerStyle, Theme
from iss_tui.types import Coordinates, Viewport

LOGGER = logging.getLogger(__name__)

# Lines of the screen used around the map by the status block (see pipeline.layout)
STATUS_ROWS = 10


class LandMask:
    """Equirectangular land/water raster, row 0 at 90°N and column 0 at 180°W."""

    def __init__(self, raster: np.ndarray) -> None:
        if raster.ndim != 2 or raster.size == 0:
            raise ValueError("Land mask raster must be a non-empty 2D array")
        self._raster = raster.astype(bool)

    @classmethod
    def from_polygons(
        cls,
        polygons: Sequence[Sequence[Tuple[float, float]]] = LAND_MASSES,
        *,
        resolution: float = 0.5,
    ) -> "LandMask":
        """Rasterise (lat, lon) rings at *resolution* degrees per pixel."""
        width = int(round(360 / resolution))
        height = int(round(180 / resolution))
        image = Image.new("1", (width, height), 0)
        draw = ImageDraw.Draw(image)
        for ring in polygons:
            points = [((lon + 180.0) / resolution, (90.0 - lat) / resolution) for lat, lon in ring]
            if len(points) >= 3:
                draw.polygon(points, fill=1)
        return cls(np.array(image, dtype=bool))

    @property
    def shape(self) -> Tuple[int, int]:
        return self._raster.shape

    def sample(self, lats: np.ndarray, lons: np.ndarray) -> np.ndarray:
        """Vectorised lookup; ``lats`` and ``lons`` broadcast against each other."""
        height, width = self._raster.shape
        rows = np.clip(((90.0 - np.asarray(lats)) / 180.0 * height).astype(int), 0, height - 1)
        cols = ((np.asarray(lons) + 180.0) / 360.0 * width).astype(int) % width
        return self._raster[rows, cols]

    def is_land(self, lat: float, lon: float) -> bool:
        return bool(self.sample(np.array(lat), np.array(lon)))


def map_width_for_terminal(viewport: Viewport, style: MapStyle) -> int:
    """Pick a map width that leaves a small side margin and fits the terminal height."""
    if viewport.width <= 0:
        return style.default_width

    width = min(max(viewport.width - 4, style.min_width), style.max_width)

    if viewport.height > 0:
        chrome = STATUS_ROWS + 2 * style.margin_rows + (2 if style.frame else 0)
        rows_available = viewport.height - chrome
        fit = int(rows_available * 2 * style.char_aspect)
        width = max(style.min_width, min(width, fit))

    return width


def map_rows(width: int, style: MapStyle) -> int:
    return max(1, int(round(width / (2 * style.char_aspect))))


class AsciiWorldMap:
    """Static and animated frame source for the world map."""

    def __init__(self, mask: LandMask, theme: Optional[Theme] = None, *, fps: float = 2.0) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._mask = mask
        self._theme = theme or Theme()
        self._fps = fps

    def render(self, viewport: Viewport, marker: Optional[Coordinates] = None) -> str:
        style = self._theme.map
        width = map_width_for_terminal(viewport, style)
        return self.render_width(width, marker)

    def render_width(self, width: int, marker: Optional[Coordinates] = None) -> str:
        style = self._theme.map
        if width < style.min_width:
            raise MapRenderError(f"map width {width} is below the minimum of {style.min_width}")

        rows = map_rows(width, style)
        coverage = self._cell_coverage(width, rows)

        grid: List[List[str]] = []
        for row in coverage:
            grid.append([_glyph(value, style) for value in row])

        if marker is not None:
            _draw_marker(grid, marker, self._theme.marker)

        lines = ["".join(cells) for cells in grid]
        blank = style.water_glyph * width
        lines = [blank] * style.margin_rows + lines + [blank] * style.margin_rows

        if style.frame:
            border = style.border_corner + style.border_horizontal * width + style.border_corner
            lines = [border] + [f"{style.border_vertical}{line}{style.border_vertical}" for line in lines] + [border]

        return "\n".join(lines)

    def stream(self, viewport: Viewport, marker: Coordinates, cancel: threading.Event) -> Iterator[str]:
        """
        Lazily yield animation frames until ``cancel`` is set.

        Frames alternate between the marker shown and hidden when the theme
        asks for blinking. Both frames are rendered once up front, so a
        rendering problem surfaces on the first ``next()``.
        """
        shown = self.render(viewport, marker)
        if self._theme.marker.blink:
            frames = itertools.cycle((shown, self.render(viewport, None)))
        else:
            frames = itertools.repeat(shown)

        interval = 1.0 / self._fps
        for frame in frames:
            if cancel.is_set():
                return
            yield frame
            if cancel.wait(interval):
                return

    def _cell_coverage(self, width: int, rows: int) -> np.ndarray:
        samples_per_cell = self._theme.map.supersample
        xs = (np.arange(width * samples_per_cell) + 0.5) / (width * samples_per_cell)
        ys = (np.arange(rows * samples_per_cell) + 0.5) / (rows * samples_per_cell)
        lons = -180.0 + xs * 360.0
        lats = 90.0 - ys * 180.0
        land = self._mask.sample(lats[:, None], lons[None, :])
        return land.reshape(rows, samples_per_cell, width, samples_per_cell).mean(axis=(1, 3))


def marker_cell(marker: Coordinates, width: int, rows: int) -> Tuple[int, int]:
    """Return the (row, column) of the map cell containing ``marker``."""
    col = int((marker.longitude + 180.0) / 360.0 * width)
    row = int((90.0 - marker.latitude) / 180.0 * rows)
    return min(max(row, 0), rows - 1), min(max(col, 0), width - 1)


def _glyph(coverage: float, style: MapStyle) -> str:
    if coverage >= 0.5:
        return style.land_glyph
    if coverage > 0:
        return style.coast_glyph
    return style.water_glyph


def _draw_marker(grid: List[List[str]], marker: Coordinates, style: MarkerStyle) -> None:
    rows = len(grid)
    width = len(grid[0])
    row, col = marker_cell(marker, width, rows)

    for offset in range(1, style.arm_x + 1):
        for x in (col - offset, col + offset):
            if 0 <= x < width:
                grid[row][x] = style.horizontal
    for offset in range(1, style.arm_y + 1):
        for y in (row - offset, row + offset):
            if 0 <= y < rows:
                grid[y][col] = style.vertical
    grid[row][col] = style.center


__all__ = ["AsciiWorldMap", "LandMask", "STATUS_ROWS", "map_rows", "map_width_for_terminal", "marker_cell"]
