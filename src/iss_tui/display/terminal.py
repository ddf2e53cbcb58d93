"""Curses front end: turns keys and resizes into events and draws the state."""

from __future__ import annotations

import curses
import logging
import os
import queue
from enum import Enum
from typing import Optional

from iss_tui.app.events import Event, Quit, ViewportChanged
from iss_tui.app.reactor import EventReactor
from iss_tui.pipeline.layout import project
from iss_tui.theme import Theme

LOGGER = logging.getLogger(__name__)

QUIT_KEYS = (ord("q"), ord("Q"), 27)  # q, Q or ESC


class ColorPair(Enum):
    """Curses colour pair ids."""

    MAP = 1
    MARKER = 2
    ERROR = 3


class TerminalView:
    """
    Runs the reactor's event loop inside ``curses.wrapper``.

    Every pass polls the keyboard for up to ``poll_ms`` milliseconds, feeds
    any key or resize into the inbox, drains the inbox through the reactor
    and redraws when something changed.
    """

    def __init__(
        self,
        reactor: EventReactor,
        inbox: "queue.Queue[Event]",
        theme: Theme,
        *,
        use_color: bool = True,
        poll_ms: int = 100,
    ) -> None:
        os.environ.setdefault("TERM", "xterm-256color")
        self._reactor = reactor
        self._inbox = inbox
        self._theme = theme
        self._use_color = use_color
        self._poll_ms = poll_ms
        self._stdscr: Optional[curses.window] = None
        self._colors = False
        self._screen_height = 0
        self._screen_width = 0

    @property
    def stdscr(self) -> curses.window:
        if self._stdscr is None:
            raise RuntimeError("stdscr not initialized; call run() first.")
        return self._stdscr

    def run(self) -> None:
        try:
            curses.wrapper(self._application)
        except curses.error as exc:
            LOGGER.error("[curses] initialization error: %s", exc)
            raise SystemExit(1) from exc

    def _application(self, stdscr: curses.window) -> None:
        self._stdscr = stdscr
        curses.curs_set(0)
        self.stdscr.keypad(True)
        curses.noecho()
        curses.cbreak()
        self.stdscr.timeout(self._poll_ms)
        self._colors_init()

        self._post_size()
        state = self._reactor.state
        try:
            while state.running:
                key = self.stdscr.getch()
                if key == curses.KEY_RESIZE or curses.is_term_resized(self._screen_height, self._screen_width):
                    self._post_size()
                elif key in QUIT_KEYS:
                    self._inbox.put(Quit())

                if self._reactor.drain():
                    self._draw()
        except KeyboardInterrupt:
            LOGGER.info("Interrupted")
        finally:
            # Release the animation thread even when leaving on an error
            if state.running:
                self._reactor.handle(Quit())

    def _colors_init(self) -> None:
        if not self._use_color or not curses.has_colors():
            return
        curses.start_color()
        curses.use_default_colors()
        for pair, name in (
            (ColorPair.MAP, self._theme.map.color),
            (ColorPair.MARKER, self._theme.marker.color),
            (ColorPair.ERROR, self._theme.status.error_color),
        ):
            curses.init_pair(pair.value, getattr(curses, f"COLOR_{name.upper()}", curses.COLOR_WHITE), -1)
        self._colors = True

    def _post_size(self) -> None:
        self._screen_height, self._screen_width = self.stdscr.getmaxyx()
        self._inbox.put(ViewportChanged(self._screen_width, self._screen_height))

    def _attr(self, pair: ColorPair) -> int:
        return curses.color_pair(pair.value) if self._colors else curses.A_NORMAL

    def _draw(self) -> None:
        state = self._reactor.state
        lines = project(state, self._theme.status).split("\n")
        frame_lines = state.current_frame.split("\n")

        frame_width = max(len(line) for line in frame_lines)
        pad = (self._screen_width - frame_width) // 2 if frame_width < self._screen_width else 0
        border = 1 if self._theme.map.frame else 0
        first_map_line = 1
        error_line = len(lines) - 2 if state.last_error else -1

        self.stdscr.erase()
        for y, line in enumerate(lines[: self._screen_height]):
            if first_map_line <= y < first_map_line + len(frame_lines):
                row = y - first_map_line
                inside = border <= row < len(frame_lines) - border
                self._draw_map_line(y, line, pad + border, pad + frame_width - border, inside)
            elif y == error_line:
                self._addstr(y, 0, line, self._attr(ColorPair.ERROR))
            else:
                self._addstr(y, 0, line, curses.A_NORMAL)
        self.stdscr.refresh()

    def _draw_map_line(self, y: int, line: str, left: int, right: int, inside: bool) -> None:
        map_style = self._theme.map
        marker = self._theme.marker
        land = (map_style.land_glyph, map_style.coast_glyph)

        for x, char in enumerate(line[: self._screen_width - 1]):
            if char == " ":
                continue
            in_map = inside and left <= x < right
            if in_map and char in (marker.center, marker.horizontal, marker.vertical):
                attr = self._attr(ColorPair.MARKER) | curses.A_BOLD
            elif in_map and char in land:
                attr = self._attr(ColorPair.MAP)
            else:
                attr = curses.A_NORMAL
            try:
                self.stdscr.addch(y, x, char, attr)
            except curses.error:
                # Writing the bottom-right cell raises even though it succeeds
                pass

    def _addstr(self, y: int, x: int, text: str, attr: int) -> None:
        text = text[: max(0, self._screen_width - 1 - x)]
        if not text:
            return
        try:
            self.stdscr.addstr(y, x, text, attr)
        except curses.error:
            pass


__all__ = ["TerminalView"]
