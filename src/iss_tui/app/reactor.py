"""The single-threaded core: applies events to the display state."""

from __future__ import annotations

import logging
import queue
from typing import Optional

from iss_tui.app.events import (
    Event,
    FrameEvent,
    Quit,
    StreamClosed,
    TelemetryFailed,
    TelemetryResult,
    TelemetryTick,
    ViewportChanged,
)
from iss_tui.app.frames import FrameSource, FrameStreamSupervisor
from iss_tui.app.state import State
from iss_tui.app.telemetry import TelemetryPoller
from iss_tui.errors import MapRenderError
from iss_tui.types import Viewport

LOGGER = logging.getLogger(__name__)


class EventReactor:
    """
    Owns ``State`` and is the only place it changes.

    Background threads (the telemetry timer and cycle, the map animation)
    only put events on ``inbox``; ``drain`` applies them one at a time on the
    caller's thread, so transitions never interleave.
    """

    def __init__(
        self,
        state: State,
        inbox: "queue.Queue[Event]",
        frame_source: FrameSource,
        supervisor: FrameStreamSupervisor,
        poller: TelemetryPoller,
    ) -> None:
        self.state = state
        self._inbox = inbox
        self._frame_source = frame_source
        self._supervisor = supervisor
        self._poller = poller

    def start(self) -> None:
        """Draw the pre-fix map and fire the first telemetry tick right away."""
        self._render_static()
        self._poller.schedule(0)

    def drain(self, timeout: Optional[float] = None) -> int:
        """
        Apply every queued event and return how many were handled.

        Waits up to ``timeout`` seconds for the first one (``None`` means do not
        wait at all).
        """
        handled = 0
        try:
            event = self._inbox.get(timeout=timeout) if timeout else self._inbox.get_nowait()
        except queue.Empty:
            return 0

        while True:
            self.handle(event)
            handled += 1
            if not self.state.running:
                break
            try:
                event = self._inbox.get_nowait()
            except queue.Empty:
                break
        return handled

    def handle(self, event: Event) -> None:
        if not self.state.running:
            return

        if isinstance(event, FrameEvent):
            self._supervisor.on_frame(event)
        elif isinstance(event, StreamClosed):
            self._supervisor.on_closed(event)
        elif isinstance(event, TelemetryTick):
            self._on_tick()
        elif isinstance(event, TelemetryResult):
            self._on_telemetry(event)
        elif isinstance(event, TelemetryFailed):
            self.state.last_error = event.error
        elif isinstance(event, ViewportChanged):
            self._on_viewport(event)
        elif isinstance(event, Quit):
            self._on_quit()
        else:
            raise TypeError(f"Unknown event: {event!r}")

    def _on_tick(self) -> None:
        self._poller.run_cycle(self.state.place_name)
        self._poller.schedule()

    def _on_telemetry(self, event: TelemetryResult) -> None:
        state = self.state
        moved = not state.has_coordinates or state.last_coordinates != event.coordinates

        state.place_name = event.place_name
        state.last_coordinates = event.coordinates
        state.has_coordinates = True
        state.last_error = event.error

        if moved:
            self._supervisor.start(event.coordinates, state.viewport)

    def _on_viewport(self, event: ViewportChanged) -> None:
        state = self.state
        state.viewport = Viewport(event.width, event.height)
        if state.has_coordinates and state.last_coordinates is not None:
            self._supervisor.start(state.last_coordinates, state.viewport)
        else:
            self._render_static()

    def _on_quit(self) -> None:
        LOGGER.info("Quit requested, stopping background work")
        self._supervisor.stop()
        self._poller.cancel()
        self.state.running = False

    def _render_static(self) -> None:
        try:
            self.state.current_frame = self._frame_source.render(self.state.viewport, None)
        except MapRenderError as exc:
            LOGGER.warning("Static map render failed: %s", exc)
            self.state.last_error = f"map render error: {exc}"


__all__ = ["EventReactor"]
