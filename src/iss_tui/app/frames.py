"""Lifecycle of the background thread that animates the map."""

from __future__ import annotations

import logging
import queue
import threading
from typing import Iterator, Optional, Protocol

from iss_tui.app.events import Event, FrameEvent, StreamClosed
from iss_tui.app.state import State
from iss_tui.errors import MapRenderError
from iss_tui.types import Coordinates, Viewport

LOGGER = logging.getLogger(__name__)


class FrameSource(Protocol):
    def render(self, viewport: Viewport, marker: Optional[Coordinates] = None) -> str:
        ...

    def stream(self, viewport: Viewport, marker: Coordinates, cancel: threading.Event) -> Iterator[str]:
        ...


class FrameHandoff:
    """
    Single-slot handoff between one frame thread and the reactor.

    The producer takes the slot before emitting a frame and the reactor
    gives it back once the frame was applied, so at most one frame per run
    is ever waiting in the inbox. Cancelling wakes a waiting producer.
    """

    def __init__(self) -> None:
        self.cancelled = threading.Event()
        self._condition = threading.Condition()
        self._free = True

    def acquire(self) -> bool:
        """Block until the slot is free. Returns False once the run is cancelled."""
        with self._condition:
            while not self._free and not self.cancelled.is_set():
                self._condition.wait()
            if self.cancelled.is_set():
                return False
            self._free = False
            return True

    def release(self) -> None:
        with self._condition:
            self._free = True
            self._condition.notify_all()

    def cancel(self) -> None:
        self.cancelled.set()
        with self._condition:
            self._condition.notify_all()


class _Run:
    def __init__(self, generation: int, coordinates: Coordinates, viewport: Viewport) -> None:
        self.generation = generation
        self.coordinates = coordinates
        self.viewport = viewport
        self.handoff = FrameHandoff()
        self.thread: Optional[threading.Thread] = None


class FrameStreamSupervisor:
    """
    Keeps at most one animation run alive and filters out stale frames.

    Runs on the reactor's thread; it shares the reactor's ``State`` and is
    the only code that bumps ``state.active_generation``.
    """

    def __init__(self, source: FrameSource, inbox: "queue.Queue[Event]", state: State) -> None:
        self._source = source
        self._inbox = inbox
        self._state = state
        self._run: Optional[_Run] = None

    @property
    def running(self) -> bool:
        return self._run is not None

    def stop(self) -> None:
        """Cancel the active run, if any, and invalidate everything it still sends."""
        if self._cancel():
            self._state.active_generation += 1

    def start(self, coordinates: Coordinates, viewport: Viewport) -> int:
        """Replace the active run with a new one; the generation moves by exactly one."""
        self._cancel()
        self._state.active_generation += 1
        run = _Run(self._state.active_generation, coordinates, viewport)
        run.thread = threading.Thread(
            target=self._produce,
            args=(run,),
            name=f"map-animation-{run.generation}",
            daemon=True,
        )
        self._run = run
        run.thread.start()
        LOGGER.debug(
            "Started map animation run %d at %.2f, %.2f (%dx%d)",
            run.generation,
            coordinates.latitude,
            coordinates.longitude,
            viewport.width,
            viewport.height,
        )
        return run.generation

    def on_frame(self, event: FrameEvent) -> bool:
        """Apply a frame from the active run. Returns False for stale frames."""
        run = self._run
        if run is None or event.generation != self._state.active_generation:
            return False

        if event.error is not None:
            self._state.last_error = event.error
            self._fall_back_to_static(run)
        else:
            self._state.current_frame = event.frame

        run.handoff.release()
        return True

    def on_closed(self, event: StreamClosed) -> bool:
        if self._run is None or event.generation != self._state.active_generation:
            return False
        LOGGER.debug("Map animation run %d closed", event.generation)
        self._run = None
        return True

    def _cancel(self) -> bool:
        run = self._run
        if run is None:
            return False
        LOGGER.debug("Cancelling map animation run %d", run.generation)
        run.handoff.cancel()
        self._run = None
        return True

    def _fall_back_to_static(self, run: _Run) -> None:
        try:
            self._state.current_frame = self._source.render(run.viewport, run.coordinates)
        except MapRenderError as exc:
            LOGGER.warning("Static map fallback failed, keeping previous frame: %s", exc)

    def _produce(self, run: _Run) -> None:
        cancelled = run.handoff.cancelled
        try:
            for frame in self._source.stream(run.viewport, run.coordinates, cancelled):
                if not run.handoff.acquire():
                    break
                self._inbox.put(FrameEvent(run.generation, frame=frame))
        except Exception as exc:
            if run.handoff.acquire():
                LOGGER.warning("Map animation run %d failed: %s", run.generation, exc)
                self._inbox.put(FrameEvent(run.generation, error=f"map animation error: {exc}"))
        finally:
            self._inbox.put(StreamClosed(run.generation))


__all__ = ["FrameHandoff", "FrameSource", "FrameStreamSupervisor"]
