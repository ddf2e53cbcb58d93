"""Periodic position polling for the reactor."""

from __future__ import annotations

import logging
import queue
import threading
from typing import Optional, Protocol

from iss_tui.app.events import Event, TelemetryFailed, TelemetryResult, TelemetryTick
from iss_tui.data.geography import ReverseGeocoder, resolve_place
from iss_tui.data.iss_client import ISSFix
from iss_tui.errors import GeocodeError, TelemetryError
from iss_tui.types import Coordinates

LOGGER = logging.getLogger(__name__)


class PositionSource(Protocol):
    def get_fix(self) -> ISSFix:
        ...


class TelemetryPoller:
    """
    Fires a ``TelemetryTick`` every ``interval`` seconds and runs one
    fetch-then-resolve cycle per tick on a worker thread.

    Results go back to the reactor as events; the poller never touches
    the display state. A tick that arrives while the previous cycle is
    still in flight is skipped.
    """

    def __init__(
        self,
        position_source: PositionSource,
        geocoder: ReverseGeocoder,
        inbox: "queue.Queue[Event]",
        interval: float = 5.0,
    ) -> None:
        if interval <= 0:
            raise ValueError("Poll interval must be positive")
        self._position_source = position_source
        self._geocoder = geocoder
        self._inbox = inbox
        self.interval = interval

        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._in_flight = False
        self._stopped = False

        # Stats
        self.cycles = 0
        self.failures = 0

    @property
    def in_flight(self) -> bool:
        with self._lock:
            return self._in_flight

    def schedule(self, delay: Optional[float] = None) -> None:
        """Arm the timer for the next tick, replacing any pending one."""
        with self._lock:
            if self._stopped:
                return
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.interval if delay is None else delay, self._fire)
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        with self._lock:
            self._stopped = True
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            cycles, failures = self.cycles, self.failures
        LOGGER.info("Telemetry poller stopped. Cycles: %d, failures: %d", cycles, failures)

    def run_cycle(self, current_place: str) -> bool:
        """Start one background cycle. Returns False if one is already running."""
        with self._lock:
            if self._stopped:
                return False
            if self._in_flight:
                LOGGER.debug("Telemetry cycle still in flight, skipping tick")
                return False
            self._in_flight = True

        thread = threading.Thread(target=self._cycle, args=(current_place,), name="telemetry-cycle", daemon=True)
        thread.start()
        return True

    def poll_once(self, current_place: str) -> Event:
        """Fetch and resolve synchronously, turning every failure into an event."""
        with self._lock:
            self.cycles += 1
        try:
            fix = self._position_source.get_fix()
        except TelemetryError as exc:
            with self._lock:
                self.failures += 1
            LOGGER.warning("ISS position fetch failed: %s", exc)
            return TelemetryFailed(str(exc))

        coordinates = Coordinates(fix.latitude, fix.longitude)
        try:
            place = resolve_place(self._geocoder, fix.latitude, fix.longitude)
        except GeocodeError as exc:
            LOGGER.warning("Reverse geocode failed, keeping %r: %s", current_place, exc)
            return TelemetryResult(coordinates, current_place, error=str(exc))

        LOGGER.debug("ISS at %.2f, %.2f over %s", fix.latitude, fix.longitude, place)
        return TelemetryResult(coordinates, place)

    def _fire(self) -> None:
        self._inbox.put(TelemetryTick())

    def _cycle(self, current_place: str) -> None:
        try:
            self._inbox.put(self.poll_once(current_place))
        finally:
            with self._lock:
                self._in_flight = False


__all__ = ["PositionSource", "TelemetryPoller"]
