from __future__ import annotations

import logging
import queue
import threading
import time

import pytest

from iss_tui.app.events import TelemetryFailed, TelemetryResult, TelemetryTick
from iss_tui.app.telemetry import TelemetryPoller
from iss_tui.data.iss_client import ISSFix
from iss_tui.data.nominatim_client import GeocodeResult
from iss_tui.errors import GeocodeError, TelemetryError
from iss_tui.types import Coordinates

WAIT = 2.0


class FakePositionSource:
    def __init__(self, fix=None, error=None, gate=None) -> None:
        self.fix = fix or ISSFix(latitude=48.85, longitude=2.35, timestamp=0.0)
        self.error = error
        self.gate = gate
        self.calls = 0

    def get_fix(self) -> ISSFix:
        self.calls += 1
        if self.gate is not None:
            self.gate.wait(WAIT)
        if self.error is not None:
            raise self.error
        return self.fix


class FakeGeocoder:
    def __init__(self, result=None, error=None) -> None:
        self.result = result or GeocodeResult(country="France")
        self.error = error
        self.calls = []

    def reverse(self, lat, lon, zoom):
        self.calls.append(zoom)
        if self.error is not None:
            raise self.error
        return self.result


def make_poller(source=None, geocoder=None, interval=5.0):
    inbox: "queue.Queue" = queue.Queue()
    poller = TelemetryPoller(source or FakePositionSource(), geocoder or FakeGeocoder(), inbox, interval=interval)
    return poller, inbox


def test_successful_cycle_reports_coordinates_and_place() -> None:
    geocoder = FakeGeocoder()
    poller, _ = make_poller(geocoder=geocoder)

    event = poller.poll_once("Resolving...")

    assert event == TelemetryResult(Coordinates(48.85, 2.35), "France")
    assert geocoder.calls == [3]


def test_fetch_failure_reports_failure_without_geocoding() -> None:
    geocoder = FakeGeocoder()
    poller, _ = make_poller(FakePositionSource(error=TelemetryError("iss api request failed: timeout")), geocoder)

    event = poller.poll_once("France")

    assert event == TelemetryFailed("iss api request failed: timeout")
    assert geocoder.calls == []
    assert poller.failures == 1


def test_geocode_failure_keeps_previous_place() -> None:
    poller, _ = make_poller(geocoder=FakeGeocoder(error=GeocodeError("nominatim request failed: 503")))

    event = poller.poll_once("Germany")

    assert event == TelemetryResult(Coordinates(48.85, 2.35), "Germany", error="nominatim request failed: 503")


def test_cycles_never_overlap() -> None:
    gate = threading.Event()
    source = FakePositionSource(gate=gate)
    poller, inbox = make_poller(source)

    assert poller.run_cycle("Resolving...")
    assert poller.in_flight
    assert not poller.run_cycle("Resolving...")
    gate.set()

    assert isinstance(inbox.get(timeout=WAIT), TelemetryResult)
    deadline = time.monotonic() + WAIT
    while poller.in_flight and time.monotonic() < deadline:
        time.sleep(0.01)
    assert not poller.in_flight
    assert poller.run_cycle("France")
    assert isinstance(inbox.get(timeout=WAIT), TelemetryResult)
    assert source.calls == 2


def test_schedule_emits_tick_and_cancel_disarms() -> None:
    poller, inbox = make_poller()

    poller.schedule(0)
    assert inbox.get(timeout=WAIT) == TelemetryTick()

    poller.schedule(0.05)
    poller.cancel()
    time.sleep(0.1)
    assert inbox.empty()

    poller.schedule(0)
    assert not poller.run_cycle("France")
    time.sleep(0.05)
    assert inbox.empty()


def test_interval_must_be_positive() -> None:
    with pytest.raises(ValueError):
        make_poller(interval=0)


def test_cancel_reports_counters_from_worker_cycles(caplog) -> None:
    source = FakePositionSource(error=TelemetryError("iss api request failed: timeout"))
    poller, inbox = make_poller(source)

    assert poller.run_cycle("France")
    assert isinstance(inbox.get(timeout=WAIT), TelemetryFailed)
    deadline = time.monotonic() + WAIT
    while poller.in_flight and time.monotonic() < deadline:
        time.sleep(0.01)
    assert poller.run_cycle("France")
    assert isinstance(inbox.get(timeout=WAIT), TelemetryFailed)

    with caplog.at_level(logging.INFO, logger="iss_tui.app.telemetry"):
        poller.cancel()

    assert (poller.cycles, poller.failures) == (2, 2)
    assert "Cycles: 2, failures: 2" in caplog.text
