from pathlib import Path

import pytest
import requests

from iss_tui.config import Settings
from iss_tui.data.iss_client import ISSClient, ISSFix
from iss_tui.errors import TelemetryError


class DummyResponse:
    def __init__(self, payload, status_error=None) -> None:
        self.payload = payload
        self.status_error = status_error

    def raise_for_status(self) -> None:
        if self.status_error is not None:
            raise self.status_error

    def json(self):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


class DummySession:
    def __init__(self, response) -> None:
        self.response = response
        self.headers = {}
        self.calls = []

    def get(self, url, timeout):  # noqa: D401 - signature matches requests
        self.calls.append((url, timeout))
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


def make_settings(tmp_path: Path) -> Settings:
    return Settings(
        iss_api_url="http://example.com/iss-now.json",
        geocoder_url="https://example.com/reverse",
        user_agent="iss-tui-tests",
        poll_interval=5.0,
        http_timeout=8.0,
        map_fps=2.0,
        use_color=False,
        log_level="INFO",
        log_file=tmp_path / "iss.log",
        theme_file=None,
    )


def test_open_notify_payload(tmp_path: Path) -> None:
    payload = {
        "message": "success",
        "timestamp": 1700000000,
        "iss_position": {"latitude": "-12.3456", "longitude": "150.5"},
    }
    session = DummySession(DummyResponse(payload))
    client = ISSClient(make_settings(tmp_path), session=session)  # type: ignore[arg-type]

    assert client.get_fix() == ISSFix(latitude=-12.3456, longitude=150.5, timestamp=1700000000.0)
    assert session.calls == [("http://example.com/iss-now.json", 8.0)]
    assert session.headers["User-Agent"] == "iss-tui-tests"


def test_flat_payload(tmp_path: Path) -> None:
    session = DummySession(DummyResponse({"latitude": 10.5, "longitude": -20.25}))
    client = ISSClient(make_settings(tmp_path), session=session)  # type: ignore[arg-type]

    fix = client.get_fix()
    assert (fix.latitude, fix.longitude, fix.timestamp) == (10.5, -20.25, 0.0)


@pytest.mark.parametrize(
    "response",
    [
        requests.Timeout("read timed out"),
        DummyResponse({}, status_error=requests.HTTPError("502 Bad Gateway")),
        DummyResponse(ValueError("Expecting value")),
        DummyResponse({"message": "failure", "iss_position": {"latitude": "1", "longitude": "2"}}),
        DummyResponse({"message": "success", "iss_position": {"latitude": "north", "longitude": "2"}}),
        DummyResponse({"longitude": 2.0}),
        DummyResponse("nope"),
    ],
)
def test_failures_raise_telemetry_error(tmp_path: Path, response) -> None:
    client = ISSClient(make_settings(tmp_path), session=DummySession(response))  # type: ignore[arg-type]
    with pytest.raises(TelemetryError):
        client.get_fix()
