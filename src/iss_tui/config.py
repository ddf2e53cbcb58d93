"""Minimal configuration loader for the ISS terminal tracker."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str, *, default: bool = False) -> bool:
    truthy = {"1", "true", "yes", "on"}
    falsy = {"0", "false", "no", "off"}
    text = value.strip().lower()
    if text in truthy:
        return True
    if text in falsy:
        return False
    return default


def _as_positive_float(name: str, value: str) -> float:
    number = float(value)
    if number <= 0:
        raise ValueError(f"{name} must be positive, got {value!r}")
    return number


@dataclass(frozen=True)
class Settings:
    iss_api_url: str
    geocoder_url: str
    user_agent: str
    poll_interval: float
    http_timeout: float
    map_fps: float
    use_color: bool
    log_level: str
    log_file: Path
    theme_file: Optional[Path]

    @classmethod
    def load(cls) -> "Settings":
        log_file = Path(os.getenv("ISS_LOG_FILE", "var/iss_tui.log")).resolve()
        log_file.parent.mkdir(parents=True, exist_ok=True)

        theme_file = os.getenv("ISS_THEME_FILE")

        return cls(
            iss_api_url=os.getenv("ISS_API_URL", "http://api.open-notify.org/iss-now.json"),
            geocoder_url=os.getenv("ISS_GEOCODER_URL", "https://nominatim.openstreetmap.org/reverse"),
            user_agent=os.getenv("ISS_USER_AGENT", "iss-tui/1.2 (+https://github.com/kivayan/iss)"),
            poll_interval=_as_positive_float("ISS_POLL_INTERVAL", os.getenv("ISS_POLL_INTERVAL", "5")),
            http_timeout=_as_positive_float("ISS_HTTP_TIMEOUT", os.getenv("ISS_HTTP_TIMEOUT", "8")),
            map_fps=_as_positive_float("ISS_MAP_FPS", os.getenv("ISS_MAP_FPS", "2")),
            use_color=_as_bool(os.getenv("ISS_COLOR", "true"), default=True),
            log_level=os.getenv("ISS_LOG_LEVEL", "INFO"),
            log_file=log_file,
            theme_file=Path(theme_file).resolve() if theme_file else None,
        )
