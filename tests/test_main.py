from pathlib import Path

import pytest

from iss_tui.app.main import apply_args, parse_args
from iss_tui.config import Settings


def make_settings(tmp_path: Path) -> Settings:
    return Settings(
        iss_api_url="https://example.com/iss",
        geocoder_url="https://example.com/reverse",
        user_agent="iss-tui-tests",
        poll_interval=5.0,
        http_timeout=8.0,
        map_fps=2.0,
        use_color=True,
        log_level="INFO",
        log_file=tmp_path / "iss.log",
        theme_file=None,
    )


def test_cli_overrides_settings(tmp_path: Path) -> None:
    args = parse_args(["--interval", "10", "--no-color", "--log-level", "DEBUG"])
    settings = apply_args(make_settings(tmp_path), args)

    assert settings.poll_interval == 10.0
    assert settings.use_color is False
    assert settings.log_level == "DEBUG"


def test_no_arguments_keep_settings(tmp_path: Path) -> None:
    settings = make_settings(tmp_path)
    assert apply_args(settings, parse_args([])) == settings


def test_non_positive_interval_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        apply_args(make_settings(tmp_path), parse_args(["--interval", "0"]))
