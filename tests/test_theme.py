import logging
from pathlib import Path

from iss_tui.theme import MapStyle, MarkerStyle, Theme, load_theme


def write_theme(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "theme.toml"
    path.write_text(text, encoding="utf-8")
    return path


def test_partial_override_keeps_other_defaults(tmp_path: Path) -> None:
    path = write_theme(tmp_path, '[map]\nland_glyph = "@"\ncolor = "cyan"\n\n[marker]\nblink = false\n')

    theme = load_theme(path)

    assert theme.map.land_glyph == "@"
    assert theme.map.color == "cyan"
    assert theme.map.coast_glyph == MapStyle().coast_glyph
    assert theme.marker == MarkerStyle(blink=False)
    assert theme.status == Theme().status


def test_unknown_keys_are_skipped(tmp_path: Path, caplog) -> None:
    path = write_theme(tmp_path, '[marker]\nsparkle = true\ncenter = "*"\n')

    with caplog.at_level(logging.WARNING, logger="iss_tui.theme"):
        theme = load_theme(path)

    assert theme.marker.center == "*"
    assert "sparkle" in caplog.text


def test_invalid_values_fall_back_to_defaults(tmp_path: Path) -> None:
    assert load_theme(write_theme(tmp_path, '[map]\nland_glyph = "##"\n')) == Theme()
    assert load_theme(write_theme(tmp_path, '[marker]\ncolor = "plaid"\n')) == Theme()
    assert load_theme(write_theme(tmp_path, "[map\n")) == Theme()


def test_missing_file_falls_back_to_defaults(tmp_path: Path) -> None:
    assert load_theme(tmp_path / "absent.toml") == Theme()
