"""Main application entry point for the ISS terminal tracker."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import queue
from pathlib import Path
from typing import Optional, Sequence

from iss_tui.app.events import Event
from iss_tui.app.frames import FrameStreamSupervisor
from iss_tui.app.reactor import EventReactor
from iss_tui.app.state import State
from iss_tui.app.telemetry import TelemetryPoller
from iss_tui.config import Settings
from iss_tui.data.iss_client import ISSClient
from iss_tui.data.nominatim_client import NominatimClient
from iss_tui.display.terminal import TerminalView
from iss_tui.pipeline.ascii_map import AsciiWorldMap, LandMask
from iss_tui.theme import Theme, load_theme

logger = logging.getLogger(__name__)


def configure_logging(level: str, log_file: Optional[Path] = None) -> None:
    # curses owns the terminal, so logs go to a file when one is configured
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        filename=str(log_file) if log_file else None,
    )


def build_reactor(settings: Settings, inbox: "queue.Queue[Event]", theme: Theme) -> EventReactor:
    frame_source = AsciiWorldMap(LandMask.from_polygons(), theme, fps=settings.map_fps)

    state = State(place_name=theme.status.pending)
    supervisor = FrameStreamSupervisor(frame_source, inbox, state)
    poller = TelemetryPoller(
        ISSClient(settings),
        NominatimClient(settings),
        inbox,
        interval=settings.poll_interval,
    )
    return EventReactor(state, inbox, frame_source, supervisor, poller)


def run(settings: Settings) -> None:
    inbox: "queue.Queue[Event]" = queue.Queue()
    theme = load_theme(settings.theme_file)
    reactor = build_reactor(settings, inbox, theme)
    view = TerminalView(reactor, inbox, theme, use_color=settings.use_color)

    logger.info("Starting ISS tracker (poll interval %ss)", settings.poll_interval)
    reactor.start()
    try:
        view.run()
    finally:
        logger.info("Done.")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show where the ISS is on an ASCII world map")
    parser.add_argument("--interval", type=float, help="Seconds between position updates")
    parser.add_argument("--no-color", action="store_true", help="Draw without terminal colours")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")
    return parser.parse_args(argv)


def apply_args(settings: Settings, args: argparse.Namespace) -> Settings:
    overrides = {}
    if args.interval is not None:
        if args.interval <= 0:
            raise SystemExit("--interval must be positive")
        overrides["poll_interval"] = args.interval
    if args.no_color:
        overrides["use_color"] = False
    if args.log_level:
        overrides["log_level"] = args.log_level
    return dataclasses.replace(settings, **overrides)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    settings = apply_args(Settings.load(), args)
    configure_logging(settings.log_level, settings.log_file)
    run(settings)


if __name__ == "__main__":
    main()
