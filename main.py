"""
WorldClock - Main Entry Point

Prints the current time across the known zones and the user's favorite
cities, and manages the favorites list from the command line.
"""
import argparse
import signal
import sys
from typing import List, Optional

from PySide6.QtCore import QCoreApplication, QTimer

from core.clock.catalog import get_zone_choices, find_zone
from core.clock.world_clock import ClockReading, WorldClock
from core.logging.logger import setup_logging, get_logger
from core.settings.settings_manager import SettingsManager
from versioning import APP_NAME, APP_VERSION

logger = get_logger(__name__)

SIGNAL_POLL_INTERVAL_MS = 200


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="worldclock", description="World clock with favorite cities.")
    parser.add_argument("-d", "--debug", action="store_true", help="debug logging on the console")
    parser.add_argument("-v", "--verbose", action="store_true", help="verbose debug logging")
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")
    parser.add_argument("--list-zones", action="store_true", help="list the known zone ids and exit")
    parser.add_argument("--list", action="store_true", help="list favorites with their ids and exit")
    parser.add_argument("--add", nargs=2, metavar=("NAME", "ZONE_ID"), help="add a favorite city")
    parser.add_argument("--remove", metavar="ID", help="remove a favorite by id")
    parser.add_argument("--watch", action="store_true", help="keep running and reprint on every refresh")
    return parser


def format_reading(label: str, reading: ClockReading) -> str:
    dst = " DST" if reading.is_dst_active else ""
    return f"{label:<16} {reading.time_text:>9}  {reading.date_text}  ({reading.offset_label}{dst})"


def print_readings(world_clock: WorldClock) -> None:
    for reading in world_clock.zone_readings():
        print(format_reading(reading.zone.display_name, reading))

    favorites = world_clock.favorite_readings()
    if favorites:
        print()
        print("Favorites:")
        for favorite, reading in favorites:
            print(format_reading(favorite.name, reading))


def run_watch(app: QCoreApplication, world_clock: WorldClock) -> int:
    world_clock.refreshed.connect(lambda _instant: print_readings(world_clock))
    # Ctrl+C ends the event loop (queued, so it also holds before exec()
    # starts); the clock is torn down on the way out.
    signal.signal(signal.SIGINT, lambda *_: QTimer.singleShot(0, app.quit))
    # Python only runs signal handlers when it regains control from the Qt
    # loop, so wake it up regularly.
    interrupt_poll = QTimer(app)
    interrupt_poll.timeout.connect(lambda: None)
    interrupt_poll.start(SIGNAL_POLL_INTERVAL_MS)
    world_clock.activate()
    try:
        return app.exec()
    finally:
        interrupt_poll.stop()
        world_clock.deactivate()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the world clock."""
    args = build_parser().parse_args(argv)
    setup_logging(debug=args.debug, verbose=args.verbose)

    logger.info("%s %s starting", APP_NAME, APP_VERSION)

    if args.list_zones:
        for display_name, zone_id in get_zone_choices():
            print(f"{zone_id:<12} {display_name}")
        return 0

    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    settings = SettingsManager()
    world_clock = WorldClock(settings)

    if not args.watch:
        world_clock.favorites.load()

    if args.add:
        name, zone_id = args.add
        if find_zone(zone_id) is None:
            print(f"Unknown zone id: {zone_id} (see --list-zones)", file=sys.stderr)
            return 2
        favorite = world_clock.add_favorite(name, zone_id)
        if favorite is None:
            print("A favorite needs a non-empty name", file=sys.stderr)
            return 2
        print(f"Added {favorite.name} ({favorite.id})")
        return 0

    if args.remove:
        if not world_clock.remove_favorite(args.remove):
            print(f"No favorite with id {args.remove}", file=sys.stderr)
            return 1
        print(f"Removed {args.remove}")
        return 0

    if args.list:
        for favorite in world_clock.favorites.favorites:
            print(f"{favorite.id}  {favorite.name:<16} {favorite.time_zone_id}")
        return 0

    if args.watch:
        return run_watch(app, world_clock)

    print_readings(world_clock)
    return 0


if __name__ == "__main__":
    sys.exit(main())
