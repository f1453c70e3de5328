import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from gaze_follow.configs.app import AppSettings
from gaze_follow.core import GazeQuantizer, PermissionResult
from gaze_follow.core.manager import TrackerRegistry
from gaze_follow.factories import create_display, create_tracker
from gaze_follow.models import OrientationReading, Rect
from gaze_follow.sinks import LogNotifier

logger = logging.getLogger("gaze_follow")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gaze-follow", description="Gaze image grid tools")
    commands = parser.add_subparsers(dest="command", required=True)

    locate = commands.add_parser("locate", help="Print the image path for a normalized sample.")
    locate.add_argument("x", type=float)
    locate.add_argument("y", type=float)

    manifest = commands.add_parser("manifest", help="List every image the grid expects.")
    manifest.add_argument("--paths", action="store_true", help="Prefix each name with the base path.")

    stream = commands.add_parser("stream", help="Drive a tracker from events on stdin.")
    stream.add_argument(
        "--rect", type=float, nargs=4, default=(0.0, 0.0, 256.0, 256.0),
        metavar=("LEFT", "TOP", "WIDTH", "HEIGHT"),
        help="Reference rectangle of the tracked element.",
    )
    return parser


def run_stream(settings: AppSettings, bounds: Rect, lines: TextIO, out: TextIO) -> int:
    """
    Replays input events, one per line:
        pointer X Y | touch X Y | tilt BETA GAMMA
        orientation granted|denied|unsupported|off
    Prints the image shown after each handled event.
    """
    display = create_display(settings)
    registry = TrackerRegistry(notifier=LogNotifier())
    tracker = registry.register(create_tracker(settings, display, bounds))

    try:
        for lineno, line in enumerate(lines, start=1):
            parts = line.split()
            if not parts or parts[0].startswith("#"):
                continue
            kind, args = parts[0].lower(), parts[1:]
            try:
                if kind == "pointer":
                    asset = tracker.on_pointer(float(args[0]), float(args[1]))
                elif kind == "touch":
                    asset = tracker.on_touch([(float(args[0]), float(args[1]))])
                elif kind == "tilt":
                    asset = tracker.on_orientation(OrientationReading(float(args[0]), float(args[1])))
                elif kind == "orientation":
                    if args[0].lower() == "off":
                        registry.disable_orientation()
                    else:
                        registry.enable_orientation(PermissionResult[args[0].upper()])
                    asset = None
                else:
                    raise ValueError(f"unknown event '{kind}'")
            except (IndexError, KeyError, ValueError) as e:
                logger.warning("Line %d skipped (%s): %r", lineno, e, line.rstrip())
                continue

            if asset is not None:
                print(f"{settings.display.base_path}{asset}", file=out)
    finally:
        close = getattr(display, "close", None)
        if close is not None:
            close()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # 1. Load Configuration
    try:
        settings = AppSettings()
    except Exception as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return 1

    # 2. Setup Logging
    logging.basicConfig(
        level=settings.logging.level,
        format=settings.logging.format,
        stream=sys.stderr
    )
    logger.debug(f"Gaze Follow v{settings.__version__}")

    quantizer = GazeQuantizer.from_settings(settings.grid)

    if args.command == "locate":
        _, asset = quantizer.locate(args.x, args.y)
        print(f"{settings.display.base_path}{asset}")
        return 0

    if args.command == "manifest":
        prefix = settings.display.base_path if args.paths else ""
        for asset in quantizer.iter_assets():
            print(f"{prefix}{asset}")
        return 0

    return run_stream(settings, Rect(*args.rect), sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
