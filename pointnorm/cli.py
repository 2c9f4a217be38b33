from __future__ import annotations

import argparse
import logging

from .core import DEFAULT_COLOR, normalize_point_file
from .exceptions import EmptyInputError, SourceUnavailableError
from .stats import DEFAULT_HIGH_PERCENTILE, DEFAULT_LOW_PERCENTILE
from .viewer import PointSink, ViewStyle, show_points

logger = logging.getLogger(__name__)

DEFAULT_INPUT = "optimized_points.txt"

EXIT_OK = 0
EXIT_SOURCE_UNAVAILABLE = 1
EXIT_EMPTY_INPUT = 2


def _fraction(text: str) -> float:
    value = float(text)
    if not 0.0 <= value <= 1.0:
        raise argparse.ArgumentTypeError(f"{text} is not within [0, 1]")
    return value


def _add_pipeline_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--low", type=_fraction, default=DEFAULT_LOW_PERCENTILE, help="Lower percentile of the robust range (default 0.05).")
    p.add_argument("--high", type=_fraction, default=DEFAULT_HIGH_PERCENTILE, help="Upper percentile of the robust range (default 0.95).")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pointnorm",
        description="Center a 3D point set on its median and scale it by its 5th-95th percentile range.",
    )
    p.add_argument("--log-level", type=str.upper, choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="INFO", help="Logging level (default INFO).")
    sub = p.add_subparsers(dest="cmd", required=False)

    g = sub.add_parser("gui", help="Launch the Qt viewer (original vs normalized).")
    g.add_argument("input", nargs="?", default=None, help="Point file to open on start")

    s = sub.add_parser("show", help="Normalize a point file and display it.")
    s.add_argument("input", nargs="?", default=DEFAULT_INPUT, help=f"Point file (default {DEFAULT_INPUT})")
    _add_pipeline_args(s)
    s.add_argument("--color", nargs=3, type=_fraction, metavar=("R", "G", "B"), default=list(DEFAULT_COLOR), help="Uniform point color, components in [0, 1].")
    s.add_argument("--no-color", action="store_true", help="Do not paint the points.")
    s.add_argument("--point-size", type=float, default=ViewStyle.point_size, help="Rendered point size.")

    t = sub.add_parser("stats", help="Report the robust center and scale without displaying.")
    t.add_argument("input", help="Point file")
    _add_pipeline_args(t)

    return p


def main(argv: list[str] | None = None, sink: PointSink = show_points) -> int:
    """Run the command line; ``sink`` receives the normalized points for display."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(message)s")

    if args.cmd in (None, "gui"):
        from .gui_qt import main as gui_main

        gui_main(getattr(args, "input", None))
        return EXIT_OK

    try:
        res = normalize_point_file(args.input, low=args.low, high=args.high)
    except SourceUnavailableError as e:
        logger.error(f"Error: {e}")
        return EXIT_SOURCE_UNAVAILABLE
    except EmptyInputError as e:
        logger.error(f"Error: {e}")
        return EXIT_EMPTY_INPUT

    if args.cmd == "stats":
        ext = res.stats.extents
        print(f"points: {len(res)}")
        print(f"center: {res.center[0]:.9g} {res.center[1]:.9g} {res.center[2]:.9g}")
        print(f"extents: {ext[0]:.9g} {ext[1]:.9g} {ext[2]:.9g}")
        print(f"scale: {res.scale:.9g}")
        return EXIT_OK

    color = None if args.no_color else tuple(args.color)
    sink(res.normalized, color, ViewStyle(point_size=args.point_size))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
