"""
Command-line interface.

Builds a sensor layout, prints its statistics and optionally exports the
configuration and a rendered image.

    python -m securezone --sample --export zone.json --plot zone.png
"""

import argparse
import logging
import sys
from typing import List, Optional

import matplotlib

from .config import EXPORT_FILENAME, REMOVE_RADIUS
from .layout.export import load_export, save_export, zone_stats
from .layout.facade import INTERSECTION_METHODS, GeometryFacade
from .logging_config import setup_logging
from .visualization.plotting import format_sensor_list, save_zone_plot


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="securezone",
        description="Compute the secure zone covered by crossing sensor beams",
    )
    parser.add_argument("--load", metavar="PATH", help="Load sensors from an exported JSON file")
    parser.add_argument("--sample", action="store_true", help="Load the sample configuration")
    parser.add_argument("--sensor", nargs=2, type=float, action="append", default=[],
                        metavar=("X", "Y"), help="Place a sensor (repeatable)")
    parser.add_argument("--remove", nargs=2, type=float, action="append", default=[],
                        metavar=("X", "Y"), help="Remove the sensor near a position (repeatable)")
    parser.add_argument("--radius", type=float, default=REMOVE_RADIUS,
                        help=f"Pick radius for --remove (default: {REMOVE_RADIUS})")
    parser.add_argument("--check", nargs=2, type=float, action="append", default=[],
                        metavar=("X", "Y"), help="Report whether a position is inside the secure zone")
    parser.add_argument("--method", choices=sorted(INTERSECTION_METHODS), default="loop",
                        help="Intersection engine (default: loop)")
    parser.add_argument("--export", nargs="?", const=EXPORT_FILENAME, metavar="PATH",
                        help=f"Write the configuration as JSON (default name: {EXPORT_FILENAME})")
    parser.add_argument("--plot", metavar="PATH", help="Save a rendered image of the zone")
    parser.add_argument("--grid", action="store_true", help="Draw the canvas grid in --plot")
    parser.add_argument("--background", metavar="IMAGE", help="Background image for --plot")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    zone = GeometryFacade(method=args.method)

    try:
        if args.load:
            zone.load_sensors(load_export(args.load))
        if args.sample:
            zone.load_sample()
        for x, y in args.sensor:
            zone.add_sensor(x, y)
        for x, y in args.remove:
            if zone.remove_sensor(x, y, args.radius) is None:
                logger.warning(f"No sensor near ({x}, {y})")
    except (OSError, ValueError) as e:
        logger.error(str(e))
        return 1

    snapshot = zone.snapshot

    print("\n".join(format_sensor_list(snapshot)))
    for key, value in zone_stats(snapshot).items():
        print(f"  {key}: {round(value) if key == 'secureArea' else value}")
    for x, y in args.check:
        print(f"({x:g}, {y:g}): {'secure' if zone.is_secure(x, y) else 'not secure'}")

    if args.export:
        save_export(snapshot, args.export)

    if args.plot:
        matplotlib.use("Agg")
        save_zone_plot(snapshot, args.plot, show_grid=args.grid, background=args.background)
        print(f"Plot saved to: {args.plot}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
