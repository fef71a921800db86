"""Render how the LV03 -> WGS84 -> LV03 round-trip error spreads over Switzerland."""

from __future__ import annotations

import argparse
import math

from PIL import Image

from swissgrid.coordinates import InvalidCoordinateError, Lv03

_EAST_START = 480_000.0
_NORTH_START = 70_000.0
_STEP = 1000.0
_WIDTH = 850 - 480
_HEIGHT = 300 - 70
_ALTITUDE = 1000.0


def roundtrip_error(north, east, altitude):
    """Horizontal error in meters of a round trip through WGS84, or None if invalid."""
    try:
        lv03 = Lv03(north, east, altitude)
        converted = lv03.to_wgs84().to_lv03()
    except InvalidCoordinateError:
        return None
    return math.hypot(lv03.north - converted.north, lv03.east - converted.east)


def error_grid():
    """Round-trip errors on a 1 km grid; rows go north, columns go east."""
    return [
        [
            roundtrip_error(
                _NORTH_START + _STEP * y, _EAST_START + _STEP * x, _ALTITUDE
            )
            for x in range(_WIDTH)
        ]
        for y in range(_HEIGHT)
    ]


def _pixel(error):
    if error is None:
        return (0, 0, 0)
    return (max(0, min(255, int(10.0 * error))), 0, 0)


def save_error_map(path):
    """Write the error grid as an image whose red channel is ten times the error."""
    image = Image.new("RGB", (_WIDTH, _HEIGHT))
    image.putdata([_pixel(error) for row in error_grid() for error in row])
    image.save(path)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Draw the round-trip conversion error across Switzerland."
    )
    parser.add_argument("output", nargs="?", default="Output.bmp", help="image file to write")
    args = parser.parse_args(argv)
    save_error_map(args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())