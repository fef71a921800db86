"""Swiss grid coordinates (LV03/CH1903, LV95/CH1903+) and WGS84 conversions.

The conversions use the approximate formulas published by swisstopo in
"Näherungsformeln für die Transformation zwischen Schweizer
Projektionskoordinaten und WGS84".
"""

from __future__ import annotations

from dataclasses import dataclass

_LV03_NORTH_RANGE = (70_000.0, 300_000.0)
_LV03_EAST_RANGE = (480_000.0, 850_000.0)
_LV95_NORTH_OFFSET = 1_000_000.0
_LV95_EAST_OFFSET = 2_000_000.0


class InvalidCoordinateError(ValueError):
    """Raised when a point has no valid representation in the Swiss grid."""


def _check_lv03(north: float, east: float) -> None:
    low, high = _LV03_NORTH_RANGE
    if not low <= north < high:
        raise InvalidCoordinateError(
            f"north coordinate {north!r} outside [{low}, {high})"
        )
    low, high = _LV03_EAST_RANGE
    if not low <= east < high:
        raise InvalidCoordinateError(
            f"east coordinate {east!r} outside [{low}, {high})"
        )
    if north > east:
        raise InvalidCoordinateError("east coordinate must be larger than north")


def _build(cls, north: float, east: float, altitude: float):
    """Create a grid point without range validation."""
    point = object.__new__(cls)
    object.__setattr__(point, "north", north)
    object.__setattr__(point, "east", east)
    object.__setattr__(point, "altitude", altitude)
    return point


@dataclass(frozen=True)
class Wgs84:
    """A WGS84 position in degrees, with altitude in meters."""

    longitude: float
    latitude: float
    altitude: float

    def to_lv03(self) -> Lv03:
        """Convert to LV03; raises InvalidCoordinateError outside the grid."""
        phi = (3600.0 * self.latitude - 169_028.66) / 10_000.0
        phi_2 = phi * phi
        phi_3 = phi * phi_2
        lam = (3600.0 * self.longitude - 26_782.5) / 10_000.0
        lam_2 = lam * lam
        lam_3 = lam * lam_2

        e = (
            2_600_072.37
            + 211_455.93 * lam
            - 10938.51 * lam * phi
            - 0.36 * lam * phi_2
            - 44.54 * lam_3
        )
        n = (
            1_200_147.07
            + 308_807.95 * phi
            + 3745.25 * lam_2
            + 76.63 * phi_2
            - 194.56 * lam_2 * phi
            + 119.79 * phi_3
        )
        east = e - 2_000_000.00
        north = n - 1_000_000.00
        altitude = self.altitude - 49.55 + 2.73 * lam + 6.94 * phi
        return Lv03(north, east, altitude)

    def to_lv95(self) -> Lv95:
        """Convert to LV95; raises InvalidCoordinateError outside the grid."""
        return self.to_lv03().to_lv95()


@dataclass(frozen=True)
class Lv03:
    """A point in LV03 (CH1903): north (X), east (Y), altitude above sea level."""

    north: float
    east: float
    altitude: float

    def __post_init__(self) -> None:
        _check_lv03(self.north, self.east)

    def to_wgs84(self) -> Wgs84:
        """Convert to WGS84."""
        y = (self.east - 600_000.0) / 1_000_000.0
        y_2 = y * y
        y_3 = y * y_2
        x = (self.north - 200_000.0) / 1_000_000.0
        x_2 = x * x
        x_3 = x * x_2
        lam = 2.6779094 + 4.728982 * y + 0.791484 * y * x + 0.1306 * y * x_2 - 0.0436 * y_3
        phi = (
            16.9023892
            + 3.238272 * x
            - 0.270978 * y_2
            - 0.002528 * x_2
            - 0.0447 * y_2 * x
            - 0.0140 * x_3
        )
        altitude = self.altitude + 49.55 - 12.6 * y - 22.64 * x
        return Wgs84(
            longitude=lam * 100.0 / 36.0,
            latitude=phi * 100.0 / 36.0,
            altitude=altitude,
        )

    def to_lv95(self) -> Lv95:
        """Shift into the LV95 frame."""
        return _build(
            Lv95,
            self.north + _LV95_NORTH_OFFSET,
            self.east + _LV95_EAST_OFFSET,
            self.altitude,
        )

    def distance_squared(self, other: Lv03) -> float:
        """Squared 3D distance to another LV03 point."""
        d_north = self.north - other.north
        d_east = self.east - other.east
        d_altitude = self.altitude - other.altitude
        return d_north * d_north + d_east * d_east + d_altitude * d_altitude


@dataclass(frozen=True)
class Lv95:
    """A point in LV95 (CH1903+): north (X), east (Y), altitude above sea level."""

    north: float
    east: float
    altitude: float

    def __post_init__(self) -> None:
        _check_lv03(self.north - _LV95_NORTH_OFFSET, self.east - _LV95_EAST_OFFSET)

    def to_lv03(self) -> Lv03:
        """Shift into the LV03 frame."""
        return _build(
            Lv03,
            self.north - _LV95_NORTH_OFFSET,
            self.east - _LV95_EAST_OFFSET,
            self.altitude,
        )

    def to_wgs84(self) -> Wgs84:
        """Convert to WGS84."""
        return self.to_lv03().to_wgs84()