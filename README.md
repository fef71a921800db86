# swissgrid

Convert coordinates between the Swiss national grids (LV03 / CH1903 and
LV95 / CH1903+) and WGS84. The conversions use the approximate formulas
published by swisstopo. Inside Switzerland they are accurate to about one
metre.

## Installation

```
pip install swissgrid
```

## Usage

```python
from swissgrid.coordinates import Lv03, Lv95, Wgs84, InvalidCoordinateError

# Federal Palace, Bern
bundeshaus = Lv03(north=199_498.43, east=600_421.43, altitude=542.8)
wgs = bundeshaus.to_wgs84()
print(wgs.latitude, wgs.longitude, wgs.altitude)

# Back again
lv03 = wgs.to_lv03()
print(lv03.distance_squared(bundeshaus))  # well below 1 m²

# LV95 is LV03 shifted by 1,000,000 m (north) and 2,000,000 m (east)
lv95 = bundeshaus.to_lv95()
print(lv95.north, lv95.east)
print(lv95.to_lv03())
print(lv95.to_wgs84())
```

All three point types are frozen dataclasses with the fields `north`,
`east` and `altitude` (`Lv03`, `Lv95`) or `longitude`, `latitude` and
`altitude` (`Wgs84`). Angles are in degrees and altitudes are in metres.

`Lv03` and `Lv95` check their coordinates when you create them. For LV03
the north value must lie in [70 000, 300 000) and the east value in
[480 000, 850 000). North must not be larger than east. LV95 uses the same
ranges shifted by the offsets above. A point outside these ranges raises
`InvalidCoordinateError`, which is a subclass of `ValueError`:

```python
try:
    Lv03(north=600_000.0, east=200_000.0, altitude=500.0)  # axes swapped
except InvalidCoordinateError as exc:
    print(exc)
```

`Wgs84.to_lv03()` and `Wgs84.to_lv95()` raise the same error when the
point falls outside the Swiss grid.

## Round-trip error map

`swissgrid.errormap` measures how far a point moves when it is converted
from LV03 to WGS84 and back. It does this on a one-kilometre grid that
covers the whole LV03 area, at an altitude of 1000 m, and writes the result
as an image. The red channel of each pixel holds ten times the horizontal
error in metres, capped at 255. Grid points that are not valid LV03
coordinates are drawn black.

```
swissgrid-errormap              # writes Output.bmp
swissgrid-errormap error.png    # any format Pillow can write
```

The same functions can be called from Python:

```python
from swissgrid.errormap import error_grid, roundtrip_error, save_error_map

print(roundtrip_error(200_000.0, 600_000.0, 1000.0))  # metres, or None if invalid
grid = error_grid()        # rows go north, columns go east
save_error_map("error.bmp")
```

## Running the tests

```
pip install swissgrid[test]
pytest
```