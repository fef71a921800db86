import math
import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from swissgrid.coordinates import InvalidCoordinateError, Lv03, Lv95, Wgs84


def _roundtrip_lv(lv03):
    back = lv03.to_lv95().to_lv03()
    assert lv03.distance_squared(back) < 0.001


def _roundtrip_wgs(lv):
    back = lv.to_wgs84().to_lv03()
    assert back.distance_squared(lv) < 1.0


def _check_conversions(lv, wgs):
    wgs_converted = lv.to_wgs84()
    assert abs(wgs_converted.longitude - wgs.longitude) < 0.001
    assert abs(wgs_converted.latitude - wgs.latitude) < 0.001
    assert abs(wgs_converted.altitude - wgs.altitude) < 5.0

    lv_converted = wgs.to_lv03()
    assert abs(lv_converted.east - lv.east) < 2.0
    assert abs(lv_converted.north - lv.north) < 2.0
    assert abs(lv_converted.altitude - lv.altitude) < 5.0

    _roundtrip_wgs(lv)
    _roundtrip_lv(lv)


def test_random_locations():
    rng = random.Random(13)
    for _ in range(1000):
        lv03 = Lv03(
            70_000.0 + (300_000.0 - 70_000.0) * rng.random(),
            480_000.0 + (850_000.0 - 480_000.0) * rng.random(),
            400.0 + (5_000.0 - 400.0) * rng.random(),
        )
        new_lv03 = lv03.to_wgs84().to_lv03()
        assert abs(lv03.east - new_lv03.east) < 5.0
        assert abs(lv03.north - new_lv03.north) < 5.0
        assert abs(lv03.altitude - new_lv03.altitude) < 1.0
        assert lv03.distance_squared(new_lv03) < 30.0


def test_bundeshaus():
    lv = Lv03(199_498.43, 600_421.43, 542.8)
    wgs = Wgs84(longitude=7.44417, latitude=46.94658, altitude=591.8)
    _check_conversions(lv, wgs)


def test_matterhorn():
    lv = Lv03(91_673.72, 617_049.89, 4477.4)
    wgs = Wgs84(longitude=7.65861, latitude=45.97642, altitude=4532.9)
    _check_conversions(lv, wgs)


def test_700_100():
    lv = Lv03(100_000.0, 700_000.0, 1000.0)
    wgs = Wgs84(longitude=8.730497076, latitude=46.044130339, altitude=1050.0)
    _check_conversions(lv, wgs)


def test_positive():
    point = Lv95(1_100_000.0, 2_700_000.0, 1000.0)
    assert point.to_lv03() == Lv03(100_000.0, 700_000.0, 1000.0)


def test_negative():
    with pytest.raises(InvalidCoordinateError):
        Lv03(-1.0, 2.0, 5.0)
    with pytest.raises(InvalidCoordinateError):
        Lv03(1.0, -2.0, 5.0)
    assert Lv03(250_000.0, 500_000.0, -5.0).altitude == -5.0


def test_coordinates_swapped():
    with pytest.raises(InvalidCoordinateError):
        Lv03(600_000.0, 200_000.0, 500.0)


def test_lv95_out_of_range():
    with pytest.raises(InvalidCoordinateError):
        Lv95(100_000.0, 700_000.0, 1000.0)


def test_nan_is_invalid():
    with pytest.raises(InvalidCoordinateError):
        Lv03(math.nan, 600_000.0, 0.0)


def test_distance():
    p1 = Lv03(200_000.0, 600_000.0, 500.0)
    p2 = Lv03(200_002.0, 600_000.0, 500.0)
    assert p1.distance_squared(p2) == 4.0


def test_lv_conversion():
    p1 = Lv03(200_000.0, 600_000.0, 500.0)
    p2 = p1.to_lv95()
    assert p2.to_lv03() == p1
    assert p2.east == p1.east + 2_000_000.0
    assert p2.north == p1.north + 1_000_000.0


def test_lv95_to_wgs84_matches_lv03():
    p1 = Lv03(100_000.0, 700_000.0, 1000.0)
    assert p1.to_lv95().to_wgs84() == p1.to_wgs84()


def test_wgs84_to_lv95():
    wgs = Wgs84(longitude=8.730497076, latitude=46.044130339, altitude=1050.0)
    lv95 = wgs.to_lv95()
    assert abs(lv95.north - 1_100_000.0) < 2.0
    assert abs(lv95.east - 2_700_000.0) < 2.0


def test_wgs84_outside_switzerland():
    with pytest.raises(InvalidCoordinateError):
        Wgs84(longitude=0.0, latitude=0.0, altitude=0.0).to_lv03()


@given(st.floats(), st.floats(), st.floats(allow_nan=False, allow_infinity=False))
def test_construction_invariant(north, east, altitude):
    try:
        point = Lv03(north, east, altitude)
    except InvalidCoordinateError:
        assert not (70_000.0 <= north < 300_000.0 and 480_000.0 <= east < 850_000.0)
    else:
        assert 70_000.0 <= point.north < 300_000.0
        assert 480_000.0 <= point.east < 850_000.0


@given(
    st.floats(min_value=70_100.0, max_value=299_900.0),
    st.floats(min_value=480_100.0, max_value=849_900.0),
    st.floats(min_value=-500.0, max_value=5_000.0),
)
def test_roundtrip_property(north, east, altitude):
    lv03 = Lv03(north, east, altitude)
    back = lv03.to_wgs84().to_lv03()
    assert lv03.distance_squared(back) < 30.0