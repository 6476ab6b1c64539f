import pytest

from maproster.core.geo import GeoPoint, haversine_m, normalize_lat_lng


def test_haversine_zero_for_same_point():
    for p in [GeoPoint(0, 0), GeoPoint(-23.55, -46.63), GeoPoint(89.9, 179.9)]:
        assert haversine_m(p, p) == 0


def test_haversine_is_symmetric():
    a = GeoPoint(lat=-23.5874, lng=-46.6576)
    b = GeoPoint(lat=-23.5417, lng=-46.6293)
    assert haversine_m(a, b) == pytest.approx(haversine_m(b, a))


def test_haversine_one_degree_of_latitude():
    # 2*pi*6371000/360
    assert haversine_m(GeoPoint(0, 0), GeoPoint(1, 0)) == pytest.approx(111_194.9, abs=0.5)


def test_haversine_grows_with_separation():
    origin = GeoPoint(0, 0)
    distances = [haversine_m(origin, GeoPoint(0, d)) for d in (0.001, 0.01, 0.1, 1.0, 10.0)]
    assert distances == sorted(distances)
    assert len(set(distances)) == len(distances)


def test_haversine_antipodal_points_do_not_fail():
    d = haversine_m(GeoPoint(0, 0), GeoPoint(0, 180))
    assert d == pytest.approx(20_015_086.8, rel=1e-6)


@pytest.mark.parametrize(
    ("lat", "lng", "expected"),
    [
        (10.0, 20.0, (10.0, 20.0)),
        (90.001, 0.0, (90.0, 0.0)),
        (-91.0, 0.0, (-90.0, 0.0)),
        (0.0, 180.0, (0.0, 180.0)),
        (0.0, -180.0, (0.0, -180.0)),
        (0.0, 180.0005, (0.0, -179.9995)),
        (0.0, -180.5, (0.0, 179.5)),
    ],
)
def test_normalize_lat_lng_clamps_and_wraps(lat, lng, expected):
    out = normalize_lat_lng(lat, lng)
    assert out == pytest.approx(expected)
