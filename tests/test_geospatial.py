import pytest

from src.milkroute.models.domain import Coordinate
from src.milkroute.services.geospatial import distance_km, haversine_km, round_km

from fakes import CUSTOMER, MILKMAN


def test_distance_to_self_is_zero():
    for point in (MILKMAN, Coordinate(latitude=-33.9, longitude=151.2), Coordinate(latitude=90.0, longitude=0.0)):
        assert distance_km(point, point) == 0.0


def test_distance_is_symmetric():
    pairs = [
        (MILKMAN, CUSTOMER),
        (Coordinate(latitude=30.7333, longitude=76.7794), Coordinate(latitude=30.6942, longitude=76.8534)),
        (Coordinate(latitude=51.5, longitude=-0.12), Coordinate(latitude=40.7, longitude=-74.0)),
    ]
    for a, b in pairs:
        assert distance_km(a, b) == distance_km(b, a)


def test_gurugram_delivery_distance_is_deterministic():
    first = distance_km(MILKMAN, CUSTOMER)
    assert all(distance_km(MILKMAN, CUSTOMER) == first for _ in range(10))
    assert first == 1.4


def test_distance_along_meridian_is_additive():
    a = Coordinate(latitude=30.0, longitude=76.0)
    b = Coordinate(latitude=30.5, longitude=76.0)
    c = Coordinate(latitude=31.0, longitude=76.0)

    assert distance_km(a, c) == pytest.approx(distance_km(a, b) + distance_km(b, c), abs=0.1)


def test_distance_grows_with_separation():
    origin = Coordinate(latitude=30.7333, longitude=76.7794)
    distances = [
        distance_km(origin, Coordinate(latitude=30.7333 + step * 0.01, longitude=76.7794))
        for step in range(1, 6)
    ]
    assert distances == sorted(distances)
    assert len(set(distances)) == len(distances)


def test_one_degree_of_latitude():
    assert haversine_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(111.195, abs=0.001)


def test_round_km_rounds_half_up():
    assert round_km(0.25) == 0.3
    assert round_km(1.04) == 1.0
    assert round_km(0.0) == 0.0


@pytest.mark.parametrize(
    "latitude, longitude",
    [(91.0, 0.0), (-90.5, 10.0), (10.0, 180.5), (0.0, float("nan"))],
)
def test_coordinate_rejects_out_of_range_values(latitude, longitude):
    with pytest.raises(ValueError):
        Coordinate(latitude=latitude, longitude=longitude)
