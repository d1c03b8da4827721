import json

import pytest

from src.milkroute.data.dairies_repository import load_dairies
from src.milkroute.models.domain import Coordinate
from src.milkroute.services.dairies import get_dairy, list_dairies, nearby_dairies, search_dairies

CITY_CENTRE = Coordinate(latitude=30.7333, longitude=76.7794)


def test_load_dairies_parses_directory(dairies_file):
    dairies = load_dairies()

    assert len(dairies) == 8
    verka = dairies[0]
    assert verka.dairy_id == "1"
    assert verka.business_name == "Verka Dairy Farm"
    assert verka.coordinate == Coordinate(latitude=30.741, longitude=76.7791)
    assert verka.opens_at is not None
    assert any(product.name == "Paneer" for product in verka.products)
    assert all(dairy.distance_km is None for dairy in dairies)


def test_load_dairies_skips_invalid_rows(tmp_path, caplog):
    source = tmp_path / "dairies.json"
    source.write_text(
        json.dumps(
            [
                {"id": 1, "business_name": "Good Dairy", "latitude": 30.7, "longitude": 76.7},
                {"id": 2, "business_name": "No Coordinates"},
                {"id": 3, "business_name": "Off The Map", "latitude": 123.0, "longitude": 76.7},
            ]
        ),
        encoding="utf-8",
    )

    dairies = load_dairies(source)

    assert [dairy.dairy_id for dairy in dairies] == ["1"]
    assert "Skipping invalid dairy row" in caplog.text


def test_load_dairies_requires_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_dairies(tmp_path / "missing.json")


def test_load_dairies_requires_array(tmp_path):
    source = tmp_path / "dairies.json"
    source.write_text('{"id": 1}', encoding="utf-8")

    with pytest.raises(ValueError):
        load_dairies(source)


def test_list_dairies_sorted_by_distance(dairies_file):
    dairies = list_dairies(CITY_CENTRE)

    assert [dairy.dairy_id for dairy in dairies][:5] == ["1", "2", "8", "7", "3"]
    assert [dairy.distance_km for dairy in dairies][:5] == [0.9, 1.5, 1.7, 1.9, 2.9]
    distances = [dairy.distance_km for dairy in dairies]
    assert distances == sorted(distances)


def test_list_dairies_leaves_cached_rows_untouched(dairies_file):
    list_dairies(CITY_CENTRE)

    assert all(dairy.distance_km is None for dairy in list_dairies())


@pytest.mark.parametrize(
    "radius, expected",
    [
        (0.5, []),
        (1.0, ["1"]),
        (1.6, ["1", "2"]),
    ],
)
def test_nearby_dairies_filters_by_radius(dairies_file, radius, expected):
    assert [dairy.dairy_id for dairy in nearby_dairies(CITY_CENTRE, radius)] == expected


def test_nearby_dairies_default_radius_excludes_neighbouring_towns(dairies_file):
    ids = {dairy.dairy_id for dairy in nearby_dairies(CITY_CENTRE)}

    assert {"1", "2", "3", "7", "8"} <= ids
    assert "5" not in ids
    assert "6" not in ids


@pytest.mark.parametrize(
    "query, expected",
    [
        ("paneer", {"1", "5", "8"}),
        ("PANEER", {"1", "5", "8"}),
        ("mohali", {"6"}),
        ("Harjeet", {"2"}),
        ("camel milk", set()),
    ],
)
def test_search_dairies(dairies_file, query, expected):
    assert {dairy.dairy_id for dairy in search_dairies(query)} == expected


def test_blank_search_returns_everything(dairies_file):
    assert len(search_dairies("   ")) == 8


def test_get_dairy(dairies_file):
    assert get_dairy("3").business_name == "Amul Fresh Dairy"
    assert get_dairy("99") is None
