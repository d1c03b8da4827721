"""Dairy lookup helpers: distance-sorted listing, radius and text search."""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from ...config import settings
from ...data.dairies_repository import load_dairies
from ...models.domain import Coordinate, Dairy
from ..geospatial import distance_km


def list_dairies(location: Optional[Coordinate] = None) -> list[Dairy]:
    """All dairies; nearest first with ``distance_km`` filled in when a location is given."""

    dairies = load_dairies()
    if location is None:
        return list(dairies)
    with_distance = [replace(dairy, distance_km=distance_km(location, dairy.coordinate)) for dairy in dairies]
    return sorted(with_distance, key=lambda dairy: dairy.distance_km)


def nearby_dairies(location: Coordinate, radius_km: Optional[float] = None) -> list[Dairy]:
    radius = settings.nearby_radius_km if radius_km is None else radius_km
    return [dairy for dairy in list_dairies(location) if dairy.distance_km <= radius]


def search_dairies(query: str) -> list[Dairy]:
    """Case-insensitive match on business name, owner, address or any product name."""

    needle = query.strip().lower()
    if not needle:
        return list_dairies()
    return [
        dairy
        for dairy in load_dairies()
        if needle in dairy.business_name.lower()
        or needle in dairy.owner_name.lower()
        or needle in dairy.address.lower()
        or any(needle in product.name.lower() for product in dairy.products)
    ]


def get_dairy(dairy_id: str) -> Optional[Dairy]:
    for dairy in load_dairies():
        if dairy.dairy_id == dairy_id:
            return dairy
    return None
