"""Geocoding endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Query, status

from ...models.domain import Coordinate
from ...schemas.geocoding import GeocodeResponse, ReverseGeocodeResponse
from ...schemas.routing import CoordinateModel
from ...services.geocoding import build_geocoding_gateway

router = APIRouter(prefix="/geocode", tags=["geocoding"])


@router.get("/search", response_model=GeocodeResponse, status_code=status.HTTP_200_OK)
async def search(q: str = Query(..., description="Free-text address to resolve")) -> GeocodeResponse:
    gateway = build_geocoding_gateway()
    result = await gateway.resolve_address(q)
    return GeocodeResponse(
        success=result.success,
        coordinate=CoordinateModel.from_domain(result.coordinate) if result.coordinate else None,
        display_name=result.display_name,
        error=result.error,
    )


@router.get("/reverse", response_model=ReverseGeocodeResponse, status_code=status.HTTP_200_OK)
async def reverse(
    lat: float = Query(..., ge=-90.0, le=90.0),
    lon: float = Query(..., ge=-180.0, le=180.0),
) -> ReverseGeocodeResponse:
    point = Coordinate(latitude=lat, longitude=lon)
    gateway = build_geocoding_gateway()
    address = await gateway.resolve_coordinate(point)
    return ReverseGeocodeResponse(coordinate=CoordinateModel.from_domain(point), address=address)
