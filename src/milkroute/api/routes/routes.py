"""Routing endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ...schemas.routing import (
    DistanceRequest,
    DistanceResponse,
    OptimizeRequest,
    OptimizeResponse,
    RouteRequest,
    RouteResponse,
)
from ...services.geospatial import distance_km
from ...services.routing.sequence_solver import optimize_stops
from ...services.routing.service import build_route_engine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/routes", tags=["routes"])


@router.post("/distance", response_model=DistanceResponse, status_code=status.HTTP_200_OK)
def distance(payload: DistanceRequest) -> DistanceResponse:
    return DistanceResponse(distance_km=distance_km(payload.origin.to_domain(), payload.destination.to_domain()))


@router.post("/route", response_model=RouteResponse, status_code=status.HTTP_200_OK)
async def route(payload: RouteRequest) -> RouteResponse:
    """Driving route between two points; degrades to straight-line distance when routing fails."""
    engine = build_route_engine()
    result = await engine.compute_route(payload.origin.to_domain(), payload.destination.to_domain())
    return RouteResponse.from_result(result)


@router.post("/optimize", response_model=OptimizeResponse, status_code=status.HTTP_200_OK)
def optimize(payload: OptimizeRequest) -> OptimizeResponse:
    try:
        result = optimize_stops([stop.to_domain() for stop in payload.stops])
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    if not result.success:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error)
    return OptimizeResponse.from_result(result)
