"""Tracking endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...schemas.tracking import TrackingStatusRequest, TrackingStatusResponse
from ...services.geospatial import distance_km
from ...services.tracking import derive_status

router = APIRouter(prefix="/tracking", tags=["tracking"])


@router.post("/status", response_model=TrackingStatusResponse, status_code=status.HTTP_200_OK)
def tracking_status(payload: TrackingStatusRequest) -> TrackingStatusResponse:
    """Status a live position update would produce for this mover/destination pair."""
    distance = distance_km(payload.mover.to_domain(), payload.destination.to_domain())
    return TrackingStatusResponse(status=derive_status(distance), distance_km=distance)
