"""Routing request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from ..models.domain import Coordinate
from ..services.routing.models import OptimizationResult, RouteOutcome, RouteResult


class CoordinateModel(BaseModel):
    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)

    def to_domain(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)

    @classmethod
    def from_domain(cls, coordinate: Coordinate) -> "CoordinateModel":
        return cls(latitude=coordinate.latitude, longitude=coordinate.longitude)


class DistanceRequest(BaseModel):
    origin: CoordinateModel
    destination: CoordinateModel


class DistanceResponse(BaseModel):
    distance_km: float


class RouteRequest(BaseModel):
    origin: CoordinateModel
    destination: CoordinateModel


class RouteResponse(BaseModel):
    outcome: RouteOutcome
    success: bool
    distance_km: Optional[float] = None
    duration_min: Optional[int] = None
    path: List[CoordinateModel] = Field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def from_result(cls, result: RouteResult) -> "RouteResponse":
        return cls(
            outcome=result.outcome,
            success=result.success,
            distance_km=result.distance_km,
            duration_min=result.duration_min,
            path=[CoordinateModel.from_domain(point) for point in result.path],
            error=result.error,
        )


class OptimizeRequest(BaseModel):
    stops: List[CoordinateModel] = Field(
        ...,
        description="Stops to sequence; the first entry is the starting point (depot or current location).",
    )


class RouteStopModel(BaseModel):
    stop_index: int
    sequence: int
    distance_from_prev_km: float


class OptimizeResponse(BaseModel):
    success: bool
    order: List[int]
    total_distance_km: float
    stops: List[RouteStopModel]

    @classmethod
    def from_result(cls, result: OptimizationResult) -> "OptimizeResponse":
        return cls(
            success=result.success,
            order=list(result.order or []),
            total_distance_km=result.total_distance_km or 0.0,
            stops=[
                RouteStopModel(
                    stop_index=stop.stop_index,
                    sequence=stop.sequence,
                    distance_from_prev_km=stop.distance_from_prev_km,
                )
                for stop in result.stops
            ],
        )
