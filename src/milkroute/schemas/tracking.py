"""Tracking request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel

from ..services.tracking import DeliveryStatus
from .routing import CoordinateModel


class TrackingStatusRequest(BaseModel):
    mover: CoordinateModel
    destination: CoordinateModel


class TrackingStatusResponse(BaseModel):
    status: DeliveryStatus
    distance_km: float
