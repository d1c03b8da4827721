"""Geocoding response schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from .routing import CoordinateModel


class GeocodeResponse(BaseModel):
    success: bool
    coordinate: Optional[CoordinateModel] = None
    display_name: Optional[str] = None
    error: Optional[str] = None


class ReverseGeocodeResponse(BaseModel):
    coordinate: CoordinateModel
    address: Optional[str] = None
