"""Domain models for coordinates, position fixes and dairy records."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.latitude) and math.isfinite(self.longitude)):
            raise ValueError(f"Coordinate values must be finite, got ({self.latitude}, {self.longitude}).")
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Latitude {self.latitude} is outside [-90, 90].")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"Longitude {self.longitude} is outside [-180, 180].")

    def as_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass(frozen=True, slots=True)
class PositionFix:
    """A device position reading with its horizontal accuracy in meters."""

    coordinate: Coordinate
    accuracy_m: Optional[float] = None


@dataclass(frozen=True, slots=True)
class DairyProduct:
    name: str
    price: float
    unit: str


@dataclass(slots=True)
class Dairy:
    """A dairy (milkman business) that customers can order from."""

    dairy_id: str
    business_name: str
    owner_name: str
    phone: str
    address: str
    coordinate: Coordinate
    rating: float = 0.0
    total_reviews: int = 0
    is_available: bool = False
    opens_at: Optional[str] = None
    closes_at: Optional[str] = None
    products: tuple[DairyProduct, ...] = field(default_factory=tuple)
    distance_km: Optional[float] = None
