"""Dairy response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from ..models.domain import Dairy
from .routing import CoordinateModel


class DairyProductModel(BaseModel):
    name: str
    price: float
    unit: str


class DairyModel(BaseModel):
    dairy_id: str
    business_name: str
    owner_name: str
    phone: str
    address: str
    coordinate: CoordinateModel
    rating: float
    total_reviews: int
    is_available: bool
    opens_at: Optional[str] = None
    closes_at: Optional[str] = None
    products: List[DairyProductModel]
    distance_km: Optional[float] = None

    @classmethod
    def from_domain(cls, dairy: Dairy) -> "DairyModel":
        return cls(
            dairy_id=dairy.dairy_id,
            business_name=dairy.business_name,
            owner_name=dairy.owner_name,
            phone=dairy.phone,
            address=dairy.address,
            coordinate=CoordinateModel.from_domain(dairy.coordinate),
            rating=dairy.rating,
            total_reviews=dairy.total_reviews,
            is_available=dairy.is_available,
            opens_at=dairy.opens_at,
            closes_at=dairy.closes_at,
            products=[
                DairyProductModel(name=product.name, price=product.price, unit=product.unit)
                for product in dairy.products
            ],
            distance_km=dairy.distance_km,
        )
