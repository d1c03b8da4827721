"""Dairy lookup endpoints."""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from ...models.domain import Coordinate
from ...schemas.dairies import DairyModel
from ...services.dairies import get_dairy, list_dairies, nearby_dairies, search_dairies

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dairies", tags=["dairies"])


def _location(lat: Optional[float], lon: Optional[float]) -> Optional[Coordinate]:
    if lat is None and lon is None:
        return None
    if lat is None or lon is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Both lat and lon are required to sort by distance.",
        )
    return Coordinate(latitude=lat, longitude=lon)


def _load(loader, *args) -> List[DairyModel]:
    try:
        return [DairyModel.from_domain(dairy) for dairy in loader(*args)]
    except FileNotFoundError as exc:
        logger.error(f"Dairy directory unavailable: {exc}")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc


@router.get("", response_model=List[DairyModel], status_code=status.HTTP_200_OK)
def dairies(
    lat: Optional[float] = Query(default=None, ge=-90.0, le=90.0),
    lon: Optional[float] = Query(default=None, ge=-180.0, le=180.0),
) -> List[DairyModel]:
    return _load(list_dairies, _location(lat, lon))


@router.get("/nearby", response_model=List[DairyModel], status_code=status.HTTP_200_OK)
def nearby(
    lat: float = Query(..., ge=-90.0, le=90.0),
    lon: float = Query(..., ge=-180.0, le=180.0),
    radius_km: Optional[float] = Query(default=None, gt=0.0),
) -> List[DairyModel]:
    return _load(nearby_dairies, Coordinate(latitude=lat, longitude=lon), radius_km)


@router.get("/search", response_model=List[DairyModel], status_code=status.HTTP_200_OK)
def search(q: str = Query(..., description="Name, owner, address or product")) -> List[DairyModel]:
    return _load(search_dairies, q)


@router.get("/{dairy_id}", response_model=DairyModel, status_code=status.HTTP_200_OK)
def dairy_detail(dairy_id: str) -> DairyModel:
    try:
        dairy = get_dairy(dairy_id)
    except FileNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    if dairy is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Dairy '{dairy_id}' not found")
    return DairyModel.from_domain(dairy)
