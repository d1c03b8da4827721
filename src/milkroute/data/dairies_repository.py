"""Dairy directory loader backed by a JSON data file."""

from __future__ import annotations

import functools
import json
import logging
from pathlib import Path
from typing import Any, Optional

from ..config import settings
from ..models.domain import Coordinate, Dairy, DairyProduct

logger = logging.getLogger(__name__)


def _parse_dairy(row: dict[str, Any]) -> Dairy:
    hours = row.get("working_hours") or {}
    return Dairy(
        dairy_id=str(row["id"]).strip(),
        business_name=str(row["business_name"]).strip(),
        owner_name=str(row.get("owner_name") or "").strip(),
        phone=str(row.get("phone") or "").strip(),
        address=str(row.get("address") or "").strip(),
        coordinate=Coordinate(latitude=float(row["latitude"]), longitude=float(row["longitude"])),
        rating=float(row.get("rating") or 0.0),
        total_reviews=int(row.get("total_reviews") or 0),
        is_available=bool(row.get("is_available", False)),
        opens_at=hours.get("start"),
        closes_at=hours.get("end"),
        products=tuple(
            DairyProduct(name=str(item["name"]), price=float(item["price"]), unit=str(item.get("unit") or ""))
            for item in row.get("products") or ()
        ),
    )


@functools.lru_cache(maxsize=1)
def load_dairies(source: Optional[Path] = None) -> tuple[Dairy, ...]:
    """Load dairies from the configured JSON file."""

    json_path = source or settings.dairies_file
    if not json_path.exists():
        raise FileNotFoundError(f"Dairy file not found: {json_path}")

    with json_path.open(mode="r", encoding="utf-8") as handle:
        rows = json.load(handle)
    if not isinstance(rows, list):
        raise ValueError(f"Dairy file '{json_path}' must contain a JSON array.")

    dairies: list[Dairy] = []
    for row in rows:
        try:
            dairies.append(_parse_dairy(row))
        except (KeyError, TypeError, ValueError) as e:
            # Skip invalid rows but continue processing
            logger.warning(f"Skipping invalid dairy row {row!r}: {e}")
    return tuple(dairies)
