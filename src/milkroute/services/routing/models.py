"""Routing domain models."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Optional

from ...models.domain import Coordinate


class RouteOutcome(str, enum.Enum):
    ROUTED = "routed"
    FALLBACK = "fallback"
    FAILED = "failed"


@dataclass(slots=True)
class RouteResult:
    """Outcome of a route computation between two coordinates.

    ``FALLBACK`` results carry a straight-line ``distance_km`` and no
    duration or path; ``FAILED`` results carry no distance at all.
    """

    outcome: RouteOutcome
    distance_km: Optional[float] = None
    duration_min: Optional[int] = None
    path: List[Coordinate] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.outcome is RouteOutcome.ROUTED

    @property
    def is_fallback(self) -> bool:
        return self.outcome is RouteOutcome.FALLBACK


@dataclass(slots=True)
class RouteStop:
    stop_index: int
    sequence: int
    distance_from_prev_km: float


@dataclass(slots=True)
class OptimizationResult:
    success: bool
    order: Optional[List[int]] = None
    total_distance_km: Optional[float] = None
    stops: List[RouteStop] = field(default_factory=list)
    error: Optional[str] = None
