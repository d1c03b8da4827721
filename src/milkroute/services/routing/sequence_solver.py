"""Nearest-neighbour sequencing for a delivery round.

Stop 0 is the anchor (depot or the milkman's current position) and is always
visited first. From there the solver repeatedly moves to the closest
unvisited stop, breaking ties by the lowest input index, so the same input
always yields the same order.

This is a greedy heuristic: there is no 2-opt pass or backtracking, and the
tour can be longer than optimal. Each step scans every unvisited stop, which
makes the whole solve O(n^2) in the number of stops; it is meant for
delivery rounds of tens of stops, not hundreds.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from ...config import settings
from ...models.domain import Coordinate
from ..geospatial import distance_km, round_km
from .models import OptimizationResult, RouteStop

logger = logging.getLogger(__name__)

DistanceFn = Callable[[Coordinate, Coordinate], float]


def optimize_stops(
    stops: Sequence[Coordinate],
    *,
    distance: DistanceFn = distance_km,
    max_stops: int | None = None,
) -> OptimizationResult:
    """Order ``stops`` into a short tour anchored at index 0.

    Args:
        stops: Stop coordinates; index 0 is the fixed starting point.
        distance: Pairwise distance in km (defaults to the rounded great-circle distance).
        max_stops: Stop count above which a scaling warning is logged (defaults to settings).

    Returns:
        OptimizationResult with the visiting order (a permutation of all input
        indices starting with 0) and the accumulated tour distance.
    """
    if not stops:
        return OptimizationResult(success=False, error="No locations provided")

    if len(stops) == 1:
        return OptimizationResult(
            success=True,
            order=[0],
            total_distance_km=0.0,
            stops=[RouteStop(stop_index=0, sequence=1, distance_from_prev_km=0.0)],
        )

    limit = max_stops if max_stops is not None else settings.optimizer_max_stops
    if len(stops) > limit:
        logger.warning(
            f"Optimizing {len(stops)} stops with the nearest-neighbour heuristic (O(n^2)); "
            f"rounds above {limit} stops may be slow"
        )

    visited = [False] * len(stops)
    visited[0] = True
    order = [0]
    route_stops = [RouteStop(stop_index=0, sequence=1, distance_from_prev_km=0.0)]
    total_distance = 0.0
    current = 0

    while len(order) < len(stops):
        nearest_index = -1
        min_distance = float("inf")
        for index, stop in enumerate(stops):
            if visited[index]:
                continue
            try:
                step = float(distance(stops[current], stop))
            except (ArithmeticError, TypeError, ValueError) as e:
                logger.error(f"Route optimization error between stops {current} and {index}: {e}")
                return OptimizationResult(success=False, error="Failed to optimize route")
            # strict comparison keeps the lowest index on ties
            if nearest_index == -1 or step < min_distance:
                min_distance = step
                nearest_index = index

        visited[nearest_index] = True
        order.append(nearest_index)
        route_stops.append(
            RouteStop(
                stop_index=nearest_index,
                sequence=len(order),
                distance_from_prev_km=min_distance,
            )
        )
        total_distance += min_distance
        current = nearest_index

    total_distance = round_km(total_distance)
    logger.info(f"Route optimized: order={order}, total={total_distance:.1f}km")
    return OptimizationResult(
        success=True,
        order=order,
        total_distance_km=total_distance,
        stops=route_stops,
    )
