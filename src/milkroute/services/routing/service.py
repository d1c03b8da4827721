"""Route engine: routed distance/duration with straight-line degradation."""

from __future__ import annotations

import asyncio
import logging
import math

import httpx

from ...config import settings
from ...models.domain import Coordinate
from ..geospatial import distance_km, round_km
from .models import RouteOutcome, RouteResult
from .osrm_client import OSRMClient, OSRMRouteError, parse_geometry

logger = logging.getLogger(__name__)


class RouteEngine:
    """Computes driving routes through an injected OSRM client.

    Provider failures (no route, non-Ok code) and transport failures
    (timeout, unreachable) are handled the same way: when fallback is
    enabled the result carries the straight-line distance and is flagged
    ``FALLBACK``; otherwise it is ``FAILED`` with no distance.
    """

    def __init__(
        self,
        client: OSRMClient | None = None,
        *,
        timeout: float | None = None,
        fallback_enabled: bool | None = None,
    ) -> None:
        self.client = client or OSRMClient()
        self.timeout = timeout if timeout is not None else settings.route_timeout_seconds
        self.fallback_enabled = settings.route_fallback_enabled if fallback_enabled is None else fallback_enabled

    async def compute_route(self, origin: Coordinate, destination: Coordinate) -> RouteResult:
        logger.debug(f"Calculating route from {origin} to {destination}")
        try:
            data = await asyncio.wait_for(self.client.route([origin, destination]), timeout=self.timeout)
        except OSRMRouteError as e:
            logger.warning(f"Routing provider failed: {e}")
            return self._degrade(origin, destination, f"Routing provider failed: {e}")
        except (asyncio.TimeoutError, TimeoutError) as e:
            logger.warning(f"Routing service timed out after {self.timeout:.1f}s: {e}")
            return self._degrade(origin, destination, "Routing service timed out")
        except (ConnectionError, httpx.HTTPError) as e:
            logger.warning(f"Routing service unreachable: {e}")
            return self._degrade(origin, destination, f"Routing service unreachable: {e}")

        try:
            route = data["routes"][0]
            path = parse_geometry(route.get("geometry"))
            distance = round_km(float(route["distance"]) / 1000.0)
            duration = math.floor(float(route["duration"]) / 60.0 + 0.5)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Routing provider returned a malformed route: {e!r}")
            return self._degrade(origin, destination, f"Routing provider returned a malformed route: {e!r}")

        logger.info(f"Route calculated: {distance}km, {duration}mins, {len(path)} points")
        return RouteResult(
            outcome=RouteOutcome.ROUTED,
            distance_km=distance,
            duration_min=duration,
            path=path,
        )

    def _degrade(self, origin: Coordinate, destination: Coordinate, reason: str) -> RouteResult:
        if not self.fallback_enabled:
            return RouteResult(outcome=RouteOutcome.FAILED, error=f"{reason}. Unable to calculate route")
        return RouteResult(
            outcome=RouteOutcome.FALLBACK,
            distance_km=distance_km(origin, destination),
            error=f"{reason}. Using straight-line distance",
        )


def build_route_engine() -> RouteEngine:
    return RouteEngine(OSRMClient())
