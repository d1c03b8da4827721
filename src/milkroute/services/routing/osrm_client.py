"""HTTP client for interacting with the OSRM route service."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Sequence

import httpx

from ...config import settings
from ...models.domain import Coordinate

logger = logging.getLogger(__name__)


class OSRMRouteError(ValueError):
    """OSRM answered, but without a usable route (non-Ok code or empty route list)."""


class OSRMClient:
    def __init__(
        self,
        base_url: str | None = None,
        profile: str | None = None,
        geometries: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        backoff_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.osrm_base_url).rstrip("/")
        if not self.base_url:
            raise ValueError("OSRM base URL is not configured.")
        self.profile = profile or settings.osrm_profile
        self.geometries = geometries or settings.osrm_geometries
        self.timeout = timeout if timeout is not None else settings.osrm_timeout_seconds
        self.max_retries = max_retries if max_retries is not None else settings.osrm_max_retries
        self.backoff_seconds = backoff_seconds if backoff_seconds is not None else settings.osrm_backoff_seconds
        # Tests hand in an httpx.MockTransport here
        self._transport = transport

    def _get_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout, connect=min(self.timeout, 5.0)),
            transport=self._transport,
        )

    async def route(self, coordinates: Sequence[Coordinate]) -> dict:
        """Get a driving route through the given waypoints.

        Args:
            coordinates: Waypoints in visiting order (at least two).

        Returns:
            The decoded OSRM response; ``routes`` is guaranteed non-empty.

        Raises:
            OSRMRouteError: the service answered without a route.
            TimeoutError: every attempt timed out.
            ConnectionError: the service could not be reached.
        """
        if len(coordinates) < 2:
            raise ValueError("At least two coordinates are required for OSRM route.")

        # OSRM expects "lon,lat;lon,lat;..."
        coordinate_str = ";".join(f"{c.longitude},{c.latitude}" for c in coordinates)
        params = {
            "overview": "full",
            "geometries": self.geometries,
            "steps": "false",
        }
        url = f"{self.base_url}/route/v1/{self.profile}/{coordinate_str}"

        async with self._get_client() as client:
            attempt = 0
            while True:
                try:
                    response = await client.get(url, params=params)
                    response.raise_for_status()
                    data = response.json()
                    _ensure_route(data)
                    return data
                except httpx.HTTPStatusError as e:
                    status_code = e.response.status_code
                    if status_code < 500:
                        # OSRM reports NoRoute / InvalidQuery with a 4xx and a JSON body
                        raise OSRMRouteError(_describe_error_body(e.response)) from e
                    attempt += 1
                    if attempt > self.max_retries:
                        raise OSRMRouteError(f"OSRM returned HTTP {status_code}") from e
                    await asyncio.sleep(self.backoff_seconds * attempt)
                except httpx.TimeoutException as e:
                    attempt += 1
                    if attempt > self.max_retries:
                        logger.warning(f"OSRM route request timed out after {attempt} attempts: {e}")
                        raise TimeoutError(f"OSRM route request to {self.base_url} timed out") from e
                    wait_time = self.backoff_seconds * (2 ** (attempt - 1))
                    logger.debug(f"OSRM route timeout, retrying in {wait_time:.1f}s (attempt {attempt}/{self.max_retries})")
                    await asyncio.sleep(wait_time)
                except (httpx.ConnectError, httpx.NetworkError, OSError) as e:
                    attempt += 1
                    if attempt > self.max_retries:
                        raise ConnectionError(
                            f"Failed to connect to OSRM service at {self.base_url}: {e}"
                        ) from e
                    wait_time = self.backoff_seconds * (2 ** (attempt - 1))
                    logger.debug(f"OSRM network error, retrying in {wait_time:.1f}s (attempt {attempt}/{self.max_retries}): {e}")
                    await asyncio.sleep(wait_time)
                except OSRMRouteError:
                    raise
                except ValueError as e:
                    raise OSRMRouteError(f"OSRM returned an unreadable response: {e}") from e


def _ensure_route(data: Any) -> None:
    if not isinstance(data, dict):
        raise OSRMRouteError("OSRM response is not a JSON object.")
    if data.get("code") != "Ok":
        message = data.get("message") or data.get("code") or "Unknown OSRM route error"
        raise OSRMRouteError(f"OSRM route request failed: {message}")
    if not data.get("routes"):
        raise OSRMRouteError("OSRM returned no routes.")


def _describe_error_body(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return f"OSRM returned HTTP {response.status_code}"
    if isinstance(body, dict):
        code = body.get("code", "Error")
        message = body.get("message", "")
        return f"OSRM route request failed: {code} {message}".strip()
    return f"OSRM returned HTTP {response.status_code}"


def decode_polyline(polyline: str) -> list[tuple[float, float]]:
    """Decode Google polyline string to list of (lat, lon) coordinates.

    OSRM uses Google's polyline encoding format (precision 5) for route geometry.
    """
    coordinates = []
    index = 0
    lat = 0
    lon = 0

    while index < len(polyline):
        deltas = []
        for _ in range(2):
            shift = 0
            result = 0
            while True:
                b = ord(polyline[index]) - 63
                index += 1
                result |= (b & 0x1f) << shift
                shift += 5
                if b < 0x20:
                    break
            deltas.append(~(result >> 1) if (result & 1) else (result >> 1))
        lat += deltas[0]
        lon += deltas[1]
        coordinates.append((lat / 1e5, lon / 1e5))

    return coordinates


def parse_geometry(geometry: Any) -> list[Coordinate]:
    """Convert an OSRM route geometry into coordinates, keeping the path order.

    GeoJSON geometries carry ``[lon, lat]`` pairs; polyline strings decode to
    ``(lat, lon)``.
    """
    if geometry is None:
        return []
    if isinstance(geometry, str):
        return [Coordinate(latitude=lat, longitude=lon) for lat, lon in decode_polyline(geometry)]
    if isinstance(geometry, dict):
        return [Coordinate(latitude=pair[1], longitude=pair[0]) for pair in geometry.get("coordinates", [])]
    raise ValueError(f"Unsupported OSRM geometry type: {type(geometry).__name__}")


async def check_health(base_url: str | None = None, transport: httpx.AsyncBaseTransport | None = None) -> bool:
    """Check OSRM service health by requesting a short route inside Chandigarh."""
    client = OSRMClient(base_url=base_url, max_retries=0, timeout=5.0, transport=transport)
    test_coords = [
        Coordinate(latitude=30.7410, longitude=76.7791),
        Coordinate(latitude=30.7290, longitude=76.7645),
    ]
    try:
        await client.route(test_coords)
        return True
    except (OSRMRouteError, TimeoutError, ConnectionError) as e:
        logger.info(f"OSRM health check failed: {e}")
        return False
