"""Nominatim (OpenStreetMap) HTTP geocoding provider."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from ...config import settings
from ...models.domain import Coordinate
from .base import GeocodedPlace, GeocodingError, GeocodingProvider

logger = logging.getLogger(__name__)


class NominatimGeocoder(GeocodingProvider):
    name = "nominatim"

    def __init__(
        self,
        base_url: str | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.nominatim_base_url).rstrip("/")
        self.user_agent = user_agent or settings.nominatim_user_agent
        self.timeout = timeout if timeout is not None else settings.geocoding_timeout_seconds
        self._transport = transport

    def _get_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers={"User-Agent": self.user_agent},
            transport=self._transport,
        )

    async def _get_json(self, path: str, params: dict) -> object:
        async with self._get_client() as client:
            try:
                response = await client.get(path, params=params)
                response.raise_for_status()
                return response.json()
            except httpx.TimeoutException as e:
                raise GeocodingError(f"Nominatim request timed out: {e}") from e
            except httpx.HTTPStatusError as e:
                raise GeocodingError(f"Nominatim returned HTTP {e.response.status_code}") from e
            except httpx.HTTPError as e:
                raise GeocodingError(f"Nominatim is unreachable: {e}") from e
            except ValueError as e:
                raise GeocodingError(f"Nominatim returned an unreadable response: {e}") from e

    async def geocode(self, query: str) -> list[GeocodedPlace]:
        data = await self._get_json("/search", {"format": "json", "q": query, "limit": 1})
        if not isinstance(data, list):
            return []
        places: list[GeocodedPlace] = []
        for item in data:
            try:
                coordinate = Coordinate(latitude=float(item["lat"]), longitude=float(item["lon"]))
            except (KeyError, TypeError, ValueError) as e:
                logger.debug(f"Skipping malformed Nominatim match {item!r}: {e}")
                continue
            places.append(GeocodedPlace(coordinate=coordinate, display_name=item.get("display_name")))
        return places

    async def reverse(self, coordinate: Coordinate) -> Optional[str]:
        data = await self._get_json(
            "/reverse",
            {"format": "json", "lat": coordinate.latitude, "lon": coordinate.longitude},
        )
        if isinstance(data, dict) and data.get("display_name"):
            return data["display_name"]
        return None
