"""Address <-> coordinate resolution over a pluggable provider."""

from __future__ import annotations

import logging
from typing import Optional

from ...models.domain import Coordinate
from .base import GeocodingError, GeocodingProvider, GeocodingResult
from .nominatim import NominatimGeocoder
from .platform import PlatformGeocoder, PlatformGeocoderBridge

logger = logging.getLogger(__name__)


class GeocodingGateway:
    """Resolves addresses and coordinates without raising.

    Provider errors and empty answers both come back as a failed
    ``GeocodingResult`` (or ``None`` for reverse lookups).
    """

    def __init__(self, provider: GeocodingProvider) -> None:
        self.provider = provider

    async def resolve_address(self, text: str) -> GeocodingResult:
        query = (text or "").strip()
        if not query:
            return GeocodingResult(success=False, error="Address must not be empty")

        logger.debug(f"Geocoding address via {self.provider.name}: {query}")
        try:
            places = await self.provider.geocode(query)
        except GeocodingError as e:
            logger.warning(f"Geocoding failed for '{query}': {e}")
            return GeocodingResult(success=False, error="Failed to find location")
        except Exception:
            logger.exception(f"Unexpected {self.provider.name} geocoding error for '{query}'")
            return GeocodingResult(success=False, error="Failed to find location")

        if not places:
            return GeocodingResult(success=False, error="Location not found")

        best = places[0]
        return GeocodingResult(
            success=True,
            coordinate=best.coordinate,
            display_name=best.display_name or query,
        )

    async def resolve_coordinate(self, point: Coordinate) -> Optional[str]:
        logger.debug(f"Reverse geocoding via {self.provider.name}: {point.latitude}, {point.longitude}")
        try:
            return await self.provider.reverse(point)
        except GeocodingError as e:
            logger.warning(f"Reverse geocoding failed for {point}: {e}")
            return None
        except Exception:
            logger.exception(f"Unexpected {self.provider.name} reverse geocoding error for {point}")
            return None


def build_geocoding_gateway(platform_bridge: PlatformGeocoderBridge | None = None) -> GeocodingGateway:
    """Use the native geocoder when the caller has one, otherwise Nominatim."""
    if platform_bridge is not None:
        return GeocodingGateway(PlatformGeocoder(platform_bridge))
    return GeocodingGateway(NominatimGeocoder())
