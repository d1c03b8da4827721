"""Geocoding through the host platform's native geocoder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from ...models.domain import Coordinate
from .base import GeocodedPlace, GeocodingProvider


@dataclass(frozen=True, slots=True)
class PlatformAddress:
    name: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None


class PlatformGeocoderBridge(Protocol):
    """What a native (device/OS) geocoder has to offer."""

    async def geocode(self, query: str) -> Sequence[Coordinate]:
        ...

    async def reverse_geocode(self, coordinate: Coordinate) -> Sequence[PlatformAddress]:
        ...


def format_address(address: PlatformAddress) -> str:
    parts = [address.name, address.street, address.city, address.region, address.postal_code]
    return ", ".join(part for part in parts if part)


class PlatformGeocoder(GeocodingProvider):
    """Adapts a native geocoder bridge to the provider contract.

    Native geocoders return bare coordinates, so the query text doubles as
    the display name of a forward match.
    """

    name = "platform"

    def __init__(self, bridge: PlatformGeocoderBridge) -> None:
        self.bridge = bridge

    async def geocode(self, query: str) -> list[GeocodedPlace]:
        matches = await self.bridge.geocode(query)
        return [GeocodedPlace(coordinate=match, display_name=query) for match in matches]

    async def reverse(self, coordinate: Coordinate) -> Optional[str]:
        addresses = await self.bridge.reverse_geocode(coordinate)
        if not addresses:
            return None
        return format_address(addresses[0]) or None
