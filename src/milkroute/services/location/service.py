"""Current-location acquisition with a per-session last-known cache."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from ...config import settings
from ...models.domain import Coordinate, PositionFix
from ..geocoding import GeocodingGateway

logger = logging.getLogger(__name__)

PERMISSION_DENIED_MESSAGE = "Location permission denied. Please enable it in settings."
LOCATION_UNAVAILABLE_MESSAGE = "Unable to get your location. Please try again."


class LocationProvider(Protocol):
    """Device location API: a permission prompt and a position read."""

    async def request_permission(self) -> bool:
        ...

    async def current_position(self) -> PositionFix:
        ...


class FixedLocationProvider:
    """Reports a configured position; stands in for a device without GPS."""

    def __init__(
        self,
        coordinate: Coordinate | None = None,
        *,
        accuracy_m: float | None = None,
        permission_granted: bool = True,
    ) -> None:
        self.coordinate = coordinate or default_location()
        self.accuracy_m = accuracy_m
        self.permission_granted = permission_granted

    async def request_permission(self) -> bool:
        return self.permission_granted

    async def current_position(self) -> PositionFix:
        return PositionFix(coordinate=self.coordinate, accuracy_m=self.accuracy_m)


@dataclass(slots=True)
class LocationResult:
    success: bool
    coordinate: Optional[Coordinate] = None
    address: Optional[str] = None
    error: Optional[str] = None


class LocationSession:
    """Holds the last successful fix for one logical session.

    Writes replace the previous fix (last write wins). The session is meant
    for a single event loop; share it across threads only behind a lock.
    """

    def __init__(self) -> None:
        self._last_fix: PositionFix | None = None

    def record(self, fix: PositionFix) -> None:
        self._last_fix = fix

    def last_known(self) -> Coordinate | None:
        return self._last_fix.coordinate if self._last_fix else None

    @property
    def last_fix(self) -> PositionFix | None:
        return self._last_fix


def default_location() -> Coordinate:
    return Coordinate(latitude=settings.default_latitude, longitude=settings.default_longitude)


class LocationService:
    def __init__(self, provider: LocationProvider, gateway: GeocodingGateway | None = None) -> None:
        self.provider = provider
        self.gateway = gateway

    async def request_permission(self) -> bool:
        try:
            granted = await self.provider.request_permission()
        except Exception:
            logger.exception("Location permission request failed")
            return False
        logger.info(f"Location permission {'granted' if granted else 'denied'}")
        return bool(granted)

    async def acquire(self, session: LocationSession) -> LocationResult:
        """Fetch the current position, cache it in ``session`` and resolve its address.

        Denied permission is not retried; the caller has to prompt again.
        """
        if not await self.request_permission():
            return LocationResult(success=False, error=PERMISSION_DENIED_MESSAGE)

        try:
            fix = await self.provider.current_position()
        except Exception:
            logger.exception("Error getting current position")
            return LocationResult(success=False, error=LOCATION_UNAVAILABLE_MESSAGE)

        session.record(fix)
        logger.info(f"Location obtained: {fix.coordinate} (accuracy={fix.accuracy_m}m)")

        address = None
        if self.gateway is not None:
            address = await self.gateway.resolve_coordinate(fix.coordinate)
        return LocationResult(success=True, coordinate=fix.coordinate, address=address)
