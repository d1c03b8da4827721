"""Base classes for geocoding provider implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...models.domain import Coordinate


class GeocodingError(RuntimeError):
    """A geocoding provider could not answer (transport or upstream failure)."""


@dataclass(frozen=True, slots=True)
class GeocodedPlace:
    coordinate: Coordinate
    display_name: Optional[str] = None


@dataclass(slots=True)
class GeocodingResult:
    success: bool
    coordinate: Optional[Coordinate] = None
    display_name: Optional[str] = None
    error: Optional[str] = None


class GeocodingProvider(ABC):
    """Contract for forward and reverse geocoding providers."""

    name: str = "provider"

    @abstractmethod
    async def geocode(self, query: str) -> list[GeocodedPlace]:
        """Return candidate places for ``query``, best match first."""
        raise NotImplementedError

    @abstractmethod
    async def reverse(self, coordinate: Coordinate) -> Optional[str]:
        """Return a display address for ``coordinate`` or None."""
        raise NotImplementedError
