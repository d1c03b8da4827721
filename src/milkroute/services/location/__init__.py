"""Device location helpers."""

from .service import (
    FixedLocationProvider,
    LocationProvider,
    LocationResult,
    LocationService,
    LocationSession,
    default_location,
)

__all__ = [
    "FixedLocationProvider",
    "LocationProvider",
    "LocationResult",
    "LocationService",
    "LocationSession",
    "default_location",
]
