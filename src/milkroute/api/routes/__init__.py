"""Route group exports."""

from . import dairies, geocoding, health, routes, tracking

__all__ = ["routes", "geocoding", "dairies", "tracking", "health"]
