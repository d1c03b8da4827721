"""Geocoding providers and gateway."""

from .base import GeocodedPlace, GeocodingError, GeocodingProvider, GeocodingResult
from .gateway import GeocodingGateway, build_geocoding_gateway
from .nominatim import NominatimGeocoder
from .platform import PlatformAddress, PlatformGeocoder, PlatformGeocoderBridge, format_address

__all__ = [
    "GeocodedPlace",
    "GeocodingError",
    "GeocodingProvider",
    "GeocodingResult",
    "GeocodingGateway",
    "build_geocoding_gateway",
    "NominatimGeocoder",
    "PlatformAddress",
    "PlatformGeocoder",
    "PlatformGeocoderBridge",
    "format_address",
]
