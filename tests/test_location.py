from src.milkroute.models.domain import Coordinate, PositionFix
from src.milkroute.services.geocoding import GeocodingGateway, GeocodingProvider
from src.milkroute.services.location import (
    FixedLocationProvider,
    LocationService,
    LocationSession,
    default_location,
)
from src.milkroute.services.location.service import LOCATION_UNAVAILABLE_MESSAGE, PERMISSION_DENIED_MESSAGE

SECTOR_17 = Coordinate(latitude=30.7410, longitude=76.7791)
SECTOR_22 = Coordinate(latitude=30.7290, longitude=76.7645)


class StaticReverseProvider(GeocodingProvider):
    name = "static"

    def __init__(self, address):
        self.address = address
        self.lookups = []

    async def geocode(self, query):
        return []

    async def reverse(self, coordinate):
        self.lookups.append(coordinate)
        return self.address


class BrokenGPS:
    async def request_permission(self):
        return True

    async def current_position(self):
        raise OSError("GPS hardware not responding")


async def test_acquire_caches_fix_and_resolves_address():
    provider = StaticReverseProvider("Sector 17, Chandigarh")
    service = LocationService(FixedLocationProvider(SECTOR_17, accuracy_m=12.0), GeocodingGateway(provider))
    session = LocationSession()

    result = await service.acquire(session)

    assert result.success
    assert result.coordinate == SECTOR_17
    assert result.address == "Sector 17, Chandigarh"
    assert session.last_known() == SECTOR_17
    assert session.last_fix == PositionFix(coordinate=SECTOR_17, accuracy_m=12.0)
    assert provider.lookups == [SECTOR_17]


async def test_permission_denied_is_reported_and_nothing_cached():
    service = LocationService(FixedLocationProvider(SECTOR_17, permission_granted=False))
    session = LocationSession()

    result = await service.acquire(session)

    assert not result.success
    assert result.error == PERMISSION_DENIED_MESSAGE
    assert session.last_known() is None


async def test_position_errors_are_absorbed():
    session = LocationSession()

    result = await LocationService(BrokenGPS()).acquire(session)

    assert not result.success
    assert result.error == LOCATION_UNAVAILABLE_MESSAGE
    assert session.last_known() is None


async def test_missing_address_still_succeeds():
    service = LocationService(FixedLocationProvider(SECTOR_17), GeocodingGateway(StaticReverseProvider(None)))

    result = await service.acquire(LocationSession())

    assert result.success
    assert result.address is None


async def test_last_successful_fix_wins():
    session = LocationSession()

    await LocationService(FixedLocationProvider(SECTOR_17)).acquire(session)
    await LocationService(FixedLocationProvider(SECTOR_22)).acquire(session)
    await LocationService(FixedLocationProvider(SECTOR_17, permission_granted=False)).acquire(session)

    assert session.last_known() == SECTOR_22


async def test_sessions_do_not_share_cache():
    first, second = LocationSession(), LocationSession()

    await LocationService(FixedLocationProvider(SECTOR_17)).acquire(first)

    assert first.last_known() == SECTOR_17
    assert second.last_known() is None


def test_default_location_is_chandigarh_centre():
    assert default_location() == Coordinate(latitude=30.7333, longitude=76.7794)
    assert FixedLocationProvider().coordinate == default_location()
