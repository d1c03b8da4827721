"""Delivery tracking: status derivation and a simulated milkman feed."""

from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass, replace
from typing import Callable, Optional, Protocol

from ...config import settings
from ...models.domain import Coordinate
from ..geospatial import distance_km
from ..routing.service import RouteEngine
from .scheduler import PeriodicTask

logger = logging.getLogger(__name__)


class DeliveryStatus(str, enum.Enum):
    PREPARING = "preparing"
    OUT_FOR_DELIVERY = "out_for_delivery"
    NEARBY = "nearby"
    ARRIVED = "arrived"


STATUS_RANK: dict[DeliveryStatus, int] = {
    DeliveryStatus.PREPARING: 0,
    DeliveryStatus.OUT_FOR_DELIVERY: 1,
    DeliveryStatus.NEARBY: 2,
    DeliveryStatus.ARRIVED: 3,
}


def derive_status(
    distance: float,
    *,
    arrived_km: float | None = None,
    nearby_km: float | None = None,
) -> DeliveryStatus:
    """Map a mover-to-destination distance onto a delivery status."""
    arrived_km = settings.tracking_arrived_km if arrived_km is None else arrived_km
    nearby_km = settings.tracking_nearby_km if nearby_km is None else nearby_km
    if distance < arrived_km:
        return DeliveryStatus.ARRIVED
    if distance < nearby_km:
        return DeliveryStatus.NEARBY
    return DeliveryStatus.OUT_FOR_DELIVERY


def advance_status(current: DeliveryStatus, derived: DeliveryStatus, *, monotonic: bool) -> DeliveryStatus:
    if monotonic and STATUS_RANK[derived] < STATUS_RANK[current]:
        return current
    return derived


@dataclass(slots=True)
class DeliveryTrackingState:
    mover: Coordinate
    destination: Coordinate
    status: DeliveryStatus = DeliveryStatus.PREPARING
    distance_km: Optional[float] = None
    eta_minutes: Optional[int] = None
    route_note: Optional[str] = None
    updates: int = 0


class PositionFeed(Protocol):
    async def next_position(self, current: Coordinate) -> Coordinate:
        ...


class JitterFeed:
    """Random walk around the current position.

    Each step moves latitude and longitude by up to half of
    ``jitter_degrees`` in either direction; it does not steer toward the
    destination.
    """

    def __init__(self, jitter_degrees: float | None = None, rng: random.Random | None = None) -> None:
        self.jitter_degrees = settings.tracking_jitter_degrees if jitter_degrees is None else jitter_degrees
        self.rng = rng or random.Random()

    async def next_position(self, current: Coordinate) -> Coordinate:
        latitude = current.latitude + (self.rng.random() - 0.5) * self.jitter_degrees
        longitude = current.longitude + (self.rng.random() - 0.5) * self.jitter_degrees
        return Coordinate(
            latitude=min(90.0, max(-90.0, latitude)),
            longitude=min(180.0, max(-180.0, longitude)),
        )


Observer = Callable[[DeliveryTrackingState], None]


class TrackingSession:
    """Tracks one delivery from start() until stop().

    Observers receive a snapshot of the state after every update. Once
    stop() returns no further updates are applied or emitted.
    """

    def __init__(
        self,
        mover: Coordinate,
        destination: Coordinate,
        *,
        feed: PositionFeed | None = None,
        route_engine: RouteEngine | None = None,
        interval: float | None = None,
        monotonic: bool | None = None,
        arrived_km: float | None = None,
        nearby_km: float | None = None,
    ) -> None:
        self.state = DeliveryTrackingState(mover=mover, destination=destination)
        self.feed: PositionFeed = feed or JitterFeed()
        self.route_engine = route_engine
        self.interval = settings.tracking_interval_seconds if interval is None else interval
        self.monotonic = settings.tracking_monotonic_status if monotonic is None else monotonic
        self.arrived_km = arrived_km
        self.nearby_km = nearby_km
        self._observers: list[Observer] = []
        self._task: PeriodicTask | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    async def start(self) -> None:
        """Seed distance/ETA from the route engine and begin ticking."""
        if self._closed:
            raise RuntimeError("Tracking session has been stopped.")
        await self._seed()
        self._emit()
        self._task = PeriodicTask(self.tick, self.interval, name="delivery-tracking")
        self._task.start()

    async def stop(self) -> None:
        self._closed = True
        if self._task:
            await self._task.stop()
            self._task = None
        self._observers.clear()

    async def tick(self) -> None:
        if self._closed:
            return
        position = await self.feed.next_position(self.state.mover)
        # stop() may have run while the feed was awaited
        if self._closed:
            return
        self.apply_position(position)

    def apply_position(self, position: Coordinate) -> DeliveryTrackingState:
        """Record a new mover position; real GPS updates enter here as well."""
        if self._closed:
            return replace(self.state)
        distance = distance_km(position, self.state.destination)
        derived = derive_status(distance, arrived_km=self.arrived_km, nearby_km=self.nearby_km)
        previous = self.state.status
        self.state.mover = position
        self.state.distance_km = distance
        self.state.status = advance_status(previous, derived, monotonic=self.monotonic)
        self.state.updates += 1
        if self.state.status is not previous:
            logger.info(f"Delivery status {previous.value} -> {self.state.status.value} ({distance}km)")
        self._emit()
        return replace(self.state)

    async def _seed(self) -> None:
        state = self.state
        if self.route_engine is None:
            state.distance_km = distance_km(state.mover, state.destination)
            return
        result = await self.route_engine.compute_route(state.mover, state.destination)
        if result.success:
            state.distance_km = result.distance_km
            state.eta_minutes = result.duration_min
        else:
            state.distance_km = (
                result.distance_km
                if result.distance_km is not None
                else distance_km(state.mover, state.destination)
            )
            state.route_note = result.error

    def _emit(self) -> None:
        snapshot = replace(self.state)
        for observer in list(self._observers):
            observer(snapshot)
