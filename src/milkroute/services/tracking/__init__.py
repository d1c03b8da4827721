"""Delivery tracking."""

from .scheduler import PeriodicTask
from .simulator import (
    DeliveryStatus,
    DeliveryTrackingState,
    JitterFeed,
    PositionFeed,
    TrackingSession,
    advance_status,
    derive_status,
)

__all__ = [
    "PeriodicTask",
    "DeliveryStatus",
    "DeliveryTrackingState",
    "JitterFeed",
    "PositionFeed",
    "TrackingSession",
    "advance_status",
    "derive_status",
]
