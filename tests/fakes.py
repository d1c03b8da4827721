"""Shared fixtures data and fake services for the test suite."""

import httpx

from src.milkroute.models.domain import Coordinate

# Gurugram test delivery used across the suite
MILKMAN = Coordinate(latitude=28.4595, longitude=77.0266)
CUSTOMER = Coordinate(latitude=28.4700, longitude=77.0350)


def osrm_route_payload(distance_m: float = 1834.0, duration_s: float = 412.0) -> dict:
    return {
        "code": "Ok",
        "routes": [
            {
                "distance": distance_m,
                "duration": duration_s,
                "geometry": {
                    "type": "LineString",
                    "coordinates": [[77.0266, 28.4595], [77.0301, 28.4652], [77.035, 28.47]],
                },
            }
        ],
    }


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)
