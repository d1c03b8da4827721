#!/usr/bin/env python3
"""Script to verify OSRM connectivity and the route fallback path."""

import asyncio
import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root / "src"))

from milkroute.config import settings
from milkroute.models.domain import Coordinate
from milkroute.services.routing.osrm_client import check_health
from milkroute.services.routing.service import build_route_engine


async def main() -> int:
    print("=" * 60)
    print("OSRM Connection Test")
    print("=" * 60)
    print()

    print("1. Checking OSRM configuration...")
    print(f"   [OK] OSRM Base URL: {settings.osrm_base_url}")
    print(f"   [OK] OSRM Profile: {settings.osrm_profile} ({settings.osrm_geometries} geometry)")
    print()

    print("2. Testing OSRM health check...")
    if await check_health():
        print("   [OK] OSRM service is healthy and accessible!")
    else:
        print("   [ERROR] OSRM service is not responding")
        return 1
    print()

    print("3. Testing a route request...")
    engine = build_route_engine()
    # Gurugram test delivery: milkman -> customer
    result = await engine.compute_route(
        Coordinate(latitude=28.4595, longitude=77.0266),
        Coordinate(latitude=28.4700, longitude=77.0350),
    )
    if not result.success:
        print(f"   [ERROR] {result.outcome.value}: {result.error} (distance={result.distance_km}km)")
        return 1
    print(f"   [OK] {result.distance_km}km, {result.duration_min} mins, {len(result.path)} points")
    print()

    print("=" * 60)
    print("[SUCCESS] OSRM is connected and working!")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
