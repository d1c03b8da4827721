"""Application configuration and settings management."""

from pathlib import Path
from typing import Any, Literal

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="MILKROUTE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Milk Route API"
    api_prefix: str = "/api"
    log_level: str = "INFO"
    data_root: Path = Field(default=Path("data"), description="Root directory for static data files.")
    dairies_file: Path = Field(
        default=Path("data/chandigarh_dairies.json"),
        description="Dairy directory with coordinates, products and working hours.",
    )

    osrm_base_url: str = Field(
        default="https://router.project-osrm.org",
        description="Base URL for the OSRM routing service (e.g., http://localhost:5000).",
    )
    osrm_profile: Literal["driving", "driving-hgv"] = Field(
        default="driving",
        description="OSRM profile to use when computing routes.",
    )
    osrm_geometries: Literal["geojson", "polyline"] = Field(
        default="geojson",
        description="Geometry encoding requested from the OSRM route endpoint.",
    )
    osrm_timeout_seconds: float = Field(default=10.0, gt=0.0)
    osrm_max_retries: int = Field(default=1, ge=0)
    osrm_backoff_seconds: float = Field(default=0.5, ge=0.0)
    route_timeout_seconds: float = Field(
        default=15.0,
        gt=0.0,
        description="Overall deadline for one route computation, retries included.",
    )
    route_fallback_enabled: bool = Field(
        default=True,
        description="Attach a straight-line distance when the routing service fails.",
    )

    nominatim_base_url: str = Field(default="https://nominatim.openstreetmap.org")
    nominatim_user_agent: str = Field(default="MilkDeliveryApp/1.0")
    geocoding_timeout_seconds: float = Field(default=10.0, gt=0.0)

    default_latitude: float = Field(default=30.7333, ge=-90.0, le=90.0)
    default_longitude: float = Field(default=76.7794, ge=-180.0, le=180.0)

    optimizer_max_stops: int = Field(
        default=50,
        ge=1,
        description="Stop count above which the nearest-neighbour optimizer logs a scaling warning.",
    )

    tracking_interval_seconds: float = Field(default=5.0, gt=0.0)
    tracking_jitter_degrees: float = Field(default=0.001, ge=0.0)
    tracking_arrived_km: float = Field(default=0.1, gt=0.0)
    tracking_nearby_km: float = Field(default=0.5, gt=0.0)
    tracking_monotonic_status: bool = False

    nearby_radius_km: float = Field(default=5.0, gt=0.0)

    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:8081",
            "http://127.0.0.1:8081",
            "http://localhost:19006",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("data_root", "dairies_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            # Try JSON first
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
