"""Application configuration and settings management."""

from typing import Any, Literal, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


PricingModelName = Literal["moto_taxi_parity", "fuel_sharing", "fuel_wear_toll_sharing"]


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="COVOIT_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Covoiturage Bénin API"
    api_prefix: str = "/api"
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:8080",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    # Pricing
    pricing_model: PricingModelName = Field(
        default="moto_taxi_parity",
        description="Fare formula used by the quote endpoints.",
    )
    zem_base_price: int = Field(default=200, ge=0, description="Moto-taxi pick-up fare in FCFA.")
    zem_per_km_rate: int = Field(default=100, ge=0, description="Moto-taxi fare per kilometer in FCFA.")
    fuel_price_per_liter: int = Field(default=650, ge=0)
    average_consumption_l_per_100km: float = Field(default=8.0, ge=0.0)
    vehicle_wear_per_km: int = Field(default=15, ge=0)
    toll_fee_per_100km: int = Field(default=200, ge=0)
    default_seat_count: int = Field(default=4, ge=1, le=8)

    # Distances
    road_indirection_factor: float = Field(
        default=1.3,
        gt=0.0,
        description="Multiplier applied to great-circle distances to approximate road distance.",
    )
    average_speed_kmh: float = Field(default=50.0, gt=0.0)

    # Geocoding
    geocoding_base_url: str = Field(default="https://nominatim.openstreetmap.org")
    geocoding_timeout_seconds: float = Field(default=10.0, gt=0.0)
    geocoding_country_code: str = Field(default="bj")
    geocoding_user_agent: str = Field(default="covoit-benin/0.1")

    # Supabase configuration
    supabase_url: Optional[str] = Field(
        default=None,
        description="Supabase project URL (e.g., https://xxx.supabase.co).",
    )
    supabase_key: Optional[str] = Field(
        default=None,
        description="Supabase service role key for backend operations.",
    )

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
