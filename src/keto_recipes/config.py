"""Application configuration."""

import os
from enum import StrEnum

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class OperatingMode(StrEnum):
    """Deployment flavour controlling ownership rules."""

    COMMUNITY = "community"
    SINGLE_TENANT = "single_tenant"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    operating_mode: str = OperatingMode.COMMUNITY.value
    default_target_ratio: float = 3.0
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_operating_mode(raw: str | None) -> OperatingMode:
    """Parse the operating mode from env, defaulting to community."""
    if raw is None:
        return OperatingMode.COMMUNITY
    cleaned = raw.strip().lower().replace("-", "_")
    if cleaned in {"", OperatingMode.COMMUNITY.value}:
        return OperatingMode.COMMUNITY
    if cleaned in {OperatingMode.SINGLE_TENANT.value, "single"}:
        return OperatingMode.SINGLE_TENANT
    raise ValueError(f"Unknown operating mode: {raw!r}")
