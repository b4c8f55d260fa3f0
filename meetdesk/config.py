"""Application configuration using pydantic-settings pattern."""

from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Meeting Desk"
    app_version: str = "0.1.0"
    app_env: str = Field(default="development")
    log_level: str = Field(default="INFO")
    api_prefix: str = Field(default="/api")

    # Calendar
    timezone: str = Field(
        default="UTC",
        description="IANA zone that defines local days and months",
    )

    # Store
    seed_data: bool = Field(
        default=True,
        description="Populate the in-memory store with fixture data at startup",
    )
    monthly_goal_offset: int = Field(
        default=5,
        ge=0,
        description="Offset added to this month's meeting count for the goal",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Reject zone names the tz database does not know."""
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {value}") from exc
        return value

    @property
    def tzinfo(self) -> ZoneInfo:
        """Resolve the configured timezone."""
        return ZoneInfo(self.timezone)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
