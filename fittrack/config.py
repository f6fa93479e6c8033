"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

from pathlib import Path
from typing import List, Literal
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator, ConfigDict

from fittrack.shared.constants import MAX_RECORD_POINTS


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # === History Store ===
    history_backend: Literal["memory", "json", "sql"] = Field(
        default="json",
        description="Backing storage for workout history"
    )
    history_path: Path = Field(
        default=Path("fittrack_v3.json"),
        description="JSON history file (json backend)"
    )
    database_url: str = Field(
        default="sqlite:///./fittrack.db",
        description="Database connection URL (sql backend)"
    )

    # === CORS ===
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"],
        description="Allowed CORS origins"
    )

    # === Workout ===
    weight_kg: float = Field(default=70.0, gt=0, description="Body weight for calories")
    tick_interval_seconds: float = Field(
        default=1.0,
        ge=0,
        description="Workout clock tick interval; 0 disables the built-in ticker"
    )
    max_record_points: int = Field(
        default=MAX_RECORD_POINTS,
        ge=2,
        le=MAX_RECORD_POINTS,
        description="Track points kept per record (downsampled above it)"
    )

    @field_validator('database_url')
    @classmethod
    def fix_postgres_url(cls, v: str) -> str:
        """Fix Render/Railway postgres:// URL to postgresql://"""
        if v.startswith("postgres://"):
            return v.replace("postgres://", "postgresql://", 1)
        return v

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',')]
        return v

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FITTRACK_",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
