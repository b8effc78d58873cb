"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    structgrid_env: str = "development"
    structgrid_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Grid defaults
    grid_width: int = Field(default=12, ge=0)
    grid_height: int = Field(default=8, ge=0)
    active_ratio: float = Field(default=0.4, ge=0.0, le=1.0)
    dropped_ratio: float = Field(default=0.2, ge=0.0, le=1.0)
    pointer_ratio: float = Field(default=0.2, ge=0.0, le=1.0)

    # Randomness + playback; numpy rejects negative seeds
    structgrid_seed: int = Field(default=7, ge=0)
    mutation_probability: float = Field(default=0.05, ge=0.0, le=1.0)

    # Largest accepted source upload
    structgrid_max_source_bytes: int = Field(default=1_048_576, ge=0)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
