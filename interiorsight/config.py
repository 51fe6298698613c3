"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    interiorsight_env: str = "development"
    interiorsight_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Batch ranking defaults
    rank_limit: int = 15
    rank_max_concurrent: int = 3

    # Largest decoded upload accepted by the API, per image
    max_upload_bytes: int = 20 * 1024 * 1024

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
