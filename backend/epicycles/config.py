"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    epicycles_env: str = "development"
    epicycles_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Reconstruction defaults
    default_time_step: float = 0.001
    # Largest sample count the API accepts (dft is O(n²)).
    max_samples: int = 4096
    # Largest number of points one trace request may sample.
    max_trace_points: int = 100_000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
