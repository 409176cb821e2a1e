"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts on ``localhost:8080`` with the seed catalogue loaded
when nothing is configured.
"""

import os
from dataclasses import dataclass


def _as_bool(value: str) -> bool:
    return value.lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Album Store API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path to a log file.  When empty only the console handler
    # is installed by ``setup_logging``.
    log_file: str = os.getenv("LOG_FILE", "")

    # Address used by ``run.py`` when serving the app with uvicorn.
    host: str = os.getenv("HOST", "localhost")
    port: int = int(os.getenv("PORT", "8080"))

    # Whether ``create_app`` loads the three seed albums into the store.
    seed_albums: bool = _as_bool(os.getenv("SEED_ALBUMS", "true"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
