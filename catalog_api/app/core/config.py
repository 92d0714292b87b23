"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with an SQLite file in the working directory and the
sample persons loaded.  In a production deployment you should
override these via environment variables.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None
    log_format: str = os.getenv("LOG_FORMAT", "%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    log_date_format: str = os.getenv("LOG_DATE_FORMAT", "%Y-%m-%d %H:%M:%S")
    # Level of the ``sqlalchemy.engine`` logger; INFO prints every statement.
    sql_log_level: str = os.getenv("SQL_LOG_LEVEL", "WARNING")

    # SQLAlchemy connection URL for the product table.  Relative SQLite
    # paths are resolved against the current working directory.
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./catalog.db")
    # Seconds an SQLite connection waits on a locked database before
    # giving up.  Concurrent stock updates queue on this lock.
    db_timeout: float = float(os.getenv("DB_TIMEOUT", "30"))

    # Load the two demo persons when the in-memory store starts empty.
    seed_sample_data: bool = _env_flag("SEED_SAMPLE_DATA", "true")

    greeting: str = os.getenv("GREETING", "Hola")

    # Load-generation endpoints.  ``performance_max_persons`` bounds the
    # ``count`` query parameter so a single request cannot exhaust memory.
    performance_default_persons: int = int(os.getenv("PERFORMANCE_DEFAULT_PERSONS", "10000"))
    performance_max_persons: int = int(os.getenv("PERFORMANCE_MAX_PERSONS", "1000000"))
    large_object_size: int = int(os.getenv("LARGE_OBJECT_SIZE", str(2_500_000)))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
