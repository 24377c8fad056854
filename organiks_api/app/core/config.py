"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration; override them via
environment variables in a deployment.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Organiks Farm Records API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_flag("DEBUG"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Path to the SQLite file holding the record stores and the id
    # counter.  Relative paths are resolved against the project root by
    # ``core.db``; ``:memory:`` keeps everything in process memory.
    database_url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", "organiks.db"))

    api_host: str = field(default_factory=lambda: os.getenv("API_HOST", "0.0.0.0"))
    api_port: int = field(default_factory=lambda: int(os.getenv("API_PORT", "8000")))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Tests build their own
# ``Settings`` instances instead of mutating this one.
settings = Settings()
