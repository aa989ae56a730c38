"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Values may also be placed in a ``.env`` file
in the working directory; it is loaded once, before the dataclass
defaults are evaluated, and never overrides variables that are
already set in the environment.  Defaults are provided for all
fields.
"""

import os
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Taskboard API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")

    # Runtime mode, ``development`` or ``production``.  Production mode
    # hides internal error details from clients and switches the access
    # log to its compact format.
    environment: str = os.getenv("ENVIRONMENT", "development")

    # Shared secret expected as the second segment of the Authorization
    # header (``Bearer <token>``).  When empty, every protected request
    # is rejected.
    api_token: str = os.getenv("API_TOKEN", "")

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")
    # Level of the per-request access log; WARNING turns it off.
    access_log_level: str = os.getenv("ACCESS_LOG_LEVEL", "INFO")

    # Comma-separated list of allowed CORS origins.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # Start with one demo card and one list referencing it.
    seed_demo_data: bool = os.getenv("SEED_DEMO_DATA", "false").lower() in {"1", "true", "yes"}

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == "production"

    @property
    def cors_origin_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes defaults at class definition time, environment variables
# should be set before importing this module.
settings = Settings()
