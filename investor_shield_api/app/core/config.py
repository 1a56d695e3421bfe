"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables so that no settings library is required.
Defaults are provided for all fields; override them via the
environment in any real deployment.
"""

import os
from dataclasses import dataclass
from typing import List


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Investor Shield API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

    # Static token granting access to advisor creation.  Empty disables
    # the admin routes entirely.
    admin_token: str = os.getenv("ADMIN_TOKEN", "")

    # Whether a freshly built store is populated with the fixture
    # advisors, apps and reviews.
    seed_fixtures: bool = os.getenv("SEED_FIXTURES", "true").lower() in {"1", "true", "yes"}

    # Comma‑separated list of origins allowed to call the API from a
    # browser.  ``*`` allows any origin.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    @property
    def cors_origin_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


# Environment variables must be set before this module is imported.
settings = Settings()
