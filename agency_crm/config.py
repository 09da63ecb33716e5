"""Agency CRM configuration via pydantic-settings."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class CRMSettings(BaseSettings):
    environment: str = "development"
    database_url: str = "sqlite+aiosqlite:///agency_crm.db"
    echo_sql: bool = False
    app_title: str = "Agency CRM"
    log_level: str = "INFO"
    # Create tables on startup when running against SQLite (local dev)
    auto_create_tables: bool = True

    model_config = {"env_prefix": "CRM_", "env_file": ".env", "extra": "ignore"}

    @property
    def base_dir(self) -> Path:
        return Path(__file__).resolve().parent

    @property
    def alembic_ini(self) -> Path:
        return self.base_dir / "alembic.ini"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() in {"prod", "production"}


settings = CRMSettings()


def configure_logging(level: str | None = None) -> None:
    """Apply the service-wide logging format at the configured level."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
