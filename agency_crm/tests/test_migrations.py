"""Smoke tests for the agency CRM Alembic migrations."""

from __future__ import annotations

from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from agency_crm.config import settings
from agency_crm.models import Base


def _inspect_tables(db_path: Path) -> dict[str, set[str]]:
    engine = create_engine(f"sqlite:///{db_path}")
    try:
        inspector = inspect(engine)
        return {
            name: {col["name"] for col in inspector.get_columns(name)}
            for name in inspector.get_table_names()
            if name != "alembic_version"
        }
    finally:
        engine.dispose()


def test_alembic_upgrade_matches_models(tmp_path: Path, monkeypatch):
    db_path = tmp_path / "crm_migrations.db"
    monkeypatch.setattr(settings, "database_url", f"sqlite+aiosqlite:///{db_path}")

    command.upgrade(Config(str(settings.alembic_ini)), "head")

    tables = _inspect_tables(db_path)
    expected = {
        table.name: {col.name for col in table.columns}
        for table in Base.metadata.sorted_tables
    }
    assert tables == expected


def test_alembic_downgrade_drops_tables(tmp_path: Path, monkeypatch):
    db_path = tmp_path / "crm_downgrade.db"
    monkeypatch.setattr(settings, "database_url", f"sqlite+aiosqlite:///{db_path}")

    cfg = Config(str(settings.alembic_ini))
    command.upgrade(cfg, "head")
    command.downgrade(cfg, "base")

    assert _inspect_tables(db_path) == {}
