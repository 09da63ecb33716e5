"""Agency CRM CLI - serve the RPC API and manage the database."""

from __future__ import annotations

import asyncio
import json

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from .config import configure_logging, settings
from .database import build_engine, build_session_factory
from .models import Base
from .schemas.agency import AgencyRead
from .services import agency_svc

app = typer.Typer(
    name="agency-crm",
    help="Agency CRM - multi-tenant contacts, deals and landing pages",
    no_args_is_help=True,
)
db_app = typer.Typer(help="Database management")
app.add_typer(db_app, name="db")
console = Console()


@app.command("serve")
def serve(
    port: int = typer.Option(2022, "--port", "-p", help="Port to run on"),
    host: str = typer.Option("127.0.0.1", "--host", help="Host to bind to"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Launch the RPC API server."""
    console.print(f"[bold cyan]Starting {settings.app_title} at http://{host}:{port}[/bold cyan]")
    uvicorn.run("agency_crm.app:app", host=host, port=port, reload=reload)


@db_app.command("init")
def db_init():
    """Create all tables directly from the models (local dev)."""
    asyncio.run(_create_tables())
    console.print(f"[green]Tables created[/green] ({settings.database_url})")


@db_app.command("upgrade")
def db_upgrade(revision: str = typer.Argument("head", help="Target revision")):
    """Apply Alembic migrations."""
    from alembic import command
    from alembic.config import Config

    command.upgrade(Config(str(settings.alembic_ini)), revision)
    console.print(f"[green]Database upgraded to {revision}[/green]")


@app.command("agencies")
def agencies(
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """List all agencies."""
    configure_logging("WARNING")
    rows = asyncio.run(_list_agencies())

    if json_output:
        console.print_json(json.dumps([r.model_dump(mode="json") for r in rows]))
        return

    if not rows:
        console.print("[yellow]No agencies found[/yellow]")
        return

    table = Table(title=f"Agencies ({len(rows)})")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Subdomain")
    table.add_column("Custom domain")
    for row in rows:
        table.add_row(str(row.id), row.name, row.subdomain, row.custom_domain or "-")
    console.print(table)


async def _create_tables() -> None:
    engine = build_engine(settings.database_url)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    finally:
        await engine.dispose()


async def _list_agencies() -> list[AgencyRead]:
    engine = build_engine(settings.database_url)
    try:
        async with build_session_factory(engine)() as session:
            return await agency_svc.list_agencies(session)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    app()
