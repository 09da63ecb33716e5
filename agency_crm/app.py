"""FastAPI application for the agency CRM RPC service."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .config import configure_logging, settings
from .errors import CRMError

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    # Auto-create tables for SQLite (local dev); PostgreSQL and production use Alembic
    if settings.is_sqlite and settings.auto_create_tables and not settings.is_production:
        from .database import engine
        from .models import Base
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    log.info("%s started (%s)", settings.app_title, settings.environment)
    yield


app = FastAPI(title=settings.app_title, lifespan=lifespan)


@app.exception_handler(CRMError)
async def crm_error_handler(request: Request, exc: CRMError) -> JSONResponse:
    log.info("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.kind, "detail": exc.message},
    )


# Import and register routers
from .routers import health, rpc  # noqa: E402

app.include_router(rpc.router)
app.include_router(health.router)
