"""Async test fixtures for agency CRM tests using in-memory SQLite."""

from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from agency_crm.database import build_engine, build_session_factory, get_db
from agency_crm.models.base import Base
from agency_crm.models.enums import UserRole
from agency_crm.schemas.agency import AgencyCreate, AgencyRead
from agency_crm.schemas.contact import ContactCreate, ContactRead
from agency_crm.schemas.user import UserCreate, UserRead
from agency_crm.services import agency_svc, contact_svc, user_svc


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest_asyncio.fixture
async def engine():
    eng = build_engine("sqlite+aiosqlite:///:memory:")
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine):
    session_factory = build_session_factory(engine)
    async with session_factory() as session:
        yield session


async def make_agency(db: AsyncSession, subdomain: str, name: str | None = None) -> AgencyRead:
    return await agency_svc.create_agency(
        db, AgencyCreate(name=name or subdomain.title(), subdomain=subdomain)
    )


async def make_user(
    db: AsyncSession, agency_id: int, clerk_id: str, role: UserRole = UserRole.STAFF
) -> UserRead:
    return await user_svc.create_user(
        db,
        UserCreate(
            clerk_id=clerk_id,
            agency_id=agency_id,
            email=f"{clerk_id}@example.com",
            first_name="Test",
            last_name="User",
            role=role,
        ),
    )


async def make_contact(
    db: AsyncSession, agency_id: int, created_by: int, first_name: str, last_name: str, **fields
) -> ContactRead:
    return await contact_svc.create_contact(
        db,
        ContactCreate(
            agency_id=agency_id,
            first_name=first_name,
            last_name=last_name,
            created_by=created_by,
            **fields,
        ),
    )


@pytest_asyncio.fixture
async def agency(db: AsyncSession) -> AgencyRead:
    return await make_agency(db, "acme", "Acme")


@pytest_asyncio.fixture
async def user(db: AsyncSession, agency: AgencyRead) -> UserRead:
    return await make_user(db, agency.id, "user_owner", UserRole.AGENCY_OWNER)


@pytest_asyncio.fixture
async def contact(db: AsyncSession, agency: AgencyRead, user: UserRead) -> ContactRead:
    return await make_contact(db, agency.id, user.id, "Jane", "Doe", company="Initech")


@pytest_asyncio.fixture
async def other_agency(db: AsyncSession) -> AgencyRead:
    return await make_agency(db, "globex", "Globex")


@pytest_asyncio.fixture
async def other_user(db: AsyncSession, other_agency: AgencyRead) -> UserRead:
    return await make_user(db, other_agency.id, "user_globex")


@pytest_asyncio.fixture
async def client(engine):
    """HTTPX async test client against the agency CRM app."""
    from agency_crm.app import app

    session_factory = build_session_factory(engine)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def cli_runner():
    from typer.testing import CliRunner

    return CliRunner()
