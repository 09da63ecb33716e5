"""Named remote procedures over the agency services.

Queries are GET with query parameters, mutations are POST with a JSON body.
Each procedure hands straight through to its service function.
"""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..schemas.agency import AgencyCreate, AgencyRead, AgencyUpdateRequest
from ..schemas.contact import ContactCreate, ContactRead, ContactUpdate
from ..schemas.deal import DealCreate, DealRead, DealUpdate
from ..schemas.interaction import ContactInteractionCreate, ContactInteractionRead
from ..schemas.landing_page import LandingPageCreate, LandingPagePublish, LandingPageRead
from ..schemas.user import UserCreate, UserRead
from ..services import (
    agency_svc,
    contact_svc,
    deal_svc,
    interaction_svc,
    landing_page_svc,
    user_svc,
)

router = APIRouter(prefix="/rpc", tags=["rpc"])


@router.get("/healthcheck")
async def healthcheck():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


# ── Agencies ──────────────────────────────────────────────────────────────

@router.post("/createAgency", response_model=AgencyRead)
async def create_agency(data: AgencyCreate, db: AsyncSession = Depends(get_db)):
    return await agency_svc.create_agency(db, data)


@router.get("/getAgencies", response_model=list[AgencyRead])
async def get_agencies(db: AsyncSession = Depends(get_db)):
    return await agency_svc.list_agencies(db)


@router.get("/getAgencyBySubdomain", response_model=AgencyRead | None)
async def get_agency_by_subdomain(
    subdomain: str = Query(...),
    db: AsyncSession = Depends(get_db),
):
    return await agency_svc.get_agency_by_subdomain(db, subdomain)


@router.post("/updateAgency", response_model=AgencyRead)
async def update_agency(data: AgencyUpdateRequest, db: AsyncSession = Depends(get_db)):
    return await agency_svc.update_agency(db, data.to_update())


# ── Users ─────────────────────────────────────────────────────────────────

@router.post("/createUser", response_model=UserRead)
async def create_user(data: UserCreate, db: AsyncSession = Depends(get_db)):
    return await user_svc.create_user(db, data)


@router.get("/getUsersByAgency", response_model=list[UserRead])
async def get_users_by_agency(
    agency_id: int = Query(..., alias="agencyId"),
    db: AsyncSession = Depends(get_db),
):
    return await user_svc.list_users_by_agency(db, agency_id)


# ── Contacts ──────────────────────────────────────────────────────────────

@router.post("/createContact", response_model=ContactRead)
async def create_contact(data: ContactCreate, db: AsyncSession = Depends(get_db)):
    return await contact_svc.create_contact(db, data)


@router.get("/getContactsByAgency", response_model=list[ContactRead])
async def get_contacts_by_agency(
    agency_id: int = Query(..., alias="agencyId"),
    db: AsyncSession = Depends(get_db),
):
    return await contact_svc.list_contacts_by_agency(db, agency_id)


@router.post("/updateContact", response_model=ContactRead)
async def update_contact(data: ContactUpdate, db: AsyncSession = Depends(get_db)):
    return await contact_svc.update_contact(db, data)


@router.get("/searchContacts", response_model=list[ContactRead])
async def search_contacts(
    agency_id: int = Query(..., alias="agencyId"),
    query: str = Query(""),
    db: AsyncSession = Depends(get_db),
):
    return await contact_svc.search_contacts(db, agency_id, query)


# ── Deals ─────────────────────────────────────────────────────────────────

@router.post("/createDeal", response_model=DealRead)
async def create_deal(data: DealCreate, db: AsyncSession = Depends(get_db)):
    return await deal_svc.create_deal(db, data)


@router.get("/getDealsByAgency", response_model=list[DealRead])
async def get_deals_by_agency(
    agency_id: int = Query(..., alias="agencyId"),
    db: AsyncSession = Depends(get_db),
):
    return await deal_svc.list_deals_by_agency(db, agency_id)


@router.post("/updateDeal", response_model=DealRead)
async def update_deal(data: DealUpdate, db: AsyncSession = Depends(get_db)):
    return await deal_svc.update_deal(db, data)


@router.get("/searchDeals", response_model=list[DealRead])
async def search_deals(
    agency_id: int = Query(..., alias="agencyId"),
    query: str = Query(""),
    db: AsyncSession = Depends(get_db),
):
    return await deal_svc.search_deals(db, agency_id, query)


# ── Landing pages ─────────────────────────────────────────────────────────

@router.post("/createLandingPage", response_model=LandingPageRead)
async def create_landing_page(data: LandingPageCreate, db: AsyncSession = Depends(get_db)):
    return await landing_page_svc.create_landing_page(db, data)


@router.get("/getLandingPagesByAgency", response_model=list[LandingPageRead])
async def get_landing_pages_by_agency(
    agency_id: int = Query(..., alias="agencyId"),
    db: AsyncSession = Depends(get_db),
):
    return await landing_page_svc.list_landing_pages_by_agency(db, agency_id)


@router.post("/publishLandingPage", response_model=LandingPageRead)
async def publish_landing_page(data: LandingPagePublish, db: AsyncSession = Depends(get_db)):
    return await landing_page_svc.publish_landing_page(db, data.id)


# ── Contact interactions ──────────────────────────────────────────────────

@router.post("/createContactInteraction", response_model=ContactInteractionRead)
async def create_contact_interaction(
    data: ContactInteractionCreate, db: AsyncSession = Depends(get_db)
):
    return await interaction_svc.create_contact_interaction(db, data)


@router.get("/getContactInteractions", response_model=list[ContactInteractionRead])
async def get_contact_interactions(
    contact_id: int = Query(..., alias="contactId"),
    db: AsyncSession = Depends(get_db),
):
    return await interaction_svc.list_contact_interactions(db, contact_id)
