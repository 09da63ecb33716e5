"""Liveness and readiness checks for the agency CRM service."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy import func, select, text
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..models.agency import Agency

router = APIRouter()


@router.get("/health")
async def health_check(db: AsyncSession = Depends(get_db)):
    await db.execute(text("SELECT 1"))
    return {"status": "healthy", "service": "agency-crm"}


@router.get("/ready")
async def readiness_check(db: AsyncSession = Depends(get_db)):
    """Ready once the tenant schema is in place; reports the tenant count."""
    agencies = await db.scalar(select(func.count()).select_from(Agency))
    return {"status": "ready", "service": "agency-crm", "agencies": agencies}
