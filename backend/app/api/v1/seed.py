"""Seed endpoint — loads the built-in advocate dataset into the store."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.api.schemas.advocates import SeedResponse
from app.core.logging import get_logger
from app.db.seed.advocates import ADVOCATE_DATA
from app.processing.normalizer import normalize_row
from app.repositories import advocates as advocate_repository

logger = get_logger(__name__)

router = APIRouter(prefix="/seed", tags=["Seed"])


@router.post("", response_model=SeedResponse)
async def seed_advocates(db: AsyncSession = Depends(get_db)):
    """Insert every advocate from the built-in dataset."""
    try:
        created = await advocate_repository.insert_advocates(db, ADVOCATE_DATA)
    except (SQLAlchemyError, OSError) as exc:
        logger.error("Seeding failed", error=str(exc), error_type=type(exc).__name__)
        await db.rollback()
        return JSONResponse(status_code=500, content={"error": "Database not configured."})

    logger.info("Advocates seeded", count=len(created))
    # Commit happens automatically via get_db dependency
    return {"advocates": [normalize_row(a.to_row()).to_dict() for a in created]}
