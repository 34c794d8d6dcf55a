"""
Advocate repository containing all data-access operations for the advocates table.

Repository rules:
- Pure data-access logic only
- Every function receives AsyncSession explicitly
- Functions flush, but never commit
- Read failures are returned as a StoreError value, not raised
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import get_logger
from app.db.models.advocate import Advocate
from app.processing.normalizer import normalize_row

logger = get_logger(__name__)


@dataclass(frozen=True)
class StoreError:
    """Why a read from the store failed."""

    message: str
    error_type: str = ""


@dataclass(frozen=True)
class RowFetchResult:
    """Either the fetched rows or the error that prevented fetching them."""

    rows: list[dict[str, Any]] = field(default_factory=list)
    error: StoreError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, rows: list[dict[str, Any]]) -> "RowFetchResult":
        return cls(rows=rows)

    @classmethod
    def failure(cls, exc: BaseException) -> "RowFetchResult":
        return cls(error=StoreError(message=str(exc), error_type=type(exc).__name__))


async def fetch_advocate_rows(db: AsyncSession) -> RowFetchResult:
    """
    Fetch every raw advocate row, ordered by last name.

    No filtering happens here: the search pipeline matches, dedupes and
    pages in-process so store and fallback results agree.  Connection and
    query failures come back as ``RowFetchResult.failure``.
    """
    stmt = select(Advocate).order_by(Advocate.last_name, Advocate.id)

    try:
        result = await db.execute(stmt)
        rows = [advocate.to_row() for advocate in result.scalars().all()]
    except (SQLAlchemyError, OSError) as exc:
        logger.warning(
            "Advocate store unavailable",
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return RowFetchResult.failure(exc)

    return RowFetchResult.success(rows)


async def count_advocates(db: AsyncSession) -> int:
    """Total rows in the table."""
    result = await db.execute(select(func.count()).select_from(Advocate))
    return int(result.scalar_one())


def to_column_values(entry: Mapping[str, Any]) -> dict[str, Any]:
    """Convert a row of any supported shape to insertable column values."""
    record = normalize_row(entry)
    years = record.years_of_experience.strip()
    phone = "".join(ch for ch in record.phone_number if ch.isdigit())
    return {
        "first_name": record.first_name,
        "last_name": record.last_name,
        "city": record.city,
        "degree": record.degree,
        "specialties": list(record.specialties),
        "years_of_experience": int(years) if years.isdigit() else 0,
        "phone_number": int(phone) if phone else None,
    }


async def insert_advocates(
    db: AsyncSession,
    entries: Iterable[Mapping[str, Any]],
) -> list[Advocate]:
    """Bulk-insert advocates and return the created rows."""
    advocates = [Advocate(**to_column_values(entry)) for entry in entries]
    db.add_all(advocates)
    await db.flush()
    return advocates
