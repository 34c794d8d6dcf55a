"""Shared dependencies for API routes."""

from __future__ import annotations

from functools import partial
from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db as _get_db
from app.db.session import get_read_db as _get_read_db
from app.pipeline.steps.fetch_rows import RowFetcher
from app.repositories import advocates as advocate_repository


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async DB session that commits on success."""
    async for session in _get_db():
        yield session


async def get_read_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async DB session for reads only."""
    async for session in _get_read_db():
        yield session


async def get_row_fetcher(db: AsyncSession = Depends(get_read_db)) -> RowFetcher:
    """Row fetcher bound to the request's session."""
    return partial(advocate_repository.fetch_advocate_rows, db)
