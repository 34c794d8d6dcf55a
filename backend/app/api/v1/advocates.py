"""
Advocate search endpoint.

Always answers 200: when the store is down the same pipeline runs over the
built-in dataset instead.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.deps import get_row_fetcher
from app.api.schemas.advocates import AdvocateListResponse
from app.core.logging import get_logger
from app.pipeline.errors import SearchPipelineError
from app.pipeline.flow import build_search_engine
from app.pipeline.steps.fetch_rows import RowFetcher

logger = get_logger(__name__)

router = APIRouter(prefix="/advocates", tags=["Advocates"])


@router.get("", response_model=AdvocateListResponse)
async def list_advocates(
    q: str | None = Query(default=None, description="Free-text search term"),
    limit: str | None = Query(default=None, description="Page size (1-1000, default 50)"),
    offset: str | None = Query(default=None, description="Page start (>= 0, default 0)"),
    row_fetcher: RowFetcher = Depends(get_row_fetcher),
) -> dict[str, object]:
    """
    Search advocates.

    ``limit`` and ``offset`` are taken as raw strings so unparseable values
    fall back to defaults instead of failing validation.
    """
    engine = build_search_engine(row_fetcher)
    try:
        result = await engine.run(query=q, limit=limit, offset=offset)
    except SearchPipelineError as exc:
        logger.error("Advocate search failed", error=str(exc), step_name=exc.step_name)
        raise HTTPException(status_code=500, detail="Failed to load advocates") from exc

    return result.to_response()
