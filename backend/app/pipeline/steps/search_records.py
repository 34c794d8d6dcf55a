"""
SearchRecordsStep — filter, rank and paginate the canonical records.
"""

from __future__ import annotations

from app.pipeline.context import SearchContext, StepResult
from app.pipeline.step import SearchStep
from app.processing.search import classify_query, search


class SearchRecordsStep(SearchStep):
    """Apply the query to the records and cut the requested page."""

    name = "search_records"
    description = "Filter, rank and paginate records"

    async def execute(self, ctx: SearchContext) -> StepResult:
        started_at = self._now()

        ctx.page, ctx.total = search(ctx.records, ctx.query, ctx.limit, ctx.offset)

        return self._success(started_at, metadata={
            "query_kind": classify_query(ctx.query),
            "total": ctx.total,
            "page_size": len(ctx.page),
        })
