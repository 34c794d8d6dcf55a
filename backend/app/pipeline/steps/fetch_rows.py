"""
FetchRowsStep — loads raw advocate rows for the request.

Rows come from the row fetcher (the store).  When the fetcher reports a
StoreError, the step switches to the built-in dataset so the rest of the
pipeline runs unchanged over it.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import Any

from app.core.constants import RowSource
from app.core.logging import get_logger
from app.pipeline.context import SearchContext, StepResult
from app.pipeline.step import SearchStep
from app.repositories.advocates import RowFetchResult

logger = get_logger(__name__)

RowFetcher = Callable[[], Awaitable[RowFetchResult]]


class FetchRowsStep(SearchStep):
    """Fetch raw rows from the store, or from the fallback dataset on store error."""

    name = "fetch_rows"
    description = "Fetch advocate rows (store, else fallback dataset)"

    def __init__(
        self,
        row_fetcher: RowFetcher | None,
        fallback_rows: Sequence[Mapping[str, Any]],
    ) -> None:
        self.row_fetcher = row_fetcher
        self.fallback_rows = fallback_rows

    async def execute(self, ctx: SearchContext) -> StepResult:
        started_at = self._now()

        if self.row_fetcher is None:
            result = RowFetchResult.failure(RuntimeError("No row fetcher configured"))
        else:
            try:
                result = await self.row_fetcher()
            except Exception as exc:
                logger.exception("Row fetcher raised", request_id=ctx.request_id)
                result = RowFetchResult.failure(exc)

        if result.ok:
            ctx.source = RowSource.STORE
            ctx.raw_rows = list(result.rows)
        else:
            logger.warning(
                "Store unavailable, serving fallback dataset",
                request_id=ctx.request_id,
                error=result.error.message,
                error_type=result.error.error_type,
            )
            ctx.source = RowSource.FALLBACK
            ctx.store_error = result.error
            ctx.raw_rows = list(self.fallback_rows)

        return self._success(started_at, metadata={
            "source": ctx.source,
            "rows": len(ctx.raw_rows),
        })
