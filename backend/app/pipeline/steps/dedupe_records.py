"""
DedupeRecordsStep — collapses records that are equal on every field but id.
"""

from __future__ import annotations

from app.core.logging import get_logger
from app.pipeline.context import SearchContext, StepResult
from app.pipeline.step import SearchStep
from app.validation.duplicate_detector import dedupe

logger = get_logger(__name__)


class DedupeRecordsStep(SearchStep):
    """Drop content duplicates, keeping the first occurrence."""

    name = "dedupe_records"
    description = "Remove duplicate advocate records"

    async def execute(self, ctx: SearchContext) -> StepResult:
        started_at = self._now()

        before = len(ctx.records)
        ctx.records = dedupe(ctx.records)
        removed = before - len(ctx.records)

        if removed:
            logger.debug(
                "Duplicates removed",
                request_id=ctx.request_id,
                removed=removed,
                source=ctx.source,
            )

        return self._success(started_at, metadata={
            "input_records": before,
            "duplicates_removed": removed,
        })
