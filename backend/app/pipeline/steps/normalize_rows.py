"""
NormalizeRowsStep — maps every raw row to the canonical AdvocateRecord.
"""

from __future__ import annotations

from app.pipeline.context import SearchContext, StepResult
from app.pipeline.step import SearchStep
from app.processing.normalizer import normalize_rows


class NormalizeRowsStep(SearchStep):
    """Normalize raw rows of any supported shape."""

    name = "normalize_rows"
    description = "Map raw rows to canonical advocate records"

    async def execute(self, ctx: SearchContext) -> StepResult:
        started_at = self._now()

        # normalize_rows never raises; malformed rows become empty records
        ctx.records = normalize_rows(ctx.raw_rows)

        return self._success(started_at, metadata={
            "input_rows": len(ctx.raw_rows),
            "records": len(ctx.records),
        })
