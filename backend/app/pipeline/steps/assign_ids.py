"""
AssignIdsStep — gives every id-less record a synthetic id.

Random mode uses UUID4.  Deterministic mode uses ``phoneNumber-lastName``
so the same row gets the same id on every request.
"""

from __future__ import annotations

import uuid

from app.core.constants import SyntheticIdMode
from app.pipeline.context import SearchContext, StepResult
from app.pipeline.step import SearchStep
from app.processing.canonical import AdvocateRecord


def synthetic_id(record: AdvocateRecord, mode: SyntheticIdMode) -> str:
    if mode is SyntheticIdMode.DETERMINISTIC:
        return f"{record.phone_number}-{record.last_name}"
    return str(uuid.uuid4())


class AssignIdsStep(SearchStep):
    """Fill in missing ids after dedup."""

    name = "assign_ids"
    description = "Assign synthetic ids to records without one"

    def __init__(self, mode: SyntheticIdMode | str = SyntheticIdMode.RANDOM) -> None:
        self.mode = SyntheticIdMode(mode)

    async def execute(self, ctx: SearchContext) -> StepResult:
        started_at = self._now()

        assigned = 0
        records = []
        for record in ctx.records:
            if record.id is None:
                record = record.with_id(synthetic_id(record, self.mode))
                assigned += 1
            records.append(record)
        ctx.records = records

        return self._success(started_at, metadata={
            "ids_assigned": assigned,
            "mode": self.mode,
        })
