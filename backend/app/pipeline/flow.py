"""
Search flow — the ordered step sequence for an advocate search.

    fetch → normalize → dedupe → assign ids → filter/rank/paginate

The same sequence runs whether the rows come from the store or from the
fallback dataset, so callers get the same ``{data, total}`` shape either way.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from app.core.config import settings
from app.core.constants import SyntheticIdMode
from app.db.seed.advocates import ADVOCATE_DATA
from app.pipeline.engine import SearchEngine
from app.pipeline.step import SearchStep
from app.pipeline.steps.assign_ids import AssignIdsStep
from app.pipeline.steps.dedupe_records import DedupeRecordsStep
from app.pipeline.steps.fetch_rows import FetchRowsStep, RowFetcher
from app.pipeline.steps.normalize_rows import NormalizeRowsStep
from app.pipeline.steps.search_records import SearchRecordsStep


def search_flow(
    row_fetcher: RowFetcher | None,
    fallback_rows: Sequence[Mapping[str, Any]] = ADVOCATE_DATA,
    id_mode: SyntheticIdMode | str | None = None,
) -> list[SearchStep]:
    """Build the step list for one search request."""
    return [
        FetchRowsStep(row_fetcher, fallback_rows),
        NormalizeRowsStep(),
        DedupeRecordsStep(),
        AssignIdsStep(id_mode or settings.SYNTHETIC_ID_MODE),
        SearchRecordsStep(),
    ]


def build_search_engine(
    row_fetcher: RowFetcher | None,
    fallback_rows: Sequence[Mapping[str, Any]] = ADVOCATE_DATA,
    id_mode: SyntheticIdMode | str | None = None,
) -> SearchEngine:
    return SearchEngine(steps=search_flow(row_fetcher, fallback_rows, id_mode))
