"""
Search pipeline — step-based engine behind the advocate search endpoint.

Each request runs fetch → normalize → dedupe → assign ids → search over a
fresh SearchContext, with per-step timing and structured logging.
"""

from app.pipeline.context import SearchContext, StepResult
from app.pipeline.engine import SearchEngine, SearchResult
from app.pipeline.flow import build_search_engine, search_flow
from app.pipeline.step import SearchStep

__all__ = [
    "SearchContext",
    "SearchEngine",
    "SearchResult",
    "SearchStep",
    "StepResult",
    "build_search_engine",
    "search_flow",
]
