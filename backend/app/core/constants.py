"""Shared constants and enums used across the application."""

from enum import StrEnum


class StepStatus(StrEnum):
    """Status of an individual pipeline step."""

    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    SKIPPED = "SKIPPED"


class RowSource(StrEnum):
    """Where the rows of a search came from."""

    STORE = "STORE"
    FALLBACK = "FALLBACK"


class QueryKind(StrEnum):
    """How a search term is matched."""

    EMPTY = "EMPTY"
    NUMERIC = "NUMERIC"
    TEXT = "TEXT"


class SyntheticIdMode(StrEnum):
    """How ids are filled in for records that arrive without one."""

    RANDOM = "random"
    DETERMINISTIC = "deterministic"
