"""Advocate search request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class AdvocateOut(BaseModel):
    """One canonical advocate as served to the UI."""

    id: str | None = None
    firstName: str = ""
    lastName: str = ""
    city: str = ""
    degree: str = ""
    specialties: list[str] = Field(default_factory=list)
    yearsOfExperience: str = ""
    phoneNumber: str = ""


class AdvocateListResponse(BaseModel):
    """One page of search results plus the total match count."""

    data: list[AdvocateOut] = Field(default_factory=list)
    total: int = Field(0, ge=0)


class SeedResponse(BaseModel):
    """Rows written by the seed endpoint."""

    advocates: list[AdvocateOut] = Field(default_factory=list)
