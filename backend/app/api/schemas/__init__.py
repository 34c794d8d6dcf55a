"""API schema package."""

from app.api.schemas.advocates import AdvocateListResponse, AdvocateOut, SeedResponse

__all__ = ["AdvocateOut", "AdvocateListResponse", "SeedResponse"]
