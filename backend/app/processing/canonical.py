"""
Canonical advocate schema — the read-time projection every row is mapped to.

A record is built fresh per request from whatever rows the request sees.
It is never written back to the store.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, replace
from typing import Any

# Serialisation order.  Also the order used for the dedup key.
CANONICAL_FIELDS: tuple[str, ...] = (
    "id",
    "firstName",
    "lastName",
    "city",
    "degree",
    "specialties",
    "yearsOfExperience",
    "phoneNumber",
)


def collation_key(value: str) -> tuple[str, str]:
    """
    Case- and accent-insensitive sort key.

    The original string is the tie-breaker so "oncology" and "Oncology"
    still sort in a fixed order.
    """
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), value)


@dataclass(frozen=True)
class AdvocateRecord:
    """One normalized advocate, independent of the source row shape."""

    id: str | None = None
    first_name: str = ""
    last_name: str = ""
    city: str = ""
    degree: str = ""
    specialties: tuple[str, ...] = ()
    years_of_experience: str = ""
    phone_number: str = ""

    @property
    def joined_specialties(self) -> str:
        return ", ".join(self.specialties)

    def with_id(self, new_id: str) -> "AdvocateRecord":
        return replace(self, id=new_id)

    def to_dict(self) -> dict[str, Any]:
        """camelCase payload, as served by the API."""
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "city": self.city,
            "degree": self.degree,
            "specialties": list(self.specialties),
            "yearsOfExperience": self.years_of_experience,
            "phoneNumber": self.phone_number,
        }
