"""
Advocate model — one row per advocate in the directory.

The search path only reads this table; rows are written by the seed
endpoint and the bootstrap script.
"""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import BigInteger, DateTime, Integer, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from app.db.models.base import Base, utcnow


class Advocate(Base):
    __tablename__ = "advocates"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    city: Mapped[str] = mapped_column(Text, nullable=False)
    degree: Mapped[str] = mapped_column(Text, nullable=False)
    specialties: Mapped[Any] = mapped_column(JSONB, default=list, nullable=False)
    years_of_experience: Mapped[int] = mapped_column(Integer, nullable=False)
    phone_number: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )

    def to_row(self) -> dict[str, Any]:
        """Column values keyed by column name (snake_case)."""
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "city": self.city,
            "degree": self.degree,
            "specialties": self.specialties,
            "years_of_experience": self.years_of_experience,
            "phone_number": self.phone_number,
        }

    def __repr__(self) -> str:
        return f"<Advocate id={self.id} {self.first_name} {self.last_name}>"
