"""
Models package — re-exports Base and all models.

Import models here so `Base.metadata` picks up every table
(used by `scripts/seed_advocates.py` to create the schema).

When adding a new model:
    1. Create `app/db/models/<table_name>.py`
    2. Import it here
"""

from app.db.models.base import Base
from app.db.models.advocate import Advocate

__all__ = [
    "Base",
    "Advocate",
]
