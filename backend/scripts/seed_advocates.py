"""
Seed the advocates table for development.
Run: python -m scripts.seed_advocates  (from backend/)
"""

import asyncio

from app.core.logging import setup_logging
from app.db.models import Base
from app.db.seed.advocates import ADVOCATE_DATA
from app.db.session import async_session, engine
from app.repositories.advocates import count_advocates, insert_advocates


async def seed():
    """Create the schema if missing, then insert the built-in advocates."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        created = await insert_advocates(session, ADVOCATE_DATA)
        for advocate in created:
            print(f"  Created advocate: {advocate.first_name} {advocate.last_name} ({advocate.city})")
        await session.commit()
        total = await count_advocates(session)
    await engine.dispose()
    print(f"Seeded {len(created)} advocates ({total} in table).")


if __name__ == "__main__":
    setup_logging("INFO")
    asyncio.run(seed())
