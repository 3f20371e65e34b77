from sqlalchemy.ext.asyncio import AsyncEngine

from serverforge.app.infrastructure.db.base import Base
from serverforge.app.infrastructure.db import models  # noqa: F401  (registers tables)


async def init_db(engine: AsyncEngine | None = None) -> None:
    if engine is None:
        from serverforge.app.infrastructure.db.engine import engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
