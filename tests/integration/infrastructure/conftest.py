import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from serverforge.app.core.config import settings
from serverforge.app.infrastructure.db import init_db
from serverforge.app.infrastructure.db.uow import SqlAlchemyUnitOfWork


@pytest_asyncio.fixture
async def db_engine():
    # one shared connection so every session sees the same in-memory database
    engine = create_async_engine(
        settings.TEST_SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_db(engine)

    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
def session_factory(db_engine):
    return async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def session(session_factory) -> AsyncSession:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def uow(session):
    return SqlAlchemyUnitOfWork(session)
