"""
Pytest configuration and shared fixtures.
"""
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from webinars.db.models import Base
from webinars.domain.entities import Webinar
from webinars.seeds import alice

IN_MEMORY_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def webinar():
    """Webinar organized by alice with 100 seats"""
    return Webinar(
        id="webinar-id",
        organizer_id=alice.id,
        title="Webinar title",
        start_date=datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc),
        end_date=datetime(2024, 1, 1, 1, 0, tzinfo=timezone.utc),
        seats=100,
    )


@pytest_asyncio.fixture
async def test_db():
    """Create an in-memory test database, yields a session factory"""
    engine = create_async_engine(
        IN_MEMORY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_maker = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )

    yield async_session_maker

    await engine.dispose()
