"""
Database connection management with SQLAlchemy async support.

Supports SQLite (development, tests) and PostgreSQL/MySQL (production) via DATABASE_URL.
"""
from typing import Optional
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool
from webinars.db.models import Base
from webinars.config import settings
import logging

logger = logging.getLogger(__name__)

# Database engine (will be initialized in init_db)
engine = None
async_session_maker = None


def build_engine(database_url: str):
    """Create an async engine with settings appropriate to the database type."""
    if database_url.startswith("sqlite"):
        return create_async_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_async_engine(
        database_url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before using
        pool_recycle=3600,   # Recycle connections after 1 hour
    )


async def init_db(database_url: Optional[str] = None):
    """
    Initialize database connection and create tables.

    Args:
        database_url: Optional database URL override (defaults to settings.database_url)
    """
    global engine, async_session_maker

    if database_url is None:
        database_url = settings.database_url
    logger.info(f"Initializing database: {database_url.split('://')[0]}")

    engine = build_engine(database_url)

    # Create session factory
    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("✅ Database initialized successfully")


async def get_db_session() -> AsyncSession:
    """
    Yield one AsyncSession per webinar API request.

    The routes in webinars.api.webinars wrap it in a WebinarRepository, so a
    create or a ChangeSeats write is committed once the handler returns.
    Domain errors raised by the handler (not found, forbidden, seat rules,
    duplicate id) roll the session back before main maps them to a status.
    """
    if async_session_maker is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")

    async with async_session_maker() as session:
        try:
            yield session
        except Exception as e:
            await session.rollback()
            logger.error(f"Database session error: {e}")
            raise
        else:
            await session.commit()
        finally:
            await session.close()


async def close_db():
    """Close database connection."""
    global engine, async_session_maker
    if engine:
        await engine.dispose()
        engine = None
        async_session_maker = None
        logger.info("Database connection closed")
