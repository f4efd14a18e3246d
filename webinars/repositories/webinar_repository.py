"""
Webinar Repository implementation using SQLAlchemy.

Handles conversion between:
- Domain entity (Webinar) → ORM model (WebinarModel)
- ORM model → Domain entity

Concurrent writers are not coordinated: the last update to reach the
database wins.
"""

from datetime import datetime, timezone
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
import logging

from webinars.core.interfaces import IWebinarRepository
from webinars.domain.entities import (
    Webinar,
    DuplicateWebinarError,
    NaiveTimestampError,
    WebinarUpdateError,
)
from webinars.db.models import WebinarModel

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    """
    Normalize a timestamp to timezone-aware UTC.

    Writes only ever see aware values (naive ones are rejected first); the
    naive branch covers columns that hand tzinfo back stripped (SQLite).
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class WebinarRepository(IWebinarRepository):
    """SQLAlchemy implementation of IWebinarRepository."""

    def __init__(self, db_session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            db_session: SQLAlchemy async session
        """
        self._db = db_session

    async def find_by_id(self, webinar_id: str) -> Optional[Webinar]:
        """
        Retrieve webinar by ID.

        Args:
            webinar_id: Webinar identifier

        Returns:
            Webinar if found, None otherwise
        """
        result = await self._db.execute(
            select(WebinarModel)
            .where(WebinarModel.id == webinar_id)
            .execution_options(populate_existing=True)
        )
        db_webinar = result.scalar_one_or_none()

        if db_webinar is None:
            logger.debug(f"Webinar {webinar_id} not found")
            return None

        logger.debug(f"📖 Retrieved webinar {webinar_id}")
        return self._from_orm(db_webinar)

    async def create(self, webinar: Webinar) -> None:
        """
        Insert a new webinar.

        Raises:
            NaiveTimestampError: If start_date or end_date has no timezone
            DuplicateWebinarError: If webinar ID already exists
        """
        if not webinar.has_aware_dates():
            raise NaiveTimestampError(webinar.id)

        try:
            self._db.add(self._to_orm(webinar))
            await self._db.flush()
        except IntegrityError as e:
            logger.error(f"Webinar {webinar.id} already exists")
            await self._db.rollback()
            raise DuplicateWebinarError(webinar.id) from e

        logger.info(f"💾 Created webinar {webinar.id} ({webinar.seats} seats)")

    async def update(self, webinar: Webinar) -> None:
        """
        Overwrite every column of an existing webinar.

        Raises:
            NaiveTimestampError: If start_date or end_date has no timezone
            WebinarUpdateError: If no row has this webinar's ID
        """
        if not webinar.has_aware_dates():
            raise NaiveTimestampError(webinar.id)

        stmt = (
            update(WebinarModel)
            .where(WebinarModel.id == webinar.id)
            .values(
                organizer_id=webinar.organizer_id,
                title=webinar.title,
                start_date=_as_utc(webinar.start_date),
                end_date=_as_utc(webinar.end_date),
                seats=webinar.seats,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._db.execute(stmt)

        if result.rowcount == 0:
            logger.error(f"Cannot update webinar {webinar.id}: not found")
            raise WebinarUpdateError(webinar.id)

        logger.info(f"💾 Updated webinar {webinar.id} ({webinar.seats} seats)")

    # Domain ↔ ORM conversion methods

    def _to_orm(self, webinar: Webinar) -> WebinarModel:
        """Convert domain Webinar → ORM WebinarModel"""
        return WebinarModel(
            id=webinar.id,
            organizer_id=webinar.organizer_id,
            title=webinar.title,
            start_date=_as_utc(webinar.start_date),
            end_date=_as_utc(webinar.end_date),
            seats=webinar.seats,
        )

    def _from_orm(self, db_webinar: WebinarModel) -> Webinar:
        """Convert ORM WebinarModel → domain Webinar"""
        return Webinar(
            id=db_webinar.id,
            organizer_id=db_webinar.organizer_id,
            title=db_webinar.title,
            start_date=_as_utc(db_webinar.start_date),
            end_date=_as_utc(db_webinar.end_date),
            seats=db_webinar.seats,
        )
