"""
In-memory Webinar Repository.

Test double for IWebinarRepository: keeps webinars in an ordered list held
in process memory. Same contract as the SQLAlchemy repository.
"""

from typing import Iterable, List, Optional

from webinars.core.interfaces import IWebinarRepository
from webinars.domain.entities import (
    Webinar,
    DuplicateWebinarError,
    NaiveTimestampError,
    WebinarUpdateError,
)


class InMemoryWebinarRepository(IWebinarRepository):
    """List-backed implementation of IWebinarRepository"""

    def __init__(self, webinars: Optional[Iterable[Webinar]] = None):
        self.database: List[Webinar] = list(webinars or [])

    async def find_by_id(self, webinar_id: str) -> Optional[Webinar]:
        return self.find_by_id_sync(webinar_id)

    def find_by_id_sync(self, webinar_id: str) -> Optional[Webinar]:
        """Synchronous lookup for test assertions"""
        for webinar in self.database:
            if webinar.id == webinar_id:
                return webinar
        return None

    async def create(self, webinar: Webinar) -> None:
        if not webinar.has_aware_dates():
            raise NaiveTimestampError(webinar.id)
        if self.find_by_id_sync(webinar.id) is not None:
            raise DuplicateWebinarError(webinar.id)
        self.database.append(webinar)

    async def update(self, webinar: Webinar) -> None:
        if not webinar.has_aware_dates():
            raise NaiveTimestampError(webinar.id)
        for index, existing in enumerate(self.database):
            if existing.id == webinar.id:
                self.database[index] = webinar
                return
        raise WebinarUpdateError(webinar.id)
