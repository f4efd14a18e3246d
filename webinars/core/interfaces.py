"""
Core interfaces for the webinar backend.

Use cases depend on these abstractions; the SQLAlchemy and in-memory
repositories in webinars.repositories implement them.
"""
from abc import ABC, abstractmethod
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from webinars.domain.entities import Webinar


class IWebinarRepository(ABC):
    """
    Interface for webinar storage and retrieval.

    Implementations must handle:
    - Duplicate id rejection on create
    - Update without upsert (missing record is an error)
    - Timezone-aware dates only (naive start_date/end_date rejected)
    """

    @abstractmethod
    async def find_by_id(self, webinar_id: str) -> Optional['Webinar']:
        """
        Get webinar by ID.

        Args:
            webinar_id: Webinar identifier

        Returns:
            Webinar if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, webinar: 'Webinar') -> None:
        """
        Store a new webinar.

        Args:
            webinar: Domain Webinar entity

        Raises:
            DuplicateWebinarError: If webinar ID already exists
            NaiveTimestampError: If start_date or end_date has no timezone
        """
        pass

    @abstractmethod
    async def update(self, webinar: 'Webinar') -> None:
        """
        Replace a stored webinar.

        Args:
            webinar: Domain Webinar entity carrying the new field values

        Raises:
            WebinarUpdateError: If no webinar with this ID exists
            NaiveTimestampError: If start_date or end_date has no timezone
        """
        pass
