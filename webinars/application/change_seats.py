"""
Change Seats use case.

Lets a webinar's organizer raise its seat count, up to the seat cap.

Checks, in order (the first failure wins and nothing is written):
1. The webinar exists
2. The caller is the organizer
3. The seat count does not go down (same count is accepted)
4. The seat count does not exceed MAX_SEATS
"""

import logging

from webinars.core.interfaces import IWebinarRepository
from webinars.domain.entities import (
    MAX_SEATS,
    SeatsValidationError,
    User,
    Webinar,
    WebinarForbiddenError,
    WebinarNotFoundError,
)

logger = logging.getLogger(__name__)


class ChangeSeats:
    """Use case: change the number of seats of a webinar"""

    def __init__(self, webinar_repository: IWebinarRepository):
        self._webinars = webinar_repository

    async def execute(self, user: User, webinar_id: str, seats: int) -> Webinar:
        """
        Change the seat count of a webinar.

        Args:
            user: Authenticated caller
            webinar_id: Webinar to modify
            seats: Requested seat count

        Returns:
            The updated webinar

        Raises:
            WebinarNotFoundError: Webinar does not exist
            WebinarForbiddenError: Caller is not the organizer
            SeatsValidationError: Seat count reduced or above MAX_SEATS
        """
        webinar = await self._webinars.find_by_id(webinar_id)
        if webinar is None:
            logger.warning(f"Change seats rejected: webinar {webinar_id} not found")
            raise WebinarNotFoundError(webinar_id)

        if not webinar.is_organized_by(user):
            logger.warning(
                f"Change seats rejected: user {user.id} is not the organizer of {webinar_id}"
            )
            raise WebinarForbiddenError(user.id, webinar_id)

        if seats < webinar.seats:
            logger.warning(
                f"Change seats rejected: {webinar_id} has {webinar.seats} seats, requested {seats}"
            )
            raise SeatsValidationError("You cannot reduce the number of seats")

        if seats > MAX_SEATS:
            logger.warning(f"Change seats rejected: {seats} seats exceeds cap for {webinar_id}")
            raise SeatsValidationError(f"Webinar must have at most {MAX_SEATS} seats")

        updated = webinar.with_seats(seats)
        await self._webinars.update(updated)

        logger.info(f"🪑 Webinar {webinar_id} seats changed {webinar.seats} → {seats}")
        return updated
