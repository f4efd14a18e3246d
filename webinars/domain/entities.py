"""
Domain Entities - Webinar records and the users that organize them.

Webinar is a plain immutable record: no cross-field invariants are checked
at construction. The seat rules belong to the ChangeSeats use case, not to
the entity.
"""

from dataclasses import dataclass, replace
from datetime import datetime

# Seat cap: the maximum number of seats a webinar may reach
MAX_SEATS = 1000


@dataclass(frozen=True)
class User:
    """
    Authenticated user reference.

    Only `id` takes part in authorization checks.
    """

    id: str
    email: str = ""


@dataclass(frozen=True)
class Webinar:
    """
    Webinar record.

    Fields:
    - id: unique, never changes
    - organizer_id: id of the user allowed to modify the webinar
      (no foreign key to users)
    - seats: only ever replaced through with_seats()
    """

    id: str
    organizer_id: str
    title: str
    start_date: datetime
    end_date: datetime
    seats: int

    def with_seats(self, seats: int) -> "Webinar":
        """Return a copy of this webinar with a new seat count"""
        return replace(self, seats=seats)

    def is_organized_by(self, user: User) -> bool:
        """Check if user is the organizer of this webinar"""
        return user.id == self.organizer_id

    def has_aware_dates(self) -> bool:
        """Check that both timestamps carry a timezone"""
        return self.start_date.tzinfo is not None and self.end_date.tzinfo is not None


# Domain exceptions

class DomainError(Exception):
    """Base exception for domain layer errors"""
    pass


class WebinarNotFoundError(DomainError):
    """Raised when a webinar id does not resolve to a record"""

    def __init__(self, webinar_id: str):
        self.webinar_id = webinar_id
        super().__init__("Webinar not found")


class WebinarForbiddenError(DomainError):
    """Raised when the caller is not the organizer of the webinar"""

    def __init__(self, user_id: str, webinar_id: str):
        self.user_id = user_id
        self.webinar_id = webinar_id
        super().__init__("User is not allowed to update this webinar")


class SeatsValidationError(DomainError):
    """Raised when a requested seat count breaks the seat rules"""
    pass


class DuplicateWebinarError(DomainError):
    """Raised when attempting to create a webinar whose id already exists"""

    def __init__(self, webinar_id: str):
        self.webinar_id = webinar_id
        super().__init__(f"Webinar {webinar_id} already exists")


class WebinarUpdateError(DomainError):
    """Raised when updating a webinar that is not stored"""

    def __init__(self, webinar_id: str):
        self.webinar_id = webinar_id
        super().__init__(f"Cannot update webinar {webinar_id}: record does not exist")


class NaiveTimestampError(DomainError):
    """Raised when storing a webinar whose dates have no timezone"""

    def __init__(self, webinar_id: str):
        self.webinar_id = webinar_id
        super().__init__(
            f"Webinar {webinar_id} dates must be timezone-aware "
            f"(e.g. 2024-01-01T00:00:00Z)"
        )
