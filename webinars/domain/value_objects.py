"""
Value objects for type-safe ID handling at the system edges.

The HTTP layer and the CLI wrap raw identifiers in these before handing
them to the use case, so blank ids are rejected early. Entities themselves
keep plain strings.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class WebinarId:
    """
    Webinar identifier value object.

    Example: webinar-id, 3f1c2a9e-...

    Used for:
    - Path parameters (/webinars/{webinar_id})
    - Repository lookups
    """

    value: str

    def __post_init__(self):
        if not self.value or not self.value.strip():
            raise ValueError("WebinarId cannot be empty")
        if len(self.value) > 100:
            raise ValueError(
                f"WebinarId too long: {len(self.value)} characters. "
                f"Maximum is 100."
            )

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"WebinarId('{self.value}')"


@dataclass(frozen=True)
class UserId:
    """
    Authenticated user identifier.

    Compared against Webinar.organizer_id to decide who may modify a webinar.
    """

    value: str

    def __post_init__(self):
        if not self.value or not self.value.strip():
            raise ValueError("UserId cannot be empty")

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"UserId('{self.value}')"
