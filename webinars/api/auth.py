"""
Caller identity for the webinar API.

Authentication happens upstream (gateway / session layer). It forwards the
authenticated user id in the X-User-Id header; this module only turns that
header into a domain User.
"""
from fastapi import Header, HTTPException, status
from typing import Optional
import logging

from webinars.domain.entities import User
from webinars.domain.value_objects import UserId

logger = logging.getLogger(__name__)


async def get_current_user(
    x_user_id: Optional[str] = Header(None)
) -> User:
    """
    Resolve the authenticated user from the X-User-Id header.

    Raises:
        HTTPException: 401 if the header is missing or blank
    """
    try:
        user_id = UserId(x_user_id or "")
    except ValueError:
        logger.warning("API request rejected: missing X-User-Id header")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing user identity. Provide the 'X-User-Id' header."
        )

    return User(id=user_id.value)
