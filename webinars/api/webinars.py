"""
Webinar API - create, read and change seats.

Domain errors raised here are translated to HTTP responses by the
exception handlers registered in webinars.main.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from pydantic import BaseModel, Field
from datetime import datetime
import logging

from webinars.api.auth import get_current_user
from webinars.application.change_seats import ChangeSeats
from webinars.db.connection import get_db_session
from webinars.domain.entities import User, Webinar, WebinarNotFoundError
from webinars.domain.value_objects import WebinarId
from webinars.repositories.webinar_repository import WebinarRepository

logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================
# Pydantic Models
# ============================================

class CreateWebinarRequest(BaseModel):
    """Request to create a webinar organized by the caller"""
    id: str = Field(..., min_length=1, max_length=100, description="Webinar ID")
    title: str = Field(..., min_length=1, max_length=255)
    start_date: datetime
    end_date: datetime
    seats: int = Field(..., ge=0)


class ChangeSeatsRequest(BaseModel):
    """Request to change the seat count of a webinar"""
    seats: int = Field(..., ge=0, description="New seat count")


class WebinarResponse(BaseModel):
    """Webinar details"""
    id: str
    organizer_id: str
    title: str
    start_date: datetime
    end_date: datetime
    seats: int

    @classmethod
    def from_domain(cls, webinar: Webinar) -> "WebinarResponse":
        return cls(
            id=webinar.id,
            organizer_id=webinar.organizer_id,
            title=webinar.title,
            start_date=webinar.start_date,
            end_date=webinar.end_date,
            seats=webinar.seats,
        )


def _parse_webinar_id(webinar_id: str) -> str:
    try:
        return WebinarId(webinar_id).value
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


# ============================================
# Endpoints
# ============================================

@router.post("", response_model=WebinarResponse, status_code=status.HTTP_201_CREATED)
async def create_webinar(
    request: CreateWebinarRequest,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session)
):
    """Create a webinar. The caller becomes its organizer."""
    webinar = Webinar(
        id=_parse_webinar_id(request.id),
        organizer_id=user.id,
        title=request.title,
        start_date=request.start_date,
        end_date=request.end_date,
        seats=request.seats,
    )
    await WebinarRepository(db).create(webinar)
    logger.info(f"Webinar {webinar.id} created by {user.id}")
    return WebinarResponse.from_domain(webinar)


@router.get("/{webinar_id}", response_model=WebinarResponse)
async def get_webinar(
    webinar_id: str,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session)
):
    """Get a webinar by ID."""
    webinar = await WebinarRepository(db).find_by_id(_parse_webinar_id(webinar_id))
    if webinar is None:
        raise WebinarNotFoundError(webinar_id)
    return WebinarResponse.from_domain(webinar)


@router.patch("/{webinar_id}/seats", response_model=WebinarResponse)
async def change_seats(
    webinar_id: str,
    request: ChangeSeatsRequest,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session)
):
    """
    Change the number of seats of a webinar.

    Only the organizer may do this; seats can only go up, to at most 1000.
    """
    use_case = ChangeSeats(WebinarRepository(db))
    webinar = await use_case.execute(
        user=user,
        webinar_id=_parse_webinar_id(webinar_id),
        seats=request.seats,
    )
    return WebinarResponse.from_domain(webinar)
