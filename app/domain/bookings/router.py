"""Booking router - Read endpoint for bookings"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from ...shared.exceptions import NotFoundError
from .repository import BookingRepository
from .schemas import BookingResponse

router = APIRouter(tags=["Bookings"])


def get_booking_repository(db: Session = Depends(get_db)) -> BookingRepository:
    """Dependency injection for BookingRepository"""
    return BookingRepository(db)


@router.get("/booking/{booking_id}", response_model=BookingResponse)
def get_booking(
    booking_id: str,
    repo: BookingRepository = Depends(get_booking_repository),
):
    """Get a booking by ID"""
    booking = repo.get_booking_by_id(booking_id)
    if not booking:
        raise NotFoundError("Booking not found", code="booking_not_found")
    return BookingResponse.from_booking(booking)
