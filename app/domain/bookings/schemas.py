"""Booking domain schemas - Pydantic models for responses"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from ...models import Booking


class BookingResponse(BaseModel):
    """Schema for booking response"""

    id: str
    expertId: str
    planId: Optional[str] = None
    dateId: str
    slotId: str
    status: str
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None

    @classmethod
    def from_booking(cls, booking: Booking) -> "BookingResponse":
        return cls(
            id=booking.id,
            expertId=booking.expert_id,
            planId=booking.plan_id,
            dateId=booking.date_id,
            slotId=booking.slot_id,
            status=booking.status,
            createdAt=booking.created_at,
            updatedAt=booking.updated_at,
        )
