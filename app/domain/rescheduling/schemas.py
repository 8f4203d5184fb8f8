"""Rescheduling domain schemas - Pydantic models for validation"""

import datetime
from typing import Optional

from pydantic import BaseModel

from ..bookings.schemas import BookingResponse


class RescheduleCreate(BaseModel):
    """Schema for submitting a reschedule request"""

    currentBookingId: str
    requestedDateId: str
    requestedSlotId: str


class RescheduleDecisionRequest(BaseModel):
    """Schema for accepting or rejecting a pending request"""

    currentBookingId: str
    # Kept as a plain string so unknown actions reach the workflow and get a 400
    action: str
    requestedDateId: Optional[str] = None
    requestedSlotId: Optional[str] = None


class MessageResponse(BaseModel):
    message: str


class RescheduleRequestItem(BaseModel):
    id: str
    currentBookingId: str
    requestedDateId: str
    requestedSlotId: str
    createdAt: Optional[datetime.datetime] = None


class ExpertRescheduleRequestItem(RescheduleRequestItem):
    expertName: str


class ExpertSummary(BaseModel):
    id: str
    username: str


class BookingSummary(BaseModel):
    id: str
    status: str
    expert: Optional[ExpertSummary] = None


class DateSummary(BaseModel):
    id: str
    date: datetime.date
    availability: str


class SlotSummary(BaseModel):
    id: str
    timing: str
    period: Optional[str] = None
    availability: str


class AdminRescheduleRequestItem(RescheduleRequestItem):
    currentBooking: Optional[BookingSummary] = None
    requestedDate: Optional[DateSummary] = None
    requestedSlot: Optional[SlotSummary] = None


class RescheduleRequestList(BaseModel):
    message: str
    list: list[RescheduleRequestItem]


class ExpertRescheduleRequestList(BaseModel):
    message: str
    list: list[ExpertRescheduleRequestItem]


class AdminRescheduleRequestList(BaseModel):
    message: str
    list: list[AdminRescheduleRequestItem]


class DecisionResponse(BaseModel):
    message: str
    booking: Optional[BookingResponse] = None
