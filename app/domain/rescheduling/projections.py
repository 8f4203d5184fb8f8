"""Read-side views over pending reschedule requests.

Each view starts from the same request collection and differs only in what it
joins in. The admin view composes three independent lookups (booking->expert,
request->date, request->slot); any of them may come back empty for a given
request without affecting the rest of the list.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ...models import Booking, DateEntry, Expert, ReschedulingRequest, Slot
from ...shared.exceptions import NotFoundError
from ..availability.repository import AvailabilityRepository
from ..bookings.repository import BookingRepository
from ..experts.repository import ExpertRepository
from .repository import ReschedulingRequestRepository

logger = logging.getLogger(__name__)


def request_view(request: ReschedulingRequest) -> dict:
    return {
        "id": request.id,
        "currentBookingId": request.current_booking_id,
        "requestedDateId": request.requested_date_id,
        "requestedSlotId": request.requested_slot_id,
        "createdAt": request.created_at,
    }


def expert_view(expert: Optional[Expert]) -> Optional[dict]:
    if expert is None:
        return None
    return {"id": expert.id, "username": expert.username}


def booking_view(booking: Optional[Booking], expert: Optional[Expert]) -> Optional[dict]:
    if booking is None:
        return None
    return {"id": booking.id, "status": booking.status, "expert": expert_view(expert)}


def date_view(date_entry: Optional[DateEntry]) -> Optional[dict]:
    if date_entry is None:
        return None
    return {
        "id": date_entry.id,
        "date": date_entry.date,
        "availability": date_entry.availability,
    }


def slot_view(slot: Optional[Slot]) -> Optional[dict]:
    if slot is None:
        return None
    return {
        "id": slot.id,
        "timing": slot.timing,
        "period": slot.period,
        "availability": slot.availability,
    }


class ReschedulingProjections:
    """Builds list responses for the reschedule endpoints"""

    def __init__(self, db: Session):
        self.requests = ReschedulingRequestRepository(db)
        self.bookings = BookingRepository(db)
        self.experts = ExpertRepository(db)
        self.availability = AvailabilityRepository(db)

    def plain_list(self) -> list[dict]:
        return [request_view(r) for r in self.requests.find_all()]

    def by_expert(self, expert_id: str) -> list[dict]:
        # Raises expert_not_found; afterwards the expert sits in the identity map
        requests = self.requests.find_by_expert(expert_id)
        expert = self.experts.get_expert_by_id(expert_id)
        if not requests:
            raise NotFoundError(
                "No reschedule requests found for this expert", code="no_requests_for_expert"
            )

        return [{**request_view(r), "expertName": expert.username} for r in requests]

    def admin_list(self) -> list[dict]:
        requests = self.requests.find_all()

        bookings = self.bookings.get_bookings_by_ids({r.current_booking_id for r in requests})
        experts = self.experts.get_experts_by_ids({b.expert_id for b in bookings.values()})
        dates = self.availability.get_dates_by_ids({r.requested_date_id for r in requests})
        slots = self.availability.get_slots_by_ids({r.requested_slot_id for r in requests})

        entries = []
        for r in requests:
            booking = bookings.get(r.current_booking_id)
            expert = experts.get(booking.expert_id) if booking else None
            date_entry = dates.get(r.requested_date_id)
            slot = slots.get(r.requested_slot_id)
            if not (booking and expert and date_entry and slot):
                logger.warning(f"⚠️ Reschedule request {r.id} has missing related records")

            entries.append(
                {
                    **request_view(r),
                    "currentBooking": booking_view(booking, expert),
                    "requestedDate": date_view(date_entry),
                    "requestedSlot": slot_view(slot),
                }
            )
        return entries
