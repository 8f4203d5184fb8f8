"""Rescheduling repository - Persistence for pending reschedule requests"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...models import Booking, Expert, ReschedulingRequest
from ...shared.exceptions import ConflictError, NotFoundError
from ...shared.validators import require_identifier

logger = logging.getLogger(__name__)


class ReschedulingRequestRepository:
    """
    Repository for reschedule requests, keyed by the booking they target.

    The one-active-request-per-booking rule lives in the unique constraint on
    ``rescheduling_requests.current_booking_id``; ``create`` relies on the
    database to reject the second insert.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(
        self, booking_id: str, requested_date_id: str, requested_slot_id: str
    ) -> ReschedulingRequest:
        """Insert a new pending request and commit it"""
        booking_id = require_identifier(booking_id, "currentBookingId")
        request = ReschedulingRequest(
            current_booking_id=booking_id,
            requested_date_id=require_identifier(requested_date_id, "requestedDateId"),
            requested_slot_id=require_identifier(requested_slot_id, "requestedSlotId"),
        )
        self.db.add(request)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            # Foreign key failure rather than the uniqueness constraint
            booking_exists = self.db.query(Booking.id).filter(Booking.id == booking_id).first()
            if not booking_exists:
                raise NotFoundError("Booking not found", code="booking_not_found") from e
            logger.warning(f"⚠️ Reschedule request already pending for booking {booking_id}")
            raise ConflictError(
                "A reschedule request is already pending for this booking"
            ) from e
        self.db.refresh(request)
        return request

    def find_all(self) -> list[ReschedulingRequest]:
        return (
            self.db.query(ReschedulingRequest)
            .order_by(ReschedulingRequest.created_at, ReschedulingRequest.id)
            .all()
        )

    def find_by_booking(
        self, booking_id: str, for_update: bool = False
    ) -> Optional[ReschedulingRequest]:
        query = self.db.query(ReschedulingRequest).filter(
            ReschedulingRequest.current_booking_id == booking_id
        )
        if for_update:
            query = query.with_for_update()
        return query.first()

    def find_by_expert(self, expert_id: str) -> list[ReschedulingRequest]:
        """Requests whose booking belongs to ``expert_id``"""
        expert = self.db.get(Expert, expert_id)
        if not expert:
            raise NotFoundError("Expert not found", code="expert_not_found")

        return (
            self.db.query(ReschedulingRequest)
            .join(Booking, Booking.id == ReschedulingRequest.current_booking_id)
            .filter(Booking.expert_id == expert_id)
            .order_by(ReschedulingRequest.created_at, ReschedulingRequest.id)
            .all()
        )

    def delete_by_booking(self, booking_id: str) -> int:
        """
        Delete the request for ``booking_id`` inside the caller's transaction.

        Returns the number of rows removed; 0 when there was nothing to delete.
        """
        return (
            self.db.query(ReschedulingRequest)
            .filter(ReschedulingRequest.current_booking_id == booking_id)
            .delete(synchronize_session=False)
        )
