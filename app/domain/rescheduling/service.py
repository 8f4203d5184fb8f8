"""Rescheduling service - Workflow for submitting and deciding reschedule requests"""

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...models import Booking, BookingStatus, ReschedulingRequest
from ...shared.exceptions import (
    BookingAPIError,
    ConsistencyError,
    InternalError,
    InvalidArgumentError,
    NotFoundError,
    ValidationError,
)
from ...shared.validators import require_identifier, validate_uuid
from ..availability.repository import AvailabilityRepository
from ..bookings.repository import BookingRepository
from .repository import ReschedulingRequestRepository

logger = logging.getLogger(__name__)

ACCEPTED = "accepted"
REJECTED = "rejected"
ACTIONS = frozenset({ACCEPTED, REJECTED})


@dataclass
class Decision:
    action: str
    booking: Booking


class ReschedulingService:
    """Service layer for the reschedule workflow"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ReschedulingRequestRepository(db)
        self.bookings = BookingRepository(db)
        self.availability = AvailabilityRepository(db)

    def submit(
        self, booking_id: str, requested_date_id: str, requested_slot_id: str
    ) -> ReschedulingRequest:
        """Record a reschedule request for a booking. The booking itself is left untouched."""
        booking_id = require_identifier(booking_id, "currentBookingId")
        requested_date_id = require_identifier(requested_date_id, "requestedDateId")
        requested_slot_id = require_identifier(requested_slot_id, "requestedSlotId")

        if not self.bookings.get_booking_by_id(booking_id):
            logger.warning(f"⚠️ Reschedule requested for unknown booking {booking_id}")
            raise NotFoundError("Booking not found", code="booking_not_found")

        request = self.repo.create(booking_id, requested_date_id, requested_slot_id)
        logger.info(
            f"📥 Reschedule request {request.id} submitted for booking {booking_id} "
            f"(date={requested_date_id}, slot={requested_slot_id})"
        )
        return request

    def decide(
        self,
        booking_id: str,
        action: str,
        requested_date_id: Optional[str] = None,
        requested_slot_id: Optional[str] = None,
    ) -> Decision:
        """
        Resolve the pending request for a booking.

        ``accepted`` moves the booking to the requested date/slot and marks it
        RESCHEDULED; ``rejected`` leaves it as is. Either way the request is
        deleted in the same transaction as the booking update.

        Raises:
            NotFoundError: booking or pending request missing, including a request
                resolved by a concurrent caller between lookup and delete
            InvalidArgumentError: action is neither accepted nor rejected
            ValidationError: requested ids malformed or not a real date/slot pair
            ConsistencyError: more than one request row existed for the booking
            InternalError: storage failure
        """
        booking_id = require_identifier(booking_id, "currentBookingId")

        try:
            booking = self.bookings.get_booking_by_id(booking_id, for_update=True)
            if not booking:
                raise NotFoundError("Booking not found", code="booking_not_found")

            if action not in ACTIONS:
                raise InvalidArgumentError("Invalid action")

            request = self.repo.find_by_booking(booking_id, for_update=True)
            if not request:
                raise NotFoundError(
                    "Reschedule request not found", code="reschedule_request_not_found"
                )

            if action == ACCEPTED:
                self._apply_accept(booking, request, requested_date_id, requested_slot_id)

            removed = self.repo.delete_by_booking(booking_id)
            if removed == 0:
                # Another caller resolved the request after our lookup
                logger.warning(
                    f"⚠️ Reschedule request for booking {booking_id} was already resolved "
                    f"(action={action})"
                )
                raise NotFoundError(
                    "Reschedule request not found", code="reschedule_request_not_found"
                )
            if removed > 1:
                logger.error(
                    f"❌ Found {removed} reschedule requests for booking {booking_id} "
                    f"(action={action}); rolling back booking update"
                )
                raise ConsistencyError(
                    "Duplicate reschedule requests for booking; booking left unchanged",
                    booking_id=booking_id,
                )

            self.db.commit()
        except BookingAPIError:
            self.db.rollback()
            raise
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Failed to {action} reschedule for booking {booking_id}: {e}")
            raise InternalError() from e

        self.db.refresh(booking)
        logger.info(f"✅ Reschedule request for booking {booking_id} {action}")
        return Decision(action=action, booking=booking)

    def _apply_accept(
        self,
        booking: Booking,
        request: ReschedulingRequest,
        requested_date_id: Optional[str],
        requested_slot_id: Optional[str],
    ) -> None:
        date_id = request.requested_date_id
        slot_id = request.requested_slot_id
        if not validate_uuid(date_id) or not validate_uuid(slot_id):
            raise ValidationError("Invalid date or slot ID")

        # Ids echoed by the caller must agree with what is pending
        for field, supplied, pending in (
            ("requestedDateId", requested_date_id, date_id),
            ("requestedSlotId", requested_slot_id, slot_id),
        ):
            if supplied is None:
                continue
            if require_identifier(supplied, field) != pending:
                raise ValidationError.for_field(
                    field, f"{field} does not match the pending reschedule request"
                )

        date_entry = self.availability.get_date_by_id(date_id)
        slot = self.availability.get_slot_by_id(slot_id)
        if not date_entry or not slot or slot.date_id != date_entry.id:
            raise ValidationError("Requested slot is not part of the requested date")

        booking.date_id = date_id
        booking.slot_id = slot_id
        booking.status = BookingStatus.RESCHEDULED.value
        self.bookings.save(booking)
