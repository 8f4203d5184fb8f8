"""Booking repository - Database operations for bookings"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Booking


class BookingRepository:
    """Repository for booking database operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_booking_by_id(self, booking_id: str, for_update: bool = False) -> Optional[Booking]:
        """Get a booking by ID, optionally locking the row until commit"""
        query = self.db.query(Booking).filter(Booking.id == booking_id)
        if for_update:
            query = query.with_for_update()
        return query.first()

    def get_bookings_by_ids(self, booking_ids: set[str]) -> dict[str, Booking]:
        """Fetch several bookings at once, keyed by ID"""
        if not booking_ids:
            return {}
        bookings = self.db.query(Booking).filter(Booking.id.in_(booking_ids)).all()
        return {b.id: b for b in bookings}

    def save(self, booking: Booking) -> Booking:
        """Stage booking changes in the current transaction (no commit)"""
        self.db.add(booking)
        self.db.flush()
        return booking
