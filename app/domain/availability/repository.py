"""Availability repository - Read-only access to dates and slots"""

from typing import Optional

from sqlalchemy.orm import Session, selectinload

from ...models import DateEntry, Slot


class AvailabilityRepository:
    """Repository for date and slot lookups"""

    def __init__(self, db: Session):
        self.db = db

    def get_dates(self, expert_id: Optional[str] = None) -> list[DateEntry]:
        """Get all dates with their slots, optionally for one expert"""
        query = self.db.query(DateEntry).options(selectinload(DateEntry.slots))
        if expert_id:
            query = query.filter(DateEntry.expert_id == expert_id)
        return query.order_by(DateEntry.date).all()

    def get_date_by_id(self, date_id: str) -> Optional[DateEntry]:
        return self.db.query(DateEntry).filter(DateEntry.id == date_id).first()

    def get_slot_by_id(self, slot_id: str) -> Optional[Slot]:
        return self.db.query(Slot).filter(Slot.id == slot_id).first()

    def get_dates_by_ids(self, date_ids: set[str]) -> dict[str, DateEntry]:
        if not date_ids:
            return {}
        dates = self.db.query(DateEntry).filter(DateEntry.id.in_(date_ids)).all()
        return {d.id: d for d in dates}

    def get_slots_by_ids(self, slot_ids: set[str]) -> dict[str, Slot]:
        if not slot_ids:
            return {}
        slots = self.db.query(Slot).filter(Slot.id.in_(slot_ids)).all()
        return {s.id: s for s in slots}
