"""Availability domain schemas - dates and their slots"""

import datetime
from typing import Optional

from pydantic import BaseModel

from ...models import DateEntry, Slot


class SlotResponse(BaseModel):
    id: str
    timing: str
    period: Optional[str] = None
    availability: str
    expertId: str
    planId: Optional[str] = None

    @classmethod
    def from_slot(cls, slot: Slot) -> "SlotResponse":
        return cls(
            id=slot.id,
            timing=slot.timing,
            period=slot.period,
            availability=slot.availability,
            expertId=slot.expert_id,
            planId=slot.plan_id,
        )


class DateResponse(BaseModel):
    id: str
    date: datetime.date
    availability: str
    expertId: str
    slots: list[SlotResponse] = []

    @classmethod
    def from_date(cls, entry: DateEntry) -> "DateResponse":
        return cls(
            id=entry.id,
            date=entry.date,
            availability=entry.availability,
            expertId=entry.expert_id,
            slots=[SlotResponse.from_slot(s) for s in entry.slots],
        )
