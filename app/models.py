import enum

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    ForeignKey,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .database import Base
from .shared.validators import generate_id


class BookingStatus(str, enum.Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    RESCHEDULED = "RESCHEDULED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


class Availability(str, enum.Enum):
    HOLIDAY = "holiday"
    AVAILABLE = "available"
    NOT_AVAILABLE = "not available"
    BOOKED = "booked"


class Expert(Base):
    __tablename__ = "experts"

    id = Column(String(36), primary_key=True, default=generate_id)
    username = Column(String(255), unique=True, index=True, nullable=False)
    fullname = Column(String(255), nullable=True)
    expertise = Column(String(255), nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    dates = relationship("DateEntry", back_populates="expert")
    bookings = relationship("Booking", back_populates="expert")


class DateEntry(Base):
    __tablename__ = "dates"

    id = Column(String(36), primary_key=True, default=generate_id)
    date = Column(Date, nullable=False)
    availability = Column(String(20), default=Availability.AVAILABLE.value, nullable=False)
    expert_id = Column(String(36), ForeignKey("experts.id"), index=True, nullable=False)

    expert = relationship("Expert", back_populates="dates")
    slots = relationship("Slot", back_populates="date_entry", order_by="Slot.timing")


class Slot(Base):
    __tablename__ = "slots"

    id = Column(String(36), primary_key=True, default=generate_id)
    # Each slot belongs to exactly one date
    date_id = Column(String(36), ForeignKey("dates.id"), index=True, nullable=False)
    timing = Column(String(50), nullable=False)  # e.g. "10:00-10:30"
    period = Column(String(20), nullable=True)  # morning, afternoon, evening
    availability = Column(String(20), default=Availability.AVAILABLE.value, nullable=False)
    expert_id = Column(String(36), ForeignKey("experts.id"), index=True, nullable=False)
    plan_id = Column(String(36), nullable=True)  # Plans are managed elsewhere

    date_entry = relationship("DateEntry", back_populates="slots")


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(String(36), primary_key=True, default=generate_id)
    expert_id = Column(String(36), ForeignKey("experts.id"), index=True, nullable=False)
    plan_id = Column(String(36), nullable=True)
    date_id = Column(String(36), ForeignKey("dates.id"), nullable=False)
    slot_id = Column(String(36), ForeignKey("slots.id"), nullable=False)
    status = Column(String(20), default=BookingStatus.PENDING.value, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    expert = relationship("Expert", back_populates="bookings")


class ReschedulingRequest(Base):
    __tablename__ = "rescheduling_requests"
    # At most one active request per booking, enforced by the database
    __table_args__ = (
        UniqueConstraint("current_booking_id", name="uq_rescheduling_requests_booking"),
    )

    id = Column(String(36), primary_key=True, default=generate_id)
    current_booking_id = Column(String(36), ForeignKey("bookings.id"), nullable=False)
    # Plain references: the admin view tolerates dates/slots removed after submission
    requested_date_id = Column(String(36), nullable=False)
    requested_slot_id = Column(String(36), nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    booking = relationship("Booking")
