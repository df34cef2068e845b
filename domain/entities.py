"""Domain Entities"""
from pydantic import BaseModel, Field
from datetime import datetime, timezone
from typing import List

from domain.enums import BookingStatus
from domain.value_objects import TimeSlot


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Room(BaseModel):
    """Room Entity"""
    room_id: int
    seats: int
    amenities: List[str] = []
    price_per_hour: float

    class Config:
        frozen = True
        from_attributes = True


class Customer(BaseModel):
    """Customer Entity, looked up by its unique name"""
    customer_id: int
    name: str

    class Config:
        frozen = True
        from_attributes = True


class Booking(BaseModel):
    """Booking Entity, created only through admission by the ledger"""

    # Identity
    booking_id: int

    # References
    customer_name: str
    room_id: int

    # Value Objects
    slot: TimeSlot

    status: BookingStatus = BookingStatus.CONFIRMED
    created_at: datetime = Field(default_factory=_utcnow)

    class Config:
        frozen = True
        from_attributes = True

    @staticmethod
    def create(
        booking_id: int,
        customer_name: str,
        room_id: int,
        slot: TimeSlot
    ) -> "Booking":
        """Create a confirmed booking stamped with the current instant"""
        return Booking(
            booking_id=booking_id,
            customer_name=customer_name,
            room_id=room_id,
            slot=slot,
            status=BookingStatus.CONFIRMED,
            created_at=_utcnow()
        )

    @property
    def date(self) -> str:
        return self.slot.date

    @property
    def start_time(self) -> str:
        return self.slot.start_time

    @property
    def end_time(self) -> str:
        return self.slot.end_time

    def conflicts_with(self, room_id: int, slot: TimeSlot) -> bool:
        """Check whether a proposed slot in a room collides with this booking"""
        return self.room_id == room_id and slot.conflicts_with(self.slot)
