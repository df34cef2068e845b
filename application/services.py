"""Application Services - Business use cases"""
import asyncio
import logging
from collections import defaultdict
from typing import Dict, List, Optional

from domain.repositories import RoomRepository, CustomerRepository, BookingRepository
from domain.entities import Room, Customer, Booking
from domain.exceptions import BookingConflictError, RoomNotFoundError
from domain.value_objects import TimeSlot

logger = logging.getLogger(__name__)


class RoomService:
    """Service for Room registry use cases"""

    def __init__(self, repository: RoomRepository):
        self.repository = repository

    async def create_room(
        self,
        seats: int,
        amenities: List[str],
        price_per_hour: float
    ) -> Room:
        """Register a new room with the next sequential ID"""
        room = Room(
            room_id=self.repository.next_id(),
            seats=seats,
            amenities=list(amenities),
            price_per_hour=price_per_hour
        )
        await self.repository.save(room)
        logger.info("Room %s created (%s seats)", room.room_id, room.seats)
        return room

    async def get_room(self, room_id: int) -> Optional[Room]:
        """Get room by ID"""
        return await self.repository.find_by_id(room_id)

    async def list_rooms(self) -> List[Room]:
        """Get all rooms in creation order"""
        return await self.repository.find_all()


class CustomerService:
    """Service for Customer directory use cases"""

    def __init__(self, repository: CustomerRepository):
        self.repository = repository
        self._lock = asyncio.Lock()

    async def ensure_customer(self, name: str) -> Customer:
        """Create the customer on first sight of a name, otherwise return it"""
        async with self._lock:
            customer = await self.repository.find_by_name(name)
            if customer:
                logger.debug("Customer %r already known", name)
                return customer

            customer = Customer(customer_id=self.repository.next_id(), name=name)
            await self.repository.save(customer)
        logger.info("Customer %s registered as %r", customer.customer_id, name)
        return customer

    async def list_customers(self) -> List[Customer]:
        """Get all customers in creation order"""
        return await self.repository.find_all()


class BookingService:
    """Service for the booking ledger.

    Admission of a proposal (conflict check, append, customer upsert) runs
    under a per-room lock, so proposals for the same room are serialized
    while different rooms are admitted independently.
    """

    def __init__(self,
                 repository: BookingRepository,
                 room_service: RoomService,
                 customer_service: CustomerService):
        self.repository = repository
        self.room_service = room_service
        self.customer_service = customer_service
        self._room_locks: Dict[int, asyncio.Lock] = defaultdict(asyncio.Lock)

    async def propose_booking(
        self,
        customer_name: str,
        date: str,
        start_time: str,
        end_time: str,
        room_id: int
    ) -> Booking:
        """Admit a booking unless it collides with one in the same room and date"""
        room = await self.room_service.get_room(room_id)
        if not room:
            logger.warning("Booking rejected: room %s does not exist", room_id)
            raise RoomNotFoundError()

        slot = TimeSlot(date=date, start_time=start_time, end_time=end_time)

        async with self._room_locks[room_id]:
            existing = await self.repository.find_by_room_and_date(room_id, date)
            if any(booking.conflicts_with(room_id, slot) for booking in existing):
                logger.warning(
                    "Booking rejected: room %s already booked on %s between %s and %s",
                    room_id, date, start_time, end_time
                )
                raise BookingConflictError()

            booking = Booking.create(
                booking_id=self.repository.next_id(),
                customer_name=customer_name,
                room_id=room_id,
                slot=slot
            )
            await self.repository.save(booking)
            await self.customer_service.ensure_customer(customer_name)

        logger.info(
            "Booking %s admitted: room %s on %s %s-%s for %r",
            booking.booking_id, room_id, date, start_time, end_time, customer_name
        )
        return booking

    async def list_bookings_for_room(self, room_id: int) -> List[Booking]:
        """Get all bookings of a room on any date"""
        return await self.repository.find_by_room(room_id)

    async def list_bookings_for_customer(self, customer_name: str) -> List[Booking]:
        """Get bookings made under an exact customer name (may be empty)"""
        return await self.repository.find_by_customer_name(customer_name)

    async def is_booked_today(self, room_id: int, today: str) -> bool:
        """Check if the room has any booking on the given date"""
        bookings = await self.repository.find_by_room_and_date(room_id, today)
        return len(bookings) > 0
