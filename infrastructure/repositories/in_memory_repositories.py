"""In-Memory Repository Implementations"""
from collections import defaultdict
from itertools import count
from typing import Optional, List, Dict, Tuple

from domain.repositories import RoomRepository, CustomerRepository, BookingRepository
from domain.entities import Room, Customer, Booking


class InMemoryRoomRepository(RoomRepository):
    """In-memory implementation of RoomRepository"""

    def __init__(self):
        self._storage: Dict[int, Room] = {}
        self._ids = count(1)

    def next_id(self) -> int:
        return next(self._ids)

    async def save(self, room: Room) -> Room:
        """Save room to memory"""
        self._storage[room.room_id] = room
        return room

    async def find_by_id(self, room_id: int) -> Optional[Room]:
        """Find room by ID"""
        return self._storage.get(room_id)

    async def find_all(self) -> List[Room]:
        """Find all rooms"""
        return list(self._storage.values())


class InMemoryCustomerRepository(CustomerRepository):
    """In-memory implementation of CustomerRepository, keyed by name"""

    def __init__(self):
        self._storage: Dict[str, Customer] = {}
        self._ids = count(1)

    def next_id(self) -> int:
        return next(self._ids)

    async def save(self, customer: Customer) -> Customer:
        """Save customer to memory"""
        self._storage[customer.name] = customer
        return customer

    async def find_by_name(self, name: str) -> Optional[Customer]:
        """Find customer by name"""
        return self._storage.get(name)

    async def find_all(self) -> List[Customer]:
        """Find all customers"""
        return list(self._storage.values())


class InMemoryBookingRepository(BookingRepository):
    """In-memory implementation of BookingRepository.

    Bookings are append-only and kept in room, room/date and customer
    indexes, each in insertion order.
    """

    def __init__(self):
        self._by_room: Dict[int, List[Booking]] = defaultdict(list)
        self._by_room_and_date: Dict[Tuple[int, str], List[Booking]] = defaultdict(list)
        self._by_customer: Dict[str, List[Booking]] = defaultdict(list)
        self._ids = count(1)

    def next_id(self) -> int:
        return next(self._ids)

    async def save(self, booking: Booking) -> Booking:
        """Save booking to memory and index it"""
        self._by_room[booking.room_id].append(booking)
        self._by_room_and_date[(booking.room_id, booking.date)].append(booking)
        self._by_customer[booking.customer_name].append(booking)
        return booking

    async def find_by_room(self, room_id: int) -> List[Booking]:
        """Find bookings for a room"""
        return list(self._by_room.get(room_id, []))

    async def find_by_room_and_date(self, room_id: int, booking_date: str) -> List[Booking]:
        """Find bookings for a room on a date"""
        return list(self._by_room_and_date.get((room_id, booking_date), []))

    async def find_by_customer_name(self, customer_name: str) -> List[Booking]:
        """Find bookings by customer name"""
        return list(self._by_customer.get(customer_name, []))
