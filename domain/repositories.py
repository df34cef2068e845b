"""Domain Repository Interfaces"""
from abc import ABC, abstractmethod
from typing import Optional, List

from domain.entities import Room, Customer, Booking


class RoomRepository(ABC):
    """Repository interface for Room Entity"""

    @abstractmethod
    def next_id(self) -> int:
        """Reserve the next room ID"""
        pass

    @abstractmethod
    async def save(self, room: Room) -> Room:
        """Save room"""
        pass

    @abstractmethod
    async def find_by_id(self, room_id: int) -> Optional[Room]:
        """Find room by ID"""
        pass

    @abstractmethod
    async def find_all(self) -> List[Room]:
        """Find all rooms in creation order"""
        pass


class CustomerRepository(ABC):
    """Repository interface for Customer Entity"""

    @abstractmethod
    def next_id(self) -> int:
        """Reserve the next customer ID"""
        pass

    @abstractmethod
    async def save(self, customer: Customer) -> Customer:
        """Save customer"""
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Customer]:
        """Find customer by exact name"""
        pass

    @abstractmethod
    async def find_all(self) -> List[Customer]:
        """Find all customers in creation order"""
        pass


class BookingRepository(ABC):
    """Repository interface for Booking Entity"""

    @abstractmethod
    def next_id(self) -> int:
        """Reserve the next booking ID"""
        pass

    @abstractmethod
    async def save(self, booking: Booking) -> Booking:
        """Save booking"""
        pass

    @abstractmethod
    async def find_by_room(self, room_id: int) -> List[Booking]:
        """Find bookings for a room on any date"""
        pass

    @abstractmethod
    async def find_by_room_and_date(self, room_id: int, booking_date: str) -> List[Booking]:
        """Find bookings for a room on a specific date"""
        pass

    @abstractmethod
    async def find_by_customer_name(self, customer_name: str) -> List[Booking]:
        """Find bookings made under a customer name"""
        pass
