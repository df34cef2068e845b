"""Application Query Views - read-only projections across rooms, customers and bookings"""
from typing import List

from pydantic import BaseModel

from application.services import RoomService, CustomerService, BookingService
from domain.entities import Room, Booking
from domain.enums import BookingStatus
from domain.exceptions import CustomerBookingsNotFoundError


class RoomWithBookings(BaseModel):
    """Room joined with its bookings"""
    room: Room
    booked_status: bool
    bookings: List[Booking]


class CustomerWithBookings(BaseModel):
    """Customer name joined with its bookings"""
    customer_id: int
    customer_name: str
    bookings: List[Booking]


class BookingDetail(BaseModel):
    """Booking as shown in a customer's booking history"""
    booking: Booking
    booking_status: BookingStatus


class BookingQueryService:
    """Builds the read-side views; never mutates any store"""

    def __init__(self,
                 room_service: RoomService,
                 customer_service: CustomerService,
                 booking_service: BookingService):
        self.room_service = room_service
        self.customer_service = customer_service
        self.booking_service = booking_service

    async def rooms_with_bookings(self, today: str) -> List[RoomWithBookings]:
        """Every room with its bookings and whether it is booked on `today`"""
        views = []
        for room in await self.room_service.list_rooms():
            bookings = await self.booking_service.list_bookings_for_room(room.room_id)
            views.append(RoomWithBookings(
                room=room,
                booked_status=any(b.date == today for b in bookings),
                bookings=bookings
            ))
        return views

    async def customers_with_bookings(self) -> List[CustomerWithBookings]:
        """Every customer with the bookings made under their name"""
        views = []
        for customer in await self.customer_service.list_customers():
            bookings = await self.booking_service.list_bookings_for_customer(customer.name)
            views.append(CustomerWithBookings(
                customer_id=customer.customer_id,
                customer_name=customer.name,
                bookings=bookings
            ))
        return views

    async def customer_booking_details(self, customer_name: str) -> List[BookingDetail]:
        """Booking history for a customer name; raises when there is none"""
        bookings = await self.booking_service.list_bookings_for_customer(customer_name)
        if not bookings:
            raise CustomerBookingsNotFoundError()
        return [BookingDetail(booking=b, booking_status=b.status) for b in bookings]
