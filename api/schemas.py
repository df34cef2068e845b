"""API Schemas - Request and Response DTOs"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import List


class CamelModel(BaseModel):
    """Base DTO exposing camelCase keys on the wire"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


# ============================================================================
# ROOM SCHEMAS
# ============================================================================

class CreateRoomRequest(CamelModel):
    """Create room request DTO"""
    seats: int
    amenities: List[str] = []
    price_per_hour: float


class RoomResponse(CamelModel):
    """Room response DTO"""
    id: int
    seats: int
    amenities: List[str]
    price_per_hour: float


class RoomBookingResponse(CamelModel):
    """Booking summary shown under a room"""
    customer_name: str
    date: str
    start_time: str
    end_time: str


class RoomWithBookingsResponse(RoomResponse):
    """Room view response DTO"""
    booked_status: bool
    bookings: List[RoomBookingResponse]


# ============================================================================
# BOOKING SCHEMAS
# ============================================================================

class CreateBookingRequest(CamelModel):
    """Create booking request DTO"""
    customer_name: str
    date: str
    start_time: str
    end_time: str
    room_id: int


class BookingResponse(CamelModel):
    """Booking response DTO"""
    id: int
    customer_name: str
    date: str
    start_time: str
    end_time: str
    room_id: int
    created_at: datetime


# ============================================================================
# CUSTOMER SCHEMAS
# ============================================================================

class CustomerBookingResponse(CamelModel):
    """Booking summary shown under a customer"""
    room_id: int
    date: str
    start_time: str
    end_time: str


class CustomerWithBookingsResponse(CamelModel):
    """Customer view response DTO"""
    customer_id: int
    customer_name: str
    bookings: List[CustomerBookingResponse]


class BookingDetailResponse(CamelModel):
    """Customer booking history entry DTO"""
    customer_name: str
    room_id: int
    date: str
    start_time: str
    end_time: str
    booking_id: int
    created_at: datetime
    booking_status: str
