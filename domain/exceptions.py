"""Domain Exceptions"""
from typing import Optional


class BookingError(Exception):
    """Base class for booking domain errors."""

    message = "Booking error."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class BookingConflictError(BookingError):
    message = "Room is already booked at this time."


class CustomerBookingsNotFoundError(BookingError):
    message = "No bookings found for this customer."


class RoomNotFoundError(BookingError):
    message = "Room not found."
