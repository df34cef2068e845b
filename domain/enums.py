"""Domain Enums"""
from enum import Enum


class BookingStatus(str, Enum):
    CONFIRMED = "Confirmed"
