"""Domain Value Objects"""
from pydantic import BaseModel


class TimeSlot(BaseModel):
    """Value Object for a time range on a calendar date.

    Date and times are opaque strings compared lexically, which matches
    chronological order for zero-padded "HH:MM" values.
    """
    date: str
    start_time: str
    end_time: str

    def overlaps(self, other: "TimeSlot") -> bool:
        """Check whether this slot's time range collides with another's"""
        return (
            (self.start_time >= other.start_time and self.start_time < other.end_time)
            or (self.end_time > other.start_time and self.end_time <= other.end_time)
            or (self.start_time <= other.start_time and self.end_time >= other.end_time)
        )

    def conflicts_with(self, other: "TimeSlot") -> bool:
        """Check overlap on the same date"""
        return self.date == other.date and self.overlaps(other)

    class Config:
        frozen = True
