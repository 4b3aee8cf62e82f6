"""
Pydantic models for pitch bookings.

A booking reserves the pitch on ``booking_date`` between
``start_time`` and ``end_time``.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field


class PitchBookingBase(BaseModel):
    booking_date: date = Field(..., description="Day the pitch is booked for")
    start_time: datetime = Field(..., description="Start of the booked slot")
    end_time: datetime = Field(..., description="End of the booked slot")


class PitchBookingCreate(PitchBookingBase):
    """Schema for creating a booking.  ``id`` must be left empty."""

    id: Optional[int] = None


class PitchBookingUpdate(PitchBookingCreate):
    """Schema for replacing a booking.  ``id`` must match the path."""


class PitchBookingPartial(BaseModel):
    """Schema for partially updating a booking.

    Only fields that are present and not null are applied.
    """

    id: Optional[int] = None
    booking_date: Optional[date] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None


class PitchBookingRead(PitchBookingBase):
    id: int

    model_config = {
        "from_attributes": True,
    }
