"""
Pydantic models for availability slots.

An available date records whether a player (``user_profile_id``) or a
whole team (``team_id``) can play between ``from_time`` and
``to_time``.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class AvailableDateBase(BaseModel):
    from_time: datetime
    to_time: datetime
    is_available: bool
    user_profile_id: Optional[int] = Field(None, description="Profile the slot belongs to")
    team_id: Optional[int] = Field(None, description="Team the slot belongs to")


class AvailableDateCreate(AvailableDateBase):
    id: Optional[int] = None


class AvailableDateUpdate(AvailableDateCreate):
    """Schema for replacing an availability slot.  ``id`` must match the path."""


class AvailableDatePartial(BaseModel):
    id: Optional[int] = None
    from_time: Optional[datetime] = None
    to_time: Optional[datetime] = None
    is_available: Optional[bool] = None
    user_profile_id: Optional[int] = None
    team_id: Optional[int] = None


class AvailableDateRead(AvailableDateBase):
    id: int

    model_config = {
        "from_attributes": True,
    }
