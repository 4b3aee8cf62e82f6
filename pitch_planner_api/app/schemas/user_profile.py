"""
Pydantic models for user profiles.

A profile holds the public details of a registered user.  Its ``id``
is always the id of the owning user, so every user has at most one
profile.  ``profile_pic`` carries base64-encoded image data and
``profile_pic_content_type`` its MIME type.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class UserProfileBase(BaseModel):
    created: Optional[datetime] = Field(None, description="When the profile was created")
    name: str = Field(..., min_length=1, description="Display name")
    profile_pic: Optional[str] = Field(None, description="Base64-encoded picture")
    profile_pic_content_type: Optional[str] = Field(None, description="MIME type of the picture")
    gender: Optional[Gender] = None
    location: Optional[str] = None
    position: Optional[str] = Field(None, description="Preferred playing position")
    referee: Optional[bool] = Field(None, description="Whether the user can referee matches")


class UserProfileCreate(UserProfileBase):
    """Schema for creating a profile.

    ``id`` must be left empty; the acting user's id is assigned.
    """

    id: Optional[int] = None


class UserProfileUpdate(UserProfileCreate):
    """Schema for replacing a profile.  ``id`` must match the path."""


class UserProfilePartial(BaseModel):
    id: Optional[int] = None
    created: Optional[datetime] = None
    name: Optional[str] = Field(None, min_length=1)
    profile_pic: Optional[str] = None
    profile_pic_content_type: Optional[str] = None
    gender: Optional[Gender] = None
    location: Optional[str] = None
    position: Optional[str] = None
    referee: Optional[bool] = None


class UserProfileRead(UserProfileBase):
    id: int

    model_config = {
        "from_attributes": True,
    }
