"""
Pydantic models for teams.

``owner_id`` references the profile of the user who owns the team; a
profile owns at most one team.
"""

from typing import Optional

from pydantic import BaseModel, Field


class TeamBase(BaseModel):
    name: str = Field(..., min_length=1, description="Team name")
    location: Optional[str] = None
    owner_id: Optional[int] = Field(None, description="Profile id of the team owner")


class TeamCreate(TeamBase):
    id: Optional[int] = None


class TeamUpdate(TeamCreate):
    """Schema for replacing a team.  ``id`` must match the path."""


class TeamPartial(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = None
    owner_id: Optional[int] = None


class TeamRead(TeamBase):
    id: int

    model_config = {
        "from_attributes": True,
    }
