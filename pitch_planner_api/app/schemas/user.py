"""
Pydantic models for user accounts.

Accounts exist so requests can be attributed to a user; a user's id
doubles as the id of their profile.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Schema for registering a user."""

    login: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=4, max_length=100)
    email: Optional[str] = None


class LoginRequest(BaseModel):
    username: str
    password: str


class TokenResponse(BaseModel):
    id_token: str


class UserRead(BaseModel):
    """Schema for reading a user from the API.  The password is never returned."""

    id: int
    login: str
    email: Optional[str] = None
    activated: bool = True

    model_config = {
        "from_attributes": True,
    }
