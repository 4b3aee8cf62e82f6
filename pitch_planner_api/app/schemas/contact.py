"""Pydantic models for contact entries."""

from typing import Optional

from pydantic import BaseModel, Field


class ContactBase(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3, description="Address replies are sent to")
    phone: Optional[str] = None
    message: Optional[str] = None


class ContactCreate(ContactBase):
    id: Optional[int] = None


class ContactUpdate(ContactCreate):
    """Schema for replacing a contact.  ``id`` must match the path."""


class ContactPartial(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = Field(None, min_length=3)
    phone: Optional[str] = None
    message: Optional[str] = None


class ContactRead(ContactBase):
    id: int

    model_config = {
        "from_attributes": True,
    }
