"""
HTTP error types raised by the entity resources.

Each class is an ``HTTPException`` so FastAPI turns it into the right
status code without extra handlers.  The JSON ``detail`` carries the
entity name and a short error key that clients can map to messages.
"""

from fastapi import HTTPException, status

from . import header_util
from .config import settings


class BadRequestAlertException(HTTPException):
    """400 raised for malformed identifier state (``idexists``, ``idnull``, ``idinvalid``)."""

    def __init__(self, message: str, entity_name: str, error_key: str) -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": message, "entity_name": entity_name, "error_key": error_key},
            headers=header_util.create_failure_alert(
                settings.application_name, False, entity_name, error_key, message
            ),
        )
        self.message = message
        self.entity_name = entity_name
        self.error_key = error_key


class NotFoundAlertException(HTTPException):
    """404 raised when an update targets a record that does not exist."""

    def __init__(self, entity_name: str, message: str = "Entity not found") -> None:
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"message": message, "entity_name": entity_name, "error_key": "idnotfound"},
        )
        self.entity_name = entity_name


class ForbiddenException(HTTPException):
    """403 raised when the acting user does not own the target record."""

    def __init__(self, message: str = "Not authorised") -> None:
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=message)


class ConflictException(HTTPException):
    """409 raised when a record that must be unique already exists."""

    def __init__(self, message: str) -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=message)
