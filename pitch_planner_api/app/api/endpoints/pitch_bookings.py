"""
Pitch booking endpoints.

CRUD for ``/pitch-bookings`` plus ``/available-bookings``, which lists
the bookings made for one calendar day so clients can see which slots
are already taken.
"""

import logging
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from pitch_planner_api.app.api.resource import ensure_exists, ensure_id_matches, ensure_new, persist
from pitch_planner_api.app.core import header_util
from pitch_planner_api.app.core.errors import NotFoundAlertException
from pitch_planner_api.app.core.security import get_current_user
from pitch_planner_api.app.schemas.pitch_booking import (
    PitchBookingCreate,
    PitchBookingPartial,
    PitchBookingRead,
    PitchBookingUpdate,
)
from pitch_planner_api.app.services.pitch_booking_service import PitchBookingService

ENTITY_NAME = "pitchBooking"

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.post("/pitch-bookings", response_model=PitchBookingRead, status_code=status.HTTP_201_CREATED)
async def create_pitch_booking(pitch_booking: PitchBookingCreate, response: Response) -> PitchBookingRead:
    """Create a new booking.  Returns 400 if the body already has an id."""
    logger.debug("REST request to save PitchBooking : %s", pitch_booking)
    ensure_new(pitch_booking.id, ENTITY_NAME)
    result = await persist(PitchBookingService.create(pitch_booking.model_dump(exclude={"id"})), ENTITY_NAME)
    response.headers["Location"] = f"/api/pitch-bookings/{result.id}"
    response.headers.update(header_util.creation_alert(ENTITY_NAME, result.id))
    return result


@router.put("/pitch-bookings/{id}", response_model=PitchBookingRead)
async def update_pitch_booking(id: int, pitch_booking: PitchBookingUpdate, response: Response) -> PitchBookingRead:
    """Replace an existing booking.

    Returns 400 if the body id is missing or differs from the path, and
    404 if the booking does not exist.
    """
    logger.debug("REST request to update PitchBooking : %s, %s", id, pitch_booking)
    ensure_id_matches(id, pitch_booking.id, ENTITY_NAME)
    await ensure_exists(PitchBookingService, id, ENTITY_NAME)
    result = await persist(PitchBookingService.update(id, pitch_booking.model_dump(exclude={"id"})), ENTITY_NAME)
    if result is None:
        raise NotFoundAlertException(ENTITY_NAME)
    response.headers.update(header_util.update_alert(ENTITY_NAME, id))
    return result


@router.patch("/pitch-bookings/{id}", response_model=PitchBookingRead)
async def partial_update_pitch_booking(
    id: int, pitch_booking: PitchBookingPartial, response: Response
) -> PitchBookingRead:
    """Update the given fields of an existing booking; null fields are ignored."""
    logger.debug("REST request to partial update PitchBooking partially : %s, %s", id, pitch_booking)
    ensure_id_matches(id, pitch_booking.id, ENTITY_NAME)
    await ensure_exists(PitchBookingService, id, ENTITY_NAME)
    changes = pitch_booking.model_dump(exclude_unset=True, exclude={"id"})
    result = await persist(PitchBookingService.partial_update(id, changes), ENTITY_NAME)
    if result is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="PitchBooking not found")
    response.headers.update(header_util.update_alert(ENTITY_NAME, id))
    return result


@router.get("/pitch-bookings", response_model=List[PitchBookingRead])
async def get_all_pitch_bookings() -> List[PitchBookingRead]:
    logger.debug("REST request to get all PitchBookings")
    return await PitchBookingService.find_all()


@router.get("/pitch-bookings/{id}", response_model=PitchBookingRead)
async def get_pitch_booking(id: int) -> PitchBookingRead:
    logger.debug("REST request to get PitchBooking : %s", id)
    pitch_booking = await PitchBookingService.find_by_id(id)
    if pitch_booking is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="PitchBooking not found")
    return pitch_booking


@router.get("/available-bookings", response_model=List[PitchBookingRead])
async def get_available_bookings_for_date(
    booking_date: date = Query(..., alias="date", description="ISO date, e.g. 2024-03-01"),
) -> List[PitchBookingRead]:
    """Return the bookings made for exactly ``date``."""
    logger.debug("REST request to get available bookings for date : %s", booking_date)
    return await PitchBookingService.find_by_booking_date(booking_date)


@router.delete("/pitch-bookings/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_pitch_booking(id: int, response: Response) -> None:
    logger.debug("REST request to delete PitchBooking : %s", id)
    await PitchBookingService.delete_by_id(id)
    response.headers.update(header_util.deletion_alert(ENTITY_NAME, id))
    return None
