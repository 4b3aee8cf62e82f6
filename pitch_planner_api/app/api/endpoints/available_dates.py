"""
Availability endpoints.

CRUD for ``/available-dates``.  A slot may reference a profile, a
team, both or neither; the references must point at stored records.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from pitch_planner_api.app.api.resource import ensure_exists, ensure_id_matches, ensure_new, persist
from pitch_planner_api.app.core import header_util
from pitch_planner_api.app.core.errors import NotFoundAlertException
from pitch_planner_api.app.core.security import get_current_user
from pitch_planner_api.app.schemas.available_date import (
    AvailableDateCreate,
    AvailableDatePartial,
    AvailableDateRead,
    AvailableDateUpdate,
)
from pitch_planner_api.app.services.available_date_service import AvailableDateService

ENTITY_NAME = "availableDate"

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.post("/available-dates", response_model=AvailableDateRead, status_code=status.HTTP_201_CREATED)
async def create_available_date(available_date: AvailableDateCreate, response: Response) -> AvailableDateRead:
    logger.debug("REST request to save AvailableDate : %s", available_date)
    ensure_new(available_date.id, ENTITY_NAME)
    result = await persist(AvailableDateService.create(available_date.model_dump(exclude={"id"})), ENTITY_NAME)
    response.headers["Location"] = f"/api/available-dates/{result.id}"
    response.headers.update(header_util.creation_alert(ENTITY_NAME, result.id))
    return result


@router.put("/available-dates/{id}", response_model=AvailableDateRead)
async def update_available_date(
    id: int, available_date: AvailableDateUpdate, response: Response
) -> AvailableDateRead:
    logger.debug("REST request to update AvailableDate : %s, %s", id, available_date)
    ensure_id_matches(id, available_date.id, ENTITY_NAME)
    await ensure_exists(AvailableDateService, id, ENTITY_NAME)
    result = await persist(
        AvailableDateService.update(id, available_date.model_dump(exclude={"id"})), ENTITY_NAME
    )
    if result is None:
        raise NotFoundAlertException(ENTITY_NAME)
    response.headers.update(header_util.update_alert(ENTITY_NAME, id))
    return result


@router.patch("/available-dates/{id}", response_model=AvailableDateRead)
async def partial_update_available_date(
    id: int, available_date: AvailableDatePartial, response: Response
) -> AvailableDateRead:
    """Update the given fields of a slot.

    ``is_available: false`` is applied; only absent or null fields are
    left as stored.
    """
    logger.debug("REST request to partial update AvailableDate partially : %s, %s", id, available_date)
    ensure_id_matches(id, available_date.id, ENTITY_NAME)
    await ensure_exists(AvailableDateService, id, ENTITY_NAME)
    changes = available_date.model_dump(exclude_unset=True, exclude={"id"})
    result = await persist(AvailableDateService.partial_update(id, changes), ENTITY_NAME)
    if result is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="AvailableDate not found")
    response.headers.update(header_util.update_alert(ENTITY_NAME, id))
    return result


@router.get("/available-dates", response_model=List[AvailableDateRead])
async def get_all_available_dates() -> List[AvailableDateRead]:
    logger.debug("REST request to get all AvailableDates")
    return await AvailableDateService.find_all()


@router.get("/available-dates/{id}", response_model=AvailableDateRead)
async def get_available_date(id: int) -> AvailableDateRead:
    logger.debug("REST request to get AvailableDate : %s", id)
    available_date = await AvailableDateService.find_by_id(id)
    if available_date is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="AvailableDate not found")
    return available_date


@router.delete("/available-dates/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_available_date(id: int, response: Response) -> None:
    logger.debug("REST request to delete AvailableDate : %s", id)
    await AvailableDateService.delete_by_id(id)
    response.headers.update(header_util.deletion_alert(ENTITY_NAME, id))
    return None
