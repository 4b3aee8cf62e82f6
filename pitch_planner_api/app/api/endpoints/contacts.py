"""Contact endpoints: CRUD for ``/contacts``."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from pitch_planner_api.app.api.resource import ensure_exists, ensure_id_matches, ensure_new, persist
from pitch_planner_api.app.core import header_util
from pitch_planner_api.app.core.errors import NotFoundAlertException
from pitch_planner_api.app.core.security import get_current_user
from pitch_planner_api.app.schemas.contact import ContactCreate, ContactPartial, ContactRead, ContactUpdate
from pitch_planner_api.app.services.contact_service import ContactService

ENTITY_NAME = "contact"

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.post("/contacts", response_model=ContactRead, status_code=status.HTTP_201_CREATED)
async def create_contact(contact: ContactCreate, response: Response) -> ContactRead:
    logger.debug("REST request to save Contact : %s", contact)
    ensure_new(contact.id, ENTITY_NAME)
    result = await persist(ContactService.create(contact.model_dump(exclude={"id"})), ENTITY_NAME)
    response.headers["Location"] = f"/api/contacts/{result.id}"
    response.headers.update(header_util.creation_alert(ENTITY_NAME, result.id))
    return result


@router.put("/contacts/{id}", response_model=ContactRead)
async def update_contact(id: int, contact: ContactUpdate, response: Response) -> ContactRead:
    logger.debug("REST request to update Contact : %s, %s", id, contact)
    ensure_id_matches(id, contact.id, ENTITY_NAME)
    await ensure_exists(ContactService, id, ENTITY_NAME)
    result = await persist(ContactService.update(id, contact.model_dump(exclude={"id"})), ENTITY_NAME)
    if result is None:
        raise NotFoundAlertException(ENTITY_NAME)
    response.headers.update(header_util.update_alert(ENTITY_NAME, id))
    return result


@router.patch("/contacts/{id}", response_model=ContactRead)
async def partial_update_contact(id: int, contact: ContactPartial, response: Response) -> ContactRead:
    logger.debug("REST request to partial update Contact partially : %s, %s", id, contact)
    ensure_id_matches(id, contact.id, ENTITY_NAME)
    await ensure_exists(ContactService, id, ENTITY_NAME)
    changes = contact.model_dump(exclude_unset=True, exclude={"id"})
    result = await persist(ContactService.partial_update(id, changes), ENTITY_NAME)
    if result is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contact not found")
    response.headers.update(header_util.update_alert(ENTITY_NAME, id))
    return result


@router.get("/contacts", response_model=List[ContactRead])
async def get_all_contacts() -> List[ContactRead]:
    logger.debug("REST request to get all Contacts")
    return await ContactService.find_all()


@router.get("/contacts/{id}", response_model=ContactRead)
async def get_contact(id: int) -> ContactRead:
    logger.debug("REST request to get Contact : %s", id)
    contact = await ContactService.find_by_id(id)
    if contact is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contact not found")
    return contact


@router.delete("/contacts/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contact(id: int, response: Response) -> None:
    logger.debug("REST request to delete Contact : %s", id)
    await ContactService.delete_by_id(id)
    response.headers.update(header_util.deletion_alert(ENTITY_NAME, id))
    return None
