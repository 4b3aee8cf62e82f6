"""
Team endpoints.

Teams are plain CRUD records.  ``owner_id`` links a team to the
profile of its owner; the storage layer rejects a second team for the
same owner.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status

from pitch_planner_api.app.api.resource import ensure_exists, ensure_id_matches, ensure_new, persist
from pitch_planner_api.app.core import header_util
from pitch_planner_api.app.core.errors import NotFoundAlertException
from pitch_planner_api.app.core.security import get_current_user
from pitch_planner_api.app.schemas.team import TeamCreate, TeamPartial, TeamRead, TeamUpdate
from pitch_planner_api.app.services.team_service import TeamService

ENTITY_NAME = "team"

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.post("/teams", response_model=TeamRead, status_code=status.HTTP_201_CREATED)
async def create_team(team: TeamCreate, response: Response) -> TeamRead:
    logger.debug("REST request to save Team : %s", team)
    ensure_new(team.id, ENTITY_NAME)
    result = await persist(TeamService.create(team.model_dump(exclude={"id"})), ENTITY_NAME)
    response.headers["Location"] = f"/api/teams/{result.id}"
    response.headers.update(header_util.creation_alert(ENTITY_NAME, result.id))
    return result


@router.put("/teams/{id}", response_model=TeamRead)
async def update_team(id: int, team: TeamUpdate, response: Response) -> TeamRead:
    logger.debug("REST request to update Team : %s, %s", id, team)
    ensure_id_matches(id, team.id, ENTITY_NAME)
    await ensure_exists(TeamService, id, ENTITY_NAME)
    result = await persist(TeamService.update(id, team.model_dump(exclude={"id"})), ENTITY_NAME)
    if result is None:
        raise NotFoundAlertException(ENTITY_NAME)
    response.headers.update(header_util.update_alert(ENTITY_NAME, id))
    return result


@router.patch("/teams/{id}", response_model=TeamRead)
async def partial_update_team(id: int, team: TeamPartial, response: Response) -> TeamRead:
    logger.debug("REST request to partial update Team partially : %s, %s", id, team)
    ensure_id_matches(id, team.id, ENTITY_NAME)
    await ensure_exists(TeamService, id, ENTITY_NAME)
    changes = team.model_dump(exclude_unset=True, exclude={"id"})
    result = await persist(TeamService.partial_update(id, changes), ENTITY_NAME)
    if result is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team not found")
    response.headers.update(header_util.update_alert(ENTITY_NAME, id))
    return result


@router.get("/teams", response_model=List[TeamRead])
async def get_all_teams() -> List[TeamRead]:
    logger.debug("REST request to get all Teams")
    return await TeamService.find_all()


@router.get("/teams/search", response_model=List[TeamRead])
async def search_teams(name: Optional[str] = None) -> List[TeamRead]:
    """Search teams by a case-insensitive fragment of their name.

    Without ``name`` every team is returned.
    """
    logger.debug("REST request to search teams by name : %s", name)
    if name is None:
        return await TeamService.find_all()
    return await TeamService.find_by_name_containing_ignore_case(name)


@router.get("/teams/{id}", response_model=TeamRead)
async def get_team(id: int) -> TeamRead:
    logger.debug("REST request to get Team : %s", id)
    team = await TeamService.find_by_id(id)
    if team is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team not found")
    return team


@router.delete("/teams/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_team(id: int, response: Response) -> None:
    logger.debug("REST request to delete Team : %s", id)
    await TeamService.delete_by_id(id)
    response.headers.update(header_util.deletion_alert(ENTITY_NAME, id))
    return None
