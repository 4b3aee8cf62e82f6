"""
User profile endpoints.

A profile's id is the id of the user who owns it.  Creation assigns
the acting user's id, and only the owner may update or delete a
profile; anyone signed in may read profiles.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from pitch_planner_api.app.api.resource import ensure_exists, ensure_id_matches, ensure_new, persist
from pitch_planner_api.app.core import header_util
from pitch_planner_api.app.core.errors import (
    BadRequestAlertException,
    ConflictException,
    ForbiddenException,
    NotFoundAlertException,
)
from pitch_planner_api.app.core.security import get_current_user, get_current_user_id
from pitch_planner_api.app.schemas.user_profile import (
    UserProfileCreate,
    UserProfilePartial,
    UserProfileRead,
    UserProfileUpdate,
)
from pitch_planner_api.app.services.user_profile_service import UserProfileService

ENTITY_NAME = "userProfile"

TEAM_OWNED_IS_NULL = "teamowned-is-null"

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_user)])


def ensure_owner(user_id: int, profile_id: int) -> None:
    if user_id != profile_id:
        raise ForbiddenException("Not authorised to modify this profile")


@router.post("/user-profiles", response_model=UserProfileRead, status_code=status.HTTP_201_CREATED)
async def create_user_profile(
    user_profile: UserProfileCreate,
    response: Response,
    user_id: int = Depends(get_current_user_id),
) -> UserProfileRead:
    """Create the acting user's profile.

    Returns 400 if the body has an id and 409 if the user already has a
    profile.
    """
    logger.debug("REST request to save UserProfile : %s", user_profile)
    ensure_new(user_profile.id, ENTITY_NAME)
    if await UserProfileService.exists_by_id(user_id):
        raise ConflictException("Profile already exists")
    try:
        result = await persist(
            UserProfileService.create(user_profile.model_dump(exclude={"id"}), entity_id=user_id),
            ENTITY_NAME,
        )
    except BadRequestAlertException:
        # A concurrent create may have inserted the profile after the check.
        if await UserProfileService.exists_by_id(user_id):
            raise ConflictException("Profile already exists")
        raise
    response.headers["Location"] = f"/api/user-profiles/{result.id}"
    response.headers.update(header_util.creation_alert(ENTITY_NAME, result.id))
    return result


@router.put("/user-profiles/{id}", response_model=UserProfileRead)
async def update_user_profile(
    id: int,
    user_profile: UserProfileUpdate,
    response: Response,
    user_id: int = Depends(get_current_user_id),
) -> UserProfileRead:
    logger.debug("REST request to update UserProfile : %s, %s", id, user_profile)
    ensure_id_matches(id, user_profile.id, ENTITY_NAME)
    await ensure_exists(UserProfileService, id, ENTITY_NAME)
    ensure_owner(user_id, id)
    result = await persist(UserProfileService.update(id, user_profile.model_dump(exclude={"id"})), ENTITY_NAME)
    if result is None:
        raise NotFoundAlertException(ENTITY_NAME)
    response.headers.update(header_util.update_alert(ENTITY_NAME, id))
    return result


@router.patch("/user-profiles/{id}", response_model=UserProfileRead)
async def partial_update_user_profile(
    id: int,
    user_profile: UserProfilePartial,
    response: Response,
    user_id: int = Depends(get_current_user_id),
) -> UserProfileRead:
    logger.debug("REST request to partial update UserProfile partially : %s, %s", id, user_profile)
    ensure_id_matches(id, user_profile.id, ENTITY_NAME)
    await ensure_exists(UserProfileService, id, ENTITY_NAME)
    ensure_owner(user_id, id)
    changes = user_profile.model_dump(exclude_unset=True, exclude={"id"})
    result = await persist(UserProfileService.partial_update(id, changes), ENTITY_NAME)
    if result is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="UserProfile not found")
    response.headers.update(header_util.update_alert(ENTITY_NAME, id))
    return result


@router.get("/user-profiles", response_model=List[UserProfileRead])
async def get_all_user_profiles(
    filter_: Optional[str] = Query(None, alias="filter", description="Use 'teamowned-is-null' for profiles without a team"),
) -> List[UserProfileRead]:
    if filter_ == TEAM_OWNED_IS_NULL:
        logger.debug("REST request to get all UserProfiles where teamOwned is null")
        return await UserProfileService.find_all_where_team_owned_is_null()
    logger.debug("REST request to get all UserProfiles")
    return await UserProfileService.find_all()


@router.get("/user-profiles/search", response_model=List[UserProfileRead])
async def search_user_profiles(
    name: Optional[str] = None,
) -> List[UserProfileRead]:
    """Search profiles by a case-insensitive fragment of their name."""
    logger.debug("REST request to search user profile by name : %s", name)
    if name is None:
        return await UserProfileService.find_all()
    return await UserProfileService.find_by_name_containing_ignore_case(name)


@router.get("/user-profiles/{id}", response_model=UserProfileRead)
async def get_user_profile(id: int) -> UserProfileRead:
    logger.debug("REST request to get UserProfile : %s", id)
    user_profile = await UserProfileService.find_by_id(id)
    if user_profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="UserProfile not found")
    return user_profile


@router.delete("/user-profiles/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user_profile(
    id: int,
    response: Response,
    user_id: int = Depends(get_current_user_id),
) -> None:
    """Delete the acting user's profile.  Other users' profiles give 403."""
    ensure_owner(user_id, id)
    logger.debug("REST request to delete UserProfile : %s", id)
    await UserProfileService.delete_by_id(id)
    response.headers.update(header_util.deletion_alert(ENTITY_NAME, id))
    return None
