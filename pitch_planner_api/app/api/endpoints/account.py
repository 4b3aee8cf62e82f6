"""
Account endpoints.

Registration and token issuing.  These are the only routes that can
be called without a bearer token.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from pitch_planner_api.app.core.security import create_access_token, get_current_user_id
from pitch_planner_api.app.schemas.user import LoginRequest, TokenResponse, UserCreate, UserRead
from pitch_planner_api.app.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register_account(user: UserCreate) -> UserRead:
    """Register a new user.  Returns 400 if the login is taken."""
    logger.debug("REST request to register user : %s", user.login)
    try:
        return await UserService.create_user(user)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/authenticate", response_model=TokenResponse)
async def authenticate(credentials: LoginRequest) -> TokenResponse:
    """Exchange a login and password for a bearer token."""
    user = await UserService.authenticate(credentials.username, credentials.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return TokenResponse(id_token=create_access_token({"sub": user.login}))


@router.get("/account", response_model=UserRead)
async def get_account(user_id: int = Depends(get_current_user_id)) -> UserRead:
    user = await UserService.get_user_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
