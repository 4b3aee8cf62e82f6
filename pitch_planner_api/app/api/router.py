"""
Top-level API router.

Aggregates the per-entity routers.  Each endpoint module declares its
full paths (e.g. ``/pitch-bookings`` and ``/available-bookings``), so
they are included without a prefix; the application mounts this
router under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import (
    account,
    available_dates,
    contacts,
    pitch_bookings,
    teams,
    user_profiles,
)

router = APIRouter()

router.include_router(account.router, tags=["account"])
router.include_router(user_profiles.router, tags=["user-profiles"])
router.include_router(teams.router, tags=["teams"])
router.include_router(pitch_bookings.router, tags=["pitch-bookings"])
router.include_router(available_dates.router, tags=["available-dates"])
router.include_router(contacts.router, tags=["contacts"])
