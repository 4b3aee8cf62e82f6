"""
Checks shared by every entity resource.

All resources follow the same contract: a new entity must not carry an
id, an updated entity must carry the id named in the path, and updates
only apply to records that exist.  These helpers raise the matching
HTTP errors so the endpoint functions stay short.
"""

from typing import Awaitable, Optional, Type, TypeVar

from pitch_planner_api.app.core.errors import BadRequestAlertException, NotFoundAlertException
from pitch_planner_api.app.services.base import EntityService

T = TypeVar("T")


def ensure_new(entity_id: Optional[int], entity_name: str) -> None:
    if entity_id is not None:
        raise BadRequestAlertException(
            f"A new {entity_name} cannot already have an ID", entity_name, "idexists"
        )


def ensure_id_matches(path_id: int, body_id: Optional[int], entity_name: str) -> None:
    """Reject a body whose id is missing or differs from the path id."""
    if body_id is None:
        raise BadRequestAlertException("Invalid id", entity_name, "idnull")
    if body_id != path_id:
        raise BadRequestAlertException("Invalid ID", entity_name, "idinvalid")


async def ensure_exists(service: Type[EntityService], entity_id: int, entity_name: str) -> None:
    if not await service.exists_by_id(entity_id):
        raise NotFoundAlertException(entity_name)


async def persist(call: Awaitable[T], entity_name: str) -> T:
    """Await a service write, turning constraint violations into a 400."""
    try:
        return await call
    except ValueError as e:
        raise BadRequestAlertException(str(e), entity_name, "constraintviolation")
