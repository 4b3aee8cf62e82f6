"""Repository for teams."""

from __future__ import annotations

from typing import List

from pitch_planner_api.app.schemas.team import TeamRead
from pitch_planner_api.app.services.base import EntityService


class TeamService(EntityService):
    table = "teams"
    columns = ("name", "location", "owner_id")
    read_schema = TeamRead

    @classmethod
    async def find_by_name_containing_ignore_case(cls, name: str) -> List[TeamRead]:
        return await cls.find_by_column_containing_ignore_case("name", name)
