"""
Repository for user profiles.

Profiles are keyed by the owning user's id, so ``create`` is always
called with an explicit ``entity_id``.
"""

from __future__ import annotations

from typing import List

from pitch_planner_api.app.core.db import get_connection
from pitch_planner_api.app.schemas.user_profile import UserProfileRead
from pitch_planner_api.app.services.base import EntityService


class UserProfileService(EntityService):
    table = "user_profiles"
    columns = (
        "created",
        "name",
        "profile_pic",
        "profile_pic_content_type",
        "gender",
        "location",
        "position",
        "referee",
    )
    read_schema = UserProfileRead

    @classmethod
    async def find_all_where_team_owned_is_null(cls) -> List[UserProfileRead]:
        """Return profiles that are not the owner of any team."""
        conn = get_connection()
        try:
            rows = conn.execute(
                """
                SELECT p.* FROM user_profiles p
                LEFT JOIN teams t ON t.owner_id = p.id
                WHERE t.id IS NULL
                ORDER BY p.id ASC
                """
            ).fetchall()
            return [cls._row_to_read(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def find_by_name_containing_ignore_case(cls, name: str) -> List[UserProfileRead]:
        return await cls.find_by_column_containing_ignore_case("name", name)
