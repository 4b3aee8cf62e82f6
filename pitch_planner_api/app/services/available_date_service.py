"""Repository for availability slots."""

from pitch_planner_api.app.schemas.available_date import AvailableDateRead
from pitch_planner_api.app.services.base import EntityService


class AvailableDateService(EntityService):
    table = "available_dates"
    columns = ("from_time", "to_time", "is_available", "user_profile_id", "team_id")
    read_schema = AvailableDateRead
