"""Repository for pitch bookings."""

from __future__ import annotations

from datetime import date
from typing import List

from pitch_planner_api.app.core.db import get_connection
from pitch_planner_api.app.schemas.pitch_booking import PitchBookingRead
from pitch_planner_api.app.services.base import EntityService


class PitchBookingService(EntityService):
    table = "pitch_bookings"
    columns = ("booking_date", "start_time", "end_time")
    read_schema = PitchBookingRead

    @classmethod
    async def find_by_booking_date(cls, booking_date: date) -> List[PitchBookingRead]:
        """Return bookings whose date equals ``booking_date`` exactly, earliest start first."""
        conn = get_connection()
        try:
            rows = conn.execute(
                "SELECT * FROM pitch_bookings WHERE booking_date = ? ORDER BY start_time ASC, id ASC",
                (booking_date.isoformat(),),
            ).fetchall()
            return [cls._row_to_read(row) for row in rows]
        finally:
            conn.close()
