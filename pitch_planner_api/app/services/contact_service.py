"""Repository for contact entries."""

from pitch_planner_api.app.schemas.contact import ContactRead
from pitch_planner_api.app.services.base import EntityService


class ContactService(EntityService):
    table = "contacts"
    columns = ("name", "email", "phone", "message")
    read_schema = ContactRead
