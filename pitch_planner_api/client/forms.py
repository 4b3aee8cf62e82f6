"""
Form adapters for the Pitch Planner entities.

A form is a flat mapping of field name to :class:`FormControl`.  Date
and date-time values are held as formatted strings, the way an HTML
``<input type="date">`` or ``<input type="datetime-local">`` holds
them, while the entity models use typed ``date``/``datetime`` values.
Each adapter converts in both directions and supplies defaults for new
entities: the current time for date fields and ``False`` for boolean
flags.

Required flags are recorded on the controls for the UI to enforce;
:meth:`FormAdapter.missing_required` lists unfilled ones as a
convenience, nothing here rejects a form.

Example::

    service = AvailableDateFormService()
    form = service.create_form()
    form["from_time"].value = "2024-03-01T18:00"
    available_date = service.get_entity(form)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Tuple, Type, Union

from pydantic import BaseModel

from pitch_planner_api.app.schemas.available_date import AvailableDatePartial
from pitch_planner_api.app.schemas.contact import ContactPartial
from pitch_planner_api.app.schemas.pitch_booking import PitchBookingPartial
from pitch_planner_api.app.schemas.team import TeamPartial
from pitch_planner_api.app.schemas.user_profile import UserProfilePartial

DATE_FORMAT = "%Y-%m-%d"
DATE_TIME_FORMAT = "%Y-%m-%dT%H:%M"


@dataclass
class FormControl:
    value: Any = None
    required: bool = False
    disabled: bool = False


Form = Dict[str, FormControl]
EntityInput = Union[BaseModel, Mapping[str, Any], None]


def format_date_time(value: Optional[datetime]) -> Optional[str]:
    """Format a datetime for a ``datetime-local`` input, in local time."""
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.strftime(DATE_TIME_FORMAT)


def parse_date_time(raw: Optional[str]) -> Optional[datetime]:
    if not raw:
        return None
    return datetime.strptime(raw, DATE_TIME_FORMAT)


def format_date(value: Optional[date]) -> Optional[str]:
    if value is None:
        return None
    return value.strftime(DATE_FORMAT)


def parse_date(raw: Optional[str]) -> Optional[date]:
    if not raw:
        return None
    return datetime.strptime(raw, DATE_FORMAT).date()


class FormAdapter:
    """Base class; subclasses declare the model and the field layout."""

    model: ClassVar[Type[BaseModel]]
    fields: ClassVar[Tuple[str, ...]]
    date_time_fields: ClassVar[Tuple[str, ...]] = ()
    date_fields: ClassVar[Tuple[str, ...]] = ()
    false_default_fields: ClassVar[Tuple[str, ...]] = ()
    required_fields: ClassVar[Tuple[str, ...]] = ()

    def create_form(self, entity: EntityInput = None) -> Form:
        """Build a form for ``entity``, or for a new entity when omitted."""
        raw = self._to_raw_value({**self.get_form_defaults(), **self._entity_values(entity)})
        form: Form = {"id": FormControl(raw.get("id"), required=True, disabled=True)}
        for name in self.fields:
            form[name] = FormControl(raw.get(name), required=name in self.required_fields)
        return form

    def get_entity(self, form: Form) -> BaseModel:
        """Return the typed entity held by ``form``, disabled controls included."""
        raw = {name: control.value for name, control in form.items()}
        return self.model(**self._from_raw_value(raw))

    def reset_form(self, form: Form, entity: EntityInput) -> None:
        raw = self._to_raw_value({**self.get_form_defaults(), **self._entity_values(entity)})
        for name, control in form.items():
            control.value = raw.get(name)
        form["id"].disabled = True

    def missing_required(self, form: Form) -> List[str]:
        return [
            name
            for name, control in form.items()
            if control.required and not control.disabled and control.value in (None, "")
        ]

    def get_form_defaults(self) -> Dict[str, Any]:
        current_time = datetime.now()
        defaults: Dict[str, Any] = {"id": None}
        for name in self.date_time_fields:
            defaults[name] = current_time
        for name in self.date_fields:
            defaults[name] = current_time.date()
        for name in self.false_default_fields:
            defaults[name] = False
        return defaults

    @staticmethod
    def _entity_values(entity: EntityInput) -> Dict[str, Any]:
        # Only values the caller actually set override the defaults.
        if entity is None:
            return {}
        if isinstance(entity, BaseModel):
            return entity.model_dump(exclude_unset=True)
        return dict(entity)

    def _to_raw_value(self, values: Dict[str, Any]) -> Dict[str, Any]:
        raw = dict(values)
        for name in self.date_time_fields:
            raw[name] = format_date_time(values.get(name))
        for name in self.date_fields:
            raw[name] = format_date(values.get(name))
        return raw

    def _from_raw_value(self, raw: Dict[str, Any]) -> Dict[str, Any]:
        values = dict(raw)
        for name in self.date_time_fields:
            values[name] = parse_date_time(raw.get(name))
        for name in self.date_fields:
            values[name] = parse_date(raw.get(name))
        return values


class AvailableDateFormService(FormAdapter):
    model = AvailableDatePartial
    fields = ("from_time", "to_time", "is_available", "user_profile_id", "team_id")
    date_time_fields = ("from_time", "to_time")
    false_default_fields = ("is_available",)
    required_fields = ("from_time", "to_time", "is_available")


class PitchBookingFormService(FormAdapter):
    model = PitchBookingPartial
    fields = ("booking_date", "start_time", "end_time")
    date_time_fields = ("start_time", "end_time")
    date_fields = ("booking_date",)
    required_fields = ("booking_date", "start_time", "end_time")


class UserProfileFormService(FormAdapter):
    model = UserProfilePartial
    fields = (
        "created",
        "name",
        "profile_pic",
        "profile_pic_content_type",
        "gender",
        "location",
        "position",
        "referee",
    )
    date_time_fields = ("created",)
    false_default_fields = ("referee",)
    required_fields = ("name",)


class TeamFormService(FormAdapter):
    model = TeamPartial
    fields = ("name", "location", "owner_id")
    required_fields = ("name",)


class ContactFormService(FormAdapter):
    model = ContactPartial
    fields = ("name", "email", "phone", "message")
    required_fields = ("name", "email")
