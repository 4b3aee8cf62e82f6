from datetime import date, datetime

import pytest
import requests

from pitch_planner_api.app.schemas.pitch_booking import PitchBookingPartial
from pitch_planner_api.client.api_client import PitchPlannerClient


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload
        self.content = b"" if payload is None else b"{}"
        self.text = "" if payload is None else str(payload)

    def json(self):
        if self._payload is None:
            raise ValueError("no body")
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)


class FakeSession:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def test_authenticate_keeps_token_for_later_requests():
    session = FakeSession(FakeResponse(payload={"id_token": "abc"}), FakeResponse(payload=[]))
    client = PitchPlannerClient(base_url="http://api.test/", session=session)

    client.authenticate("alice", "secret")
    data, error = client.list("contact")

    assert (data, error) == ([], None)
    assert session.calls[1]["url"] == "http://api.test/api/contacts"
    assert session.calls[1]["headers"]["Authorization"] == "Bearer abc"


def test_partial_update_sends_merge_patch_with_only_set_fields():
    session = FakeSession(FakeResponse(payload={"id": 5}))
    client = PitchPlannerClient(base_url="http://api.test", api_key="t", session=session)

    client.partial_update("pitch_booking", 5, PitchBookingPartial(id=5, end_time=datetime(2024, 3, 1, 20, 0)))

    call = session.calls[0]
    assert call["method"] == "PATCH"
    assert call["url"] == "http://api.test/api/pitch-bookings/5"
    assert call["headers"]["Content-Type"] == "application/merge-patch+json"
    assert call["json"] == {"id": 5, "end_time": "2024-03-01T20:00:00"}


def test_available_bookings_sends_iso_date():
    session = FakeSession(FakeResponse(payload=[{"id": 1}]))
    client = PitchPlannerClient(base_url="http://api.test", session=session)

    data, error = client.available_bookings(date(2024, 3, 1))

    assert data == [{"id": 1}]
    assert session.calls[0]["params"] == {"date": "2024-03-01"}


def test_http_errors_become_error_dicts():
    detail = {"detail": {"message": "Invalid ID", "entity_name": "team", "error_key": "idinvalid"}}
    session = FakeSession(FakeResponse(status_code=400, payload=detail))
    client = PitchPlannerClient(base_url="http://api.test", session=session)

    data, error = client.update("team", 1, {"id": 2, "name": "x"})

    assert data is None
    assert error == {"status_code": 400, "message": "Invalid ID"}


def test_delete_with_empty_body():
    session = FakeSession(FakeResponse(status_code=204))
    client = PitchPlannerClient(base_url="http://api.test", session=session)

    assert client.delete("team", 1) == (None, None)


def test_connection_errors_are_reported():
    session = FakeSession(requests.ConnectionError("refused"))
    client = PitchPlannerClient(base_url="http://api.test", session=session)

    data, error = client.get("team", 1)

    assert data is None
    assert error["status_code"] is None
    assert "refused" in error["message"]


def test_unknown_entity_is_rejected():
    client = PitchPlannerClient(base_url="http://api.test", session=FakeSession())

    with pytest.raises(ValueError):
        client.get("stadium", 1)
