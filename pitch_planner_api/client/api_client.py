"""
HTTP client for the Pitch Planner API.

``PitchPlannerClient`` wraps the REST endpoints with one method per
operation.  Entity bodies may be Pydantic models (for instance the
value returned by a form adapter) or plain dictionaries.  Every method
returns a tuple ``(data, error)``: on success ``error`` is ``None``; on
failure ``data`` is ``None`` and ``error`` is a dictionary with
``status_code`` and ``message``.

Example::

    client = PitchPlannerClient(base_url="http://localhost:8000")
    client.authenticate("alice", "secret")
    bookings, error = client.available_bookings(date(2024, 3, 1))
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional, Tuple, Union

import requests
from pydantic import BaseModel


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]
Body = Union[BaseModel, Dict[str, Any]]

# Entity key -> collection path.
ENTITY_PATHS: Dict[str, str] = {
    "user_profile": "/api/user-profiles",
    "team": "/api/teams",
    "pitch_booking": "/api/pitch-bookings",
    "available_date": "/api/available-dates",
    "contact": "/api/contacts",
}

MERGE_PATCH_CONTENT_TYPE = "application/merge-patch+json"


class PitchPlannerClient:
    """Client for the Pitch Planner REST API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Server root, e.g. ``http://localhost:8000``.
            api_key: Optional bearer token.  :meth:`authenticate` sets it.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        json_body: Any | None = None,
        content_type: str | None = None,
    ) -> Result:
        """Perform an HTTP request and return ``(data, error)``."""
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        if content_type:
            headers["Content-Type"] = content_type
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                except ValueError:
                    message = exc.response.text
                else:
                    detail = err_json.get("detail") if isinstance(err_json, dict) else None
                    if isinstance(detail, dict):
                        message = detail.get("message") or str(detail)
                    else:
                        message = detail or str(err_json)
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _serialise(body: Body, *, partial: bool = False) -> Dict[str, Any]:
        if isinstance(body, BaseModel):
            if partial:
                data = body.model_dump(mode="json", exclude_unset=True)
                # The id is required in the body even when the model did not set it explicitly.
                data["id"] = getattr(body, "id", None)
                return data
            return body.model_dump(mode="json")
        return dict(body)

    @staticmethod
    def _collection(entity: str) -> str:
        try:
            return ENTITY_PATHS[entity]
        except KeyError:
            raise ValueError(f"Unknown entity {entity!r}; expected one of {sorted(ENTITY_PATHS)}") from None

    # ------------------------------------------------------------------
    # Account
    # ------------------------------------------------------------------
    def register(self, login: str, password: str, email: Optional[str] = None) -> Result:
        return self._request(
            "POST", "/api/register", json_body={"login": login, "password": password, "email": email}
        )

    def authenticate(self, username: str, password: str) -> Result:
        """Log in and keep the returned token for subsequent requests."""
        data, error = self._request(
            "POST", "/api/authenticate", json_body={"username": username, "password": password}
        )
        if data and data.get("id_token"):
            self.api_key = data["id_token"]
        return data, error

    # ------------------------------------------------------------------
    # Generic entity operations
    # ------------------------------------------------------------------
    def create(self, entity: str, body: Body) -> Result:
        return self._request("POST", self._collection(entity), json_body=self._serialise(body))

    def update(self, entity: str, entity_id: int, body: Body) -> Result:
        return self._request("PUT", f"{self._collection(entity)}/{entity_id}", json_body=self._serialise(body))

    def partial_update(self, entity: str, entity_id: int, body: Body) -> Result:
        """Send only the fields set on ``body`` as a merge patch."""
        return self._request(
            "PATCH",
            f"{self._collection(entity)}/{entity_id}",
            json_body=self._serialise(body, partial=True),
            content_type=MERGE_PATCH_CONTENT_TYPE,
        )

    def list(self, entity: str, *, filter: Optional[str] = None) -> Result:
        params = {"filter": filter} if filter else None
        return self._request("GET", self._collection(entity), params=params)

    def get(self, entity: str, entity_id: int) -> Result:
        return self._request("GET", f"{self._collection(entity)}/{entity_id}")

    def delete(self, entity: str, entity_id: int) -> Result:
        return self._request("DELETE", f"{self._collection(entity)}/{entity_id}")

    # ------------------------------------------------------------------
    # Entity specific queries
    # ------------------------------------------------------------------
    def search_user_profiles(self, name: Optional[str] = None) -> Result:
        params = {"name": name} if name is not None else None
        return self._request("GET", "/api/user-profiles/search", params=params)

    def search_teams(self, name: Optional[str] = None) -> Result:
        params = {"name": name} if name is not None else None
        return self._request("GET", "/api/teams/search", params=params)

    def profiles_without_team(self) -> Result:
        return self.list("user_profile", filter="teamowned-is-null")

    def available_bookings(self, booking_date: date) -> Tuple[Optional[List[Dict[str, Any]]], Optional[Dict[str, Any]]]:
        """Return the bookings made for ``booking_date``."""
        return self._request("GET", "/api/available-bookings", params={"date": booking_date.isoformat()})
