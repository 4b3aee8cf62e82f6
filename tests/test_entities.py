"""Contract checks shared by the plain CRUD resources."""

import pytest

RESOURCES = {
    "teams": {
        "create": {"name": "Selly Oak FC", "location": "Birmingham"},
        "patch": {"location": "Edgbaston"},
    },
    "available-dates": {
        "create": {
            "from_time": "2024-03-01T18:00:00",
            "to_time": "2024-03-01T20:00:00",
            "is_available": True,
        },
        "patch": {"is_available": False},
    },
    "contacts": {
        "create": {"name": "Jo Bloggs", "email": "jo@example.com", "phone": "0121 000 0000"},
        "patch": {"message": "Can we book Saturday?"},
    },
}


@pytest.fixture(params=sorted(RESOURCES))
def resource(request):
    return request.param, RESOURCES[request.param]


def create(client, headers, path, body):
    response = client.post(f"/api/{path}", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_with_id_is_bad_request(client, auth_headers, resource):
    path, samples = resource

    response = client.post(f"/api/{path}", json={**samples["create"], "id": 3}, headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["detail"]["error_key"] == "idexists"


def test_update_with_mismatched_id_is_bad_request(client, auth_headers, resource):
    path, samples = resource
    record = create(client, auth_headers, path, samples["create"])

    put = client.put(
        f"/api/{path}/{record['id']}",
        json={**samples["create"], "id": record["id"] + 1},
        headers=auth_headers,
    )
    patch = client.patch(
        f"/api/{path}/{record['id']}",
        json={**samples["patch"], "id": record["id"] + 1},
        headers=auth_headers,
    )

    assert put.status_code == 400
    assert patch.status_code == 400


def test_partial_update_leaves_other_fields_unchanged(client, auth_headers, resource):
    path, samples = resource
    record = create(client, auth_headers, path, samples["create"])

    response = client.patch(
        f"/api/{path}/{record['id']}",
        json={**samples["patch"], "id": record["id"]},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json() == {**record, **samples["patch"]}


def test_delete_then_get_is_not_found(client, auth_headers, resource):
    path, samples = resource
    record = create(client, auth_headers, path, samples["create"])
    assert client.get(f"/api/{path}/{record['id']}", headers=auth_headers).json() == record

    assert client.delete(f"/api/{path}/{record['id']}", headers=auth_headers).status_code == 204
    assert client.get(f"/api/{path}/{record['id']}", headers=auth_headers).status_code == 404
    assert client.get(f"/api/{path}", headers=auth_headers).json() == []


def test_team_search_by_name(client, auth_headers):
    create(client, auth_headers, "teams", {"name": "Selly Oak FC"})
    create(client, auth_headers, "teams", {"name": "Harborne Rovers"})

    response = client.get("/api/teams/search", params={"name": "oak"}, headers=auth_headers)

    assert [team["name"] for team in response.json()] == ["Selly Oak FC"]


def test_available_date_rejects_unknown_profile_reference(client, auth_headers):
    body = {**RESOURCES["available-dates"]["create"], "user_profile_id": 4242}

    response = client.post("/api/available-dates", json=body, headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["detail"]["error_key"] == "constraintviolation"


def test_team_owner_is_unique(client, auth_headers):
    profile = client.post("/api/user-profiles", json={"name": "Alice"}, headers=auth_headers).json()
    create(client, auth_headers, "teams", {"name": "First", "owner_id": profile["id"]})

    response = client.post("/api/teams", json={"name": "Second", "owner_id": profile["id"]}, headers=auth_headers)

    assert response.status_code == 400


def test_deleting_profile_clears_references(client, auth_headers):
    profile = client.post("/api/user-profiles", json={"name": "Alice"}, headers=auth_headers).json()
    team = create(client, auth_headers, "teams", {"name": "First", "owner_id": profile["id"]})
    slot = create(
        client,
        auth_headers,
        "available-dates",
        {**RESOURCES["available-dates"]["create"], "user_profile_id": profile["id"], "team_id": team["id"]},
    )

    client.delete(f"/api/user-profiles/{profile['id']}", headers=auth_headers)

    assert client.get(f"/api/teams/{team['id']}", headers=auth_headers).json()["owner_id"] is None
    stored_slot = client.get(f"/api/available-dates/{slot['id']}", headers=auth_headers).json()
    assert stored_slot["user_profile_id"] is None
    assert stored_slot["team_id"] == team["id"]
