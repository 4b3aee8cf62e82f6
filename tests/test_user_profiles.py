import pytest

from pitch_planner_api.app.services.user_profile_service import UserProfileService

PROFILE = {
    "created": "2024-01-15T12:00:00",
    "name": "Alice Smith",
    "gender": "FEMALE",
    "location": "Birmingham",
    "position": "MIDFIELDER",
    "referee": True,
}


@pytest.fixture
def bob_headers(login_as):
    return login_as("bob")


def create_profile(client, headers, **overrides):
    response = client.post("/api/user-profiles", json={**PROFILE, **overrides}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def account_id(client, headers):
    return client.get("/api/account", headers=headers).json()["id"]


def test_create_uses_acting_user_id(client, auth_headers):
    profile = create_profile(client, auth_headers)

    assert profile["id"] == account_id(client, auth_headers)
    assert profile["name"] == "Alice Smith"
    assert profile["gender"] == "FEMALE"
    assert profile["referee"] is True


def test_create_twice_for_same_user_is_conflict(client, auth_headers):
    create_profile(client, auth_headers)

    response = client.post("/api/user-profiles", json={**PROFILE, "name": "Again"}, headers=auth_headers)

    assert response.status_code == 409
    assert len(client.get("/api/user-profiles", headers=auth_headers).json()) == 1


def test_create_with_id_is_bad_request(client, auth_headers):
    response = client.post("/api/user-profiles", json={**PROFILE, "id": 1}, headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["detail"]["error_key"] == "idexists"


def test_create_rejects_unknown_gender(client, auth_headers):
    response = client.post("/api/user-profiles", json={**PROFILE, "gender": "UNKNOWN"}, headers=auth_headers)
    assert response.status_code == 422


def test_owner_can_update_profile(client, auth_headers):
    profile = create_profile(client, auth_headers)

    response = client.put(
        f"/api/user-profiles/{profile['id']}",
        json={"id": profile["id"], "name": "Alice Jones"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Alice Jones"
    # PUT replaces the whole record.
    assert body["location"] is None
    assert body["referee"] is None


def test_update_of_another_users_profile_is_forbidden(client, auth_headers, bob_headers):
    profile = create_profile(client, auth_headers)

    response = client.put(
        f"/api/user-profiles/{profile['id']}",
        json={**PROFILE, "id": profile["id"], "name": "Hijacked"},
        headers=bob_headers,
    )

    assert response.status_code == 403
    assert client.get(f"/api/user-profiles/{profile['id']}", headers=bob_headers).json()["name"] == "Alice Smith"


def test_update_id_checks_come_before_ownership(client, auth_headers, bob_headers):
    profile = create_profile(client, auth_headers)
    url = f"/api/user-profiles/{profile['id']}"

    assert client.put(url, json={"name": "No id"}, headers=bob_headers).status_code == 400
    assert client.put(url, json={"id": profile["id"] + 1, "name": "x"}, headers=bob_headers).status_code == 400
    assert client.put("/api/user-profiles/999", json={"id": 999, "name": "x"}, headers=bob_headers).status_code == 404


def test_partial_update_applies_explicit_false(client, auth_headers):
    profile = create_profile(client, auth_headers)

    response = client.patch(
        f"/api/user-profiles/{profile['id']}",
        json={"id": profile["id"], "referee": False},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json() == {**profile, "referee": False}


def test_partial_update_leaves_absent_fields_unchanged(client, auth_headers):
    profile = create_profile(client, auth_headers, profile_pic="aGVsbG8=", profile_pic_content_type="image/png")

    response = client.patch(
        f"/api/user-profiles/{profile['id']}",
        json={"id": profile["id"], "location": "Leeds", "name": None},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json() == {**profile, "location": "Leeds"}


def test_partial_update_of_another_users_profile_is_forbidden(client, auth_headers, bob_headers):
    profile = create_profile(client, auth_headers)

    response = client.patch(
        f"/api/user-profiles/{profile['id']}",
        json={"id": profile["id"], "name": "Bob"},
        headers=bob_headers,
    )

    assert response.status_code == 403


def test_delete_of_another_users_profile_is_forbidden(client, auth_headers, bob_headers):
    profile = create_profile(client, auth_headers)

    response = client.delete(f"/api/user-profiles/{profile['id']}", headers=bob_headers)

    assert response.status_code == 403
    assert client.get(f"/api/user-profiles/{profile['id']}", headers=auth_headers).status_code == 200


def test_owner_can_delete_profile(client, auth_headers):
    profile = create_profile(client, auth_headers)

    response = client.delete(f"/api/user-profiles/{profile['id']}", headers=auth_headers)

    assert response.status_code == 204
    assert client.get(f"/api/user-profiles/{profile['id']}", headers=auth_headers).status_code == 404
    # The user may create a new profile afterwards.
    create_profile(client, auth_headers)


def test_filter_profiles_without_owned_team(client, auth_headers, bob_headers):
    alice = create_profile(client, auth_headers)
    bob = create_profile(client, bob_headers, name="Bob Brown")
    client.post("/api/teams", json={"name": "Selly Oak FC", "owner_id": alice["id"]}, headers=auth_headers)

    response = client.get("/api/user-profiles", params={"filter": "teamowned-is-null"}, headers=auth_headers)

    assert response.status_code == 200
    assert [profile["id"] for profile in response.json()] == [bob["id"]]
    everyone = client.get("/api/user-profiles", headers=auth_headers).json()
    assert [profile["id"] for profile in everyone] == [alice["id"], bob["id"]]


def test_unknown_filter_returns_all_profiles(client, auth_headers):
    create_profile(client, auth_headers)

    response = client.get("/api/user-profiles", params={"filter": "something-else"}, headers=auth_headers)

    assert len(response.json()) == 1


def test_search_by_name_is_case_insensitive_substring(client, auth_headers, bob_headers, login_as):
    create_profile(client, auth_headers)
    create_profile(client, bob_headers, name="Bob Brown")
    create_profile(client, login_as("carol"), name="Carol Smithson")

    response = client.get("/api/user-profiles/search", params={"name": "SMITH"}, headers=auth_headers)

    assert response.status_code == 200
    assert sorted(profile["name"] for profile in response.json()) == ["Alice Smith", "Carol Smithson"]
    assert len(client.get("/api/user-profiles/search", headers=auth_headers).json()) == 3


def test_search_treats_wildcards_literally(client, auth_headers):
    create_profile(client, auth_headers)

    response = client.get("/api/user-profiles/search", params={"name": "%"}, headers=auth_headers)

    assert response.json() == []


def test_search_folds_case_of_non_ascii_names(client, auth_headers, bob_headers):
    create_profile(client, auth_headers, name="Élodie Ärger")
    create_profile(client, bob_headers, name="Bob Brown")

    for query in ("Élodie", "élodie", "ÄRGER"):
        response = client.get("/api/user-profiles/search", params={"name": query}, headers=auth_headers)
        assert [profile["name"] for profile in response.json()] == ["Élodie Ärger"], query


def test_create_racing_an_existing_profile_is_conflict(client, auth_headers, monkeypatch):
    create_profile(client, auth_headers)
    checks = []

    async def exists_after_first_check(entity_id):
        checks.append(entity_id)
        return len(checks) > 1

    # The first existence check misses the profile, so the insert hits the primary key.
    monkeypatch.setattr(UserProfileService, "exists_by_id", exists_after_first_check)

    response = client.post("/api/user-profiles", json={**PROFILE, "name": "Again"}, headers=auth_headers)

    assert response.status_code == 409
    assert len(checks) == 2
