from pitch_planner_api.app.core.security import create_access_token


def test_register_and_fetch_account(client):
    response = client.post("/api/register", json={"login": "Dana", "password": "secret-pass", "email": "d@x.io"})

    assert response.status_code == 201
    assert response.json()["login"] == "dana"
    assert "password" not in response.json()

    token = client.post("/api/authenticate", json={"username": "dana", "password": "secret-pass"}).json()["id_token"]
    account = client.get("/api/account", headers={"Authorization": f"Bearer {token}"})
    assert account.status_code == 200
    assert account.json()["email"] == "d@x.io"


def test_register_duplicate_login_is_bad_request(client):
    client.post("/api/register", json={"login": "dana", "password": "secret-pass"})

    response = client.post("/api/register", json={"login": "DANA", "password": "other-pass"})

    assert response.status_code == 400


def test_authenticate_with_wrong_password(client):
    client.post("/api/register", json={"login": "dana", "password": "secret-pass"})

    response = client.post("/api/authenticate", json={"username": "dana", "password": "wrong"})

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_token_for_unknown_user_is_rejected(client):
    token = create_access_token({"sub": "ghost"})

    response = client.get("/api/account", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
