from pitch_planner_api.app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


def test_token_round_trip_keeps_claims():
    payload = decode_access_token(create_access_token({"sub": "alice"}))

    assert payload["sub"] == "alice"
    assert "exp" in payload


def test_tampered_token_is_rejected():
    header, payload, signature = create_access_token({"sub": "alice"}).split(".")
    forged = create_access_token({"sub": "mallory"}).split(".")[1]

    assert decode_access_token(f"{header}.{forged}.{signature}") is None
    assert decode_access_token("only.two") is None


def test_expired_token_is_rejected():
    assert decode_access_token(create_access_token({"sub": "alice"}, expires_delta=-10)) is None


def test_password_hash_verification():
    hashed = hash_password("correct horse")

    assert verify_password("correct horse", hashed)
    assert not verify_password("battery staple", hashed)
    assert not verify_password("correct horse", "not-a-hash")
