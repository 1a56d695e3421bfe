from investor_shield_api.app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


def test_token_round_trip():
    token = create_access_token({"sub": "user-1", "email": "a@investors.in"})
    payload = decode_access_token(token)
    assert payload["sub"] == "user-1"
    assert payload["email"] == "a@investors.in"
    assert "exp" in payload


def test_tampered_token_is_rejected():
    token = create_access_token({"sub": "user-1"})
    header, payload, signature = token.split(".")
    forged = create_access_token({"sub": "user-2"}).split(".")[1]
    assert decode_access_token(f"{header}.{forged}.{signature}") is None
    assert decode_access_token("not-a-token") is None
    assert decode_access_token("a.b.c") is None


def test_expired_token_is_rejected():
    token = create_access_token({"sub": "user-1"}, expires_delta=-10)
    assert decode_access_token(token) is None


def test_password_hashing():
    hashed = hash_password("secret123")
    assert "secret123" not in hashed
    assert verify_password("secret123", hashed)
    assert not verify_password("wrong-pass", hashed)
    assert not verify_password("secret123", "garbage")
    assert hash_password("secret123") != hashed
