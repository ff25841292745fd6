import pytest
from jose import jwt

from homehelp.auth import (
    ALGORITHM,
    FixedIdentityResolver,
    create_session_token,
    get_identity_resolver,
    hash_password,
    verify_password,
    verify_session_token,
)
from homehelp.config import SECRET_KEY
from homehelp.errors import UnauthenticatedError
from homehelp.main import app


def test_password_hash_round_trip():
    stored = hash_password("s3cret-pass")
    assert stored.startswith("$2b$")
    assert verify_password("s3cret-pass", stored)
    assert not verify_password("wrong-pass", stored)


def test_password_hash_is_salted():
    assert hash_password("same-password") != hash_password("same-password")


def test_verify_password_rejects_malformed_hash():
    assert not verify_password("anything", "not-a-hash")


def test_session_token_resolves_user():
    assert verify_session_token(create_session_token(42)) == 42


def test_session_token_is_standard_jwt():
    claims = jwt.decode(create_session_token(42), SECRET_KEY, algorithms=[ALGORITHM])
    assert claims["sub"] == "42"
    assert "exp" in claims


def test_token_signed_with_other_key_rejected():
    forged = jwt.encode({"sub": "42"}, "not-the-secret", algorithm=ALGORITHM)
    with pytest.raises(UnauthenticatedError):
        verify_session_token(forged)


def test_tampered_token_rejected():
    header, _, signature = create_session_token(42).split(".")
    forged_payload = create_session_token(43).split(".")[1]
    with pytest.raises(UnauthenticatedError):
        verify_session_token(f"{header}.{forged_payload}.{signature}")


def test_token_without_subject_rejected():
    token = jwt.encode({"role": "admin"}, SECRET_KEY, algorithm=ALGORITHM)
    with pytest.raises(UnauthenticatedError):
        verify_session_token(token)


def test_expired_token_rejected():
    with pytest.raises(UnauthenticatedError, match="expired"):
        verify_session_token(create_session_token(1, ttl_seconds=-10))


def test_malformed_token_rejected():
    with pytest.raises(UnauthenticatedError):
        verify_session_token("garbage")


class TestRegisterAndLogin:
    def test_register_returns_token_and_user(self, client):
        response = client.post(
            "/api/register",
            json={"username": "carol", "password": "long-enough", "phoneNumber": "(555) 123-4567"},
        )
        assert response.status_code == 201
        body = response.json()
        assert body["user"]["username"] == "carol"
        assert body["user"]["phoneNumber"] == "+15551234567"
        assert "password" not in body["user"]

        me = client.get("/api/user", headers={"Authorization": f"Bearer {body['token']}"})
        assert me.status_code == 200
        assert me.json()["id"] == body["user"]["id"]

    def test_duplicate_username_conflicts_case_insensitively(self, client, alice):
        response = client.post("/api/register", json={"username": "ALICE", "password": "another-pass"})
        assert response.status_code == 409

    def test_short_password_rejected(self, client):
        response = client.post("/api/register", json={"username": "dave", "password": "short"})
        assert response.status_code == 422

    def test_overlong_password_rejected(self, client):
        response = client.post("/api/register", json={"username": "erin", "password": "x" * 73})
        assert response.status_code == 422

    def test_invalid_username_rejected(self, client):
        response = client.post("/api/register", json={"username": "a b", "password": "long-enough"})
        assert response.status_code == 422

    def test_login(self, client, alice):
        response = client.post("/api/login", json={"username": "alice", "password": "correct-horse"})
        assert response.status_code == 200
        assert response.json()["user"]["id"] == alice[0]

    def test_login_wrong_password(self, client, alice):
        response = client.post("/api/login", json={"username": "alice", "password": "nope-nope"})
        assert response.status_code == 401

    def test_login_unknown_user(self, client):
        response = client.post("/api/login", json={"username": "ghost", "password": "whatever1"})
        assert response.status_code == 401


class TestProtectedRoutes:
    def test_missing_token(self, client):
        response = client.get("/api/bookings")
        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_invalid_token(self, client):
        response = client.get("/api/bookings", headers={"Authorization": "Bearer abc.def"})
        assert response.status_code == 401

    def test_token_for_unknown_user(self, client):
        token = create_session_token(9999)
        response = client.get("/api/user", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_fixed_identity_resolver(self, client):
        app.dependency_overrides[get_identity_resolver] = lambda: FixedIdentityResolver(7)
        response = client.get("/api/bookings")
        assert response.status_code == 200
        assert response.json() == []


class TestProfile:
    def test_update_profile_partial(self, client, alice):
        _, headers = alice
        response = client.patch(
            "/api/user/profile",
            json={"fullName": "Alice Smith", "emergencyPhone": "555-987-6543"},
            headers=headers,
        )
        assert response.status_code == 200
        body = response.json()
        assert body["fullName"] == "Alice Smith"
        assert body["emergencyPhone"] == "+15559876543"

        response = client.patch("/api/user/profile", json={"address": "1 Main St"}, headers=headers)
        body = response.json()
        assert body["address"] == "1 Main St"
        assert body["fullName"] == "Alice Smith"

    def test_invalid_phone(self, client, alice):
        _, headers = alice
        response = client.patch("/api/user/profile", json={"phoneNumber": "123"}, headers=headers)
        assert response.status_code == 422
