"""
Tests for the auth API endpoints.

Tests FastAPI routes end to end on the in-memory user store.
Validates request validation, response schemas, and error mapping.
"""

import asyncio

import pytest

REGISTER_URL = "/api/v1/auth/register"
LOGIN_URL = "/api/v1/auth/login"

VALID_USER = {
    "email": "ada@example.com",
    "password": "correct-horse",
    "fullName": "Ada Lovelace",
}


@pytest.fixture
def registered(client):
    response = client.post(REGISTER_URL, json=VALID_USER)
    assert response.status_code == 201
    return response.json()["data"]["user"]


class TestRegisterEndpoint:
    """Tests for POST /api/v1/auth/register."""

    def test_register_returns_201_with_user(self, client) -> None:
        response = client.post(REGISTER_URL, json=VALID_USER)
        body = response.json()
        assert response.status_code == 201
        assert body["success"] is True
        assert body["message"] == "User registered successfully"
        user = body["data"]["user"]
        assert user["email"] == "ada@example.com"
        assert user["fullName"] == "Ada Lovelace"
        assert user["role"] == "USER"
        assert user["id"]

    def test_user_never_contains_password(self, client) -> None:
        user = client.post(REGISTER_URL, json=VALID_USER).json()["data"]["user"]
        assert "password" not in user
        assert not any("password" in key.lower() for key in user)

    def test_password_is_stored_hashed(self, client, app) -> None:
        client.post(REGISTER_URL, json=VALID_USER)
        users = app.state.context.users
        stored = asyncio.run(users.find_by_email("ada@example.com"))
        assert stored.password_hash != VALID_USER["password"]
        assert stored.password_hash.startswith("$2")

    def test_duplicate_email_is_bad_request(self, client, registered) -> None:
        response = client.post(REGISTER_URL, json=VALID_USER)
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "type": "BadRequest",
            "message": "Email already exists",
        }

    def test_email_is_trimmed_before_storage(self, client) -> None:
        payload = {**VALID_USER, "email": "  ada@example.com  "}
        user = client.post(REGISTER_URL, json=payload).json()["data"]["user"]
        assert user["email"] == "ada@example.com"
        again = client.post(REGISTER_URL, json=VALID_USER)
        assert again.json()["message"] == "Email already exists"

    def test_all_violations_reported_in_declaration_order(self, client) -> None:
        response = client.post(
            REGISTER_URL, json={"email": "nope", "password": "123", "fullName": ""}
        )
        body = response.json()
        assert response.status_code == 400
        assert body["type"] == "ValidationError"
        assert body["message"] == (
            "Invalid email address, "
            "Password must be at least 6 characters, "
            "Full name is required"
        )

    def test_single_violation(self, client) -> None:
        payload = {**VALID_USER, "password": "short"}
        body = client.post(REGISTER_URL, json=payload).json()
        assert body["message"] == "Password must be at least 6 characters"

    def test_empty_body_reports_every_required_field(self, client) -> None:
        body = client.post(REGISTER_URL).json()
        assert body["type"] == "ValidationError"
        assert body["message"].split(", ") == [
            "Invalid email address",
            "Password must be at least 6 characters",
            "Full name is required",
        ]

    def test_non_object_body_is_validation_error(self, client) -> None:
        response = client.post(REGISTER_URL, json=["a", "b"])
        assert response.status_code == 400
        assert response.json()["type"] == "ValidationError"

    def test_malformed_json_is_bad_request(self, client) -> None:
        response = client.post(
            REGISTER_URL,
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "type": "BadRequest",
            "message": "Malformed JSON body",
        }

    def test_form_encoded_body_is_accepted(self, client) -> None:
        response = client.post(REGISTER_URL, data=VALID_USER)
        assert response.status_code == 201

    def test_form_body_with_invalid_utf8_is_bad_request(self, client, app) -> None:
        response = client.post(
            REGISTER_URL,
            content=b"email=\xff\xfe&password=secret1&fullName=x",
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "type": "BadRequest",
            "message": "Malformed form body",
        }
        assert len(app.state.context.users) == 0

    def test_validation_runs_before_handler(self, client, app) -> None:
        """A rejected payload must not reach the datastore."""
        client.post(REGISTER_URL, json={"email": "x@example.com"})
        assert len(app.state.context.users) == 0


class TestLoginEndpoint:
    """Tests for POST /api/v1/auth/login."""

    def test_login_with_valid_credentials(self, client, registered) -> None:
        response = client.post(
            LOGIN_URL,
            json={"email": VALID_USER["email"], "password": VALID_USER["password"]},
        )
        body = response.json()
        assert response.status_code == 201
        assert body["success"] is True
        assert body["message"] == "User logged in successfully"
        assert body["data"]["user"]["email"] == VALID_USER["email"]
        assert "password" not in body["data"]["user"]

    def test_wrong_password_and_unknown_email_are_indistinguishable(
        self, client, registered
    ) -> None:
        wrong_password = client.post(
            LOGIN_URL, json={"email": VALID_USER["email"], "password": "wrong-pass"}
        )
        unknown_email = client.post(
            LOGIN_URL, json={"email": "ghost@example.com", "password": "whatever"}
        )
        expected = {
            "success": False,
            "type": "BadRequest",
            "message": "Invalid Credentials",
        }
        assert wrong_password.status_code == unknown_email.status_code == 400
        assert wrong_password.json() == unknown_email.json() == expected

    def test_login_validation_messages(self, client) -> None:
        body = client.post(LOGIN_URL, json={"email": "bad", "password": ""}).json()
        assert body["type"] == "ValidationError"
        assert body["message"] == "Invalid email address, Password is required"

    def test_password_whitespace_is_preserved(self, client) -> None:
        client.post(REGISTER_URL, json={**VALID_USER, "password": " spaced pw "})
        ok = client.post(
            LOGIN_URL, json={"email": VALID_USER["email"], "password": " spaced pw "}
        )
        trimmed = client.post(
            LOGIN_URL, json={"email": VALID_USER["email"], "password": "spaced pw"}
        )
        assert ok.status_code == 201
        assert trimmed.status_code == 400
