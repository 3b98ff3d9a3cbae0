"""
Tests for the HTTP surface (auth, users and catalog routers).

These tests run the real app against an in-memory MongoDB.
"""

import pytest


def register(client, data):
    return client.post("/auth/register", json=data)


class TestAuthRoutes:
    """Tests for /auth endpoints."""

    def test_register_returns_201_with_user(self, client_with_mocks, test_user_data):
        response = register(client_with_mocks, test_user_data)

        assert response.status_code == 201
        assert response.json() == {"success": True, "user": test_user_data["email"]}

    def test_register_duplicate_returns_409(
        self, client_with_mocks, test_user_data, assert_error_response
    ):
        register(client_with_mocks, test_user_data)
        response = register(client_with_mocks, {**test_user_data, "username": "another"})

        assert_error_response(response, 409, "already exists")

    def test_register_short_password_returns_uniform_422(
        self, client_with_mocks, test_user_data, assert_error_response
    ):
        response = register(client_with_mocks, {**test_user_data, "password": "short"})

        assert_error_response(response, 422)

    def test_login_success(self, client_with_mocks, test_user_data):
        register(client_with_mocks, test_user_data)

        response = client_with_mocks.post(
            "/auth/login",
            json={"email": test_user_data["email"], "password": test_user_data["password"]},
        )

        assert response.status_code == 200
        assert response.json()["user"] == test_user_data["email"]

    def test_login_failures_are_identical(self, client_with_mocks, test_user_data):
        register(client_with_mocks, test_user_data)

        unknown = client_with_mocks.post(
            "/auth/login", json={"email": "ghost@example.com", "password": "whatever123"}
        )
        wrong = client_with_mocks.post(
            "/auth/login", json={"email": test_user_data["email"], "password": "wrong-one"}
        )

        assert unknown.status_code == wrong.status_code == 401
        assert unknown.json() == wrong.json() == {
            "success": False,
            "error": "Invalid email or password.",
        }

    def test_forgot_password_is_generic(self, client_with_mocks, test_user_data, mock_notifier):
        register(client_with_mocks, test_user_data)

        known = client_with_mocks.post(
            "/auth/forgot-password", json={"email": test_user_data["email"]}
        )
        unknown = client_with_mocks.post(
            "/auth/forgot-password", json={"email": "ghost@example.com"}
        )

        assert known.status_code == unknown.status_code == 200
        assert known.json() == unknown.json()
        assert known.json()["success"] is True
        mock_notifier.send_password_reset.assert_awaited_once()

    def test_reset_password_flow(self, client_with_mocks, test_user_data, mock_notifier):
        register(client_with_mocks, test_user_data)
        client_with_mocks.post("/auth/forgot-password", json={"email": test_user_data["email"]})
        _, reset_link = mock_notifier.send_password_reset.call_args.args
        token = reset_link.split("token=", 1)[1]

        first = client_with_mocks.post(
            "/auth/reset-password", json={"token": token, "password": "BrandNewPass1"}
        )
        second = client_with_mocks.post(
            "/auth/reset-password", json={"token": token, "password": "BrandNewPass2"}
        )
        login = client_with_mocks.post(
            "/auth/login", json={"email": test_user_data["email"], "password": "BrandNewPass1"}
        )

        assert first.status_code == 200
        assert second.status_code == 400
        assert login.json()["success"] is True


class TestProfileRoutes:
    """Tests for /users/{email}/profile."""

    def test_get_profile_has_no_password(self, client_with_mocks, test_user_data):
        register(client_with_mocks, test_user_data)

        response = client_with_mocks.get(f"/users/{test_user_data['email']}/profile")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["username"] == test_user_data["username"]
        assert "password" not in data

    def test_get_profile_unknown_returns_404(self, client_with_mocks, assert_error_response):
        response = client_with_mocks.get("/users/ghost@example.com/profile")

        assert_error_response(response, 404, "not found")

    def test_patch_profile_updates_sparse_fields(self, client_with_mocks, test_user_data):
        register(client_with_mocks, test_user_data)

        response = client_with_mocks.patch(
            f"/users/{test_user_data['email']}/profile", json={"username": "renamed"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["data"]["username"] == "renamed"
        assert body["data"]["phoneNumber"] == test_user_data["phoneNumber"]

    def test_patch_profile_full_form_with_blank_phone(self, client_with_mocks, test_user_data):
        register(client_with_mocks, test_user_data)

        response = client_with_mocks.patch(
            f"/users/{test_user_data['email']}/profile",
            json={
                "username": test_user_data["username"],
                "email": test_user_data["email"],
                "phoneNumber": "",
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert "phoneNumber" not in body["data"] or body["data"]["phoneNumber"] is None

    def test_patch_profile_short_username_rejected(
        self, client_with_mocks, test_user_data, assert_error_response
    ):
        register(client_with_mocks, test_user_data)

        response = client_with_mocks.patch(
            f"/users/{test_user_data['email']}/profile", json={"username": "ab"}
        )
        profile = client_with_mocks.get(f"/users/{test_user_data['email']}/profile")

        assert_error_response(response, 422, "at least 3 characters")
        assert profile.json()["data"]["username"] == test_user_data["username"]


class TestAgentConfigRoutes:
    """Tests for /users/{email}/agent-config."""

    def test_get_initializes_default(self, client_with_mocks, test_user_data):
        register(client_with_mocks, test_user_data)

        response = client_with_mocks.get(f"/users/{test_user_data['email']}/agent-config")

        assert response.status_code == 200
        assert response.json()["data"] == {
            "provider": "default-provider",
            "model": "default-model",
            "language": "en-US",
            "displayName": "Default Agent",
        }

    def test_put_then_get_round_trips(self, client_with_mocks, test_user_data, agent_config_data):
        register(client_with_mocks, test_user_data)
        url = f"/users/{test_user_data['email']}/agent-config"

        saved = client_with_mocks.put(url, json=agent_config_data)
        fetched = client_with_mocks.get(url)

        assert saved.status_code == 200
        assert saved.json()["data"] == agent_config_data
        assert fetched.json()["data"] == agent_config_data

    def test_put_for_unknown_user_returns_404(
        self, client_with_mocks, agent_config_data, assert_error_response
    ):
        response = client_with_mocks.put(
            "/users/ghost@example.com/agent-config", json=agent_config_data
        )

        assert_error_response(response, 404)

    def test_put_selection_derives_display_name(self, client_with_mocks, test_user_data):
        register(client_with_mocks, test_user_data)

        response = client_with_mocks.put(
            f"/users/{test_user_data['email']}/agent-config/selection",
            json={"provider": "deepgram", "model": "nova-2", "language": "en-GB"},
        )

        assert response.status_code == 200
        assert response.json()["data"]["displayName"] == "Agent in English (UK)"

    def test_put_selection_unknown_language_uses_value(self, client_with_mocks, test_user_data):
        register(client_with_mocks, test_user_data)

        response = client_with_mocks.put(
            f"/users/{test_user_data['email']}/agent-config/selection",
            json={"provider": "custom", "model": "m1", "language": "xx-YY"},
        )

        assert response.json()["data"]["displayName"] == "Agent in xx-YY"


class TestCatalogRoute:
    """Tests for /catalog/stt."""

    def test_catalog_lists_providers(self, client_with_mocks):
        response = client_with_mocks.get("/catalog/stt")

        assert response.status_code == 200
        providers = {p["value"] for p in response.json()["stt"]}
        assert {"deepgram", "google", "openai"} <= providers
