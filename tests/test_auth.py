"""Tests for sign-in / sign-up / sign-out and the routing rule."""

from __future__ import annotations

from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from supabase import AuthApiError


@pytest.fixture()
def mock_auth_client() -> Generator[MagicMock, None, None]:
    """Patch the auth service's Supabase client."""
    mock_client = MagicMock()
    mock_client.auth.sign_in_with_password.return_value = MagicMock(
        session=MagicMock(access_token="token-123")
    )
    mock_client.auth.sign_up.return_value = MagicMock(session=None)
    with patch("recruit.services.auth.get_supabase", return_value=mock_client):
        yield mock_client


def _api_error(code: str) -> AuthApiError:
    return AuthApiError("boom", 400, code)


class TestRouting:

    @pytest.mark.parametrize(
        ("email", "role"),
        [
            ("admin@example.com", "admin"),
            ("jane@smarted.io", "admin"),
            ("Boss.ADMIN@corp.com", "hr"),
            ("Jane@SmartEd.io", "hr"),
            ("recruiter@acme.com", "hr"),
        ],
    )
    def test_route_for_email(self, email: str, role: str) -> None:
        from recruit.services.auth import route_for_email

        assert route_for_email(email).value == role


class TestErrorMapping:

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("auth/invalid-email", "Invalid email address."),
            ("auth/user-disabled", "This account has been disabled."),
            ("auth/user-not-found", "No account found with this email."),
            ("auth/wrong-password", "Incorrect password."),
            ("auth/email-already-in-use", "An account with this email already exists."),
            ("auth/weak-password", "Password should be at least 6 characters."),
            ("auth/invalid-credential", "Invalid email or password."),
            ("invalid_credentials", "Invalid email or password."),
            ("email_exists", "An account with this email already exists."),
            ("user_banned", "This account has been disabled."),
            ("over_request_rate_limit", "An error occurred. Please try again."),
            (None, "An error occurred. Please try again."),
        ],
    )
    def test_messages(self, raw: str | None, expected: str) -> None:
        from recruit.services.auth import error_message, normalize_error_code

        assert error_message(normalize_error_code(raw)) == expected


class TestSignIn:

    def test_admin_email_routes_to_admin(self, mock_auth_client: MagicMock) -> None:
        from recruit.services.auth import sign_in

        result = sign_in("admin@smarted.io", "secret1")

        assert result.role.value == "admin"
        assert result.redirect_to == "/admin"
        assert result.access_token == "token-123"
        mock_auth_client.auth.sign_in_with_password.assert_called_once_with(
            {"email": "admin@smarted.io", "password": "secret1"}
        )

    def test_missing_fields_make_no_call(self, mock_auth_client: MagicMock) -> None:
        from recruit.services.auth import AuthInputError, sign_in

        with pytest.raises(AuthInputError) as exc_info:
            sign_in("", "x")

        assert exc_info.value.message == "Please fill in all required fields."
        mock_auth_client.auth.sign_in_with_password.assert_not_called()

    def test_provider_error_is_mapped(self, mock_auth_client: MagicMock) -> None:
        from recruit.services.auth import AuthFailure, sign_in

        mock_auth_client.auth.sign_in_with_password.side_effect = _api_error(
            "invalid_credentials"
        )
        with pytest.raises(AuthFailure) as exc_info:
            sign_in("hr@acme.com", "wrong")

        assert exc_info.value.code.value == "invalid_credential"
        assert exc_info.value.message == "Invalid email or password."

    def test_network_error_is_generic(self, mock_auth_client: MagicMock) -> None:
        from recruit.services.auth import AuthFailure, sign_in

        mock_auth_client.auth.sign_in_with_password.side_effect = ConnectionError("down")
        with pytest.raises(AuthFailure) as exc_info:
            sign_in("hr@acme.com", "pw")

        assert exc_info.value.message == "An error occurred. Please try again."


class TestSignUp:

    def test_always_routes_to_hr(self, mock_auth_client: MagicMock) -> None:
        from recruit.services.auth import sign_up

        result = sign_up("admin@smarted.io", "secret1", "secret1")

        assert result.redirect_to == "/hr"
        assert result.access_token is None
        mock_auth_client.auth.sign_up.assert_called_once()

    def test_returns_session_token(self, mock_auth_client: MagicMock) -> None:
        """Projects without email confirmation hand back a session on sign-up."""
        from recruit.services.auth import sign_up

        mock_auth_client.auth.sign_up.return_value = MagicMock(
            session=MagicMock(access_token="fresh-token")
        )

        result = sign_up("new@acme.com", "secret1", "secret1")

        assert result.access_token == "fresh-token"
        assert result.role.value == "hr"

    def test_password_mismatch(self, mock_auth_client: MagicMock) -> None:
        from recruit.services.auth import AuthInputError, sign_up

        with pytest.raises(AuthInputError) as exc_info:
            sign_up("a@b.com", "secret1", "secret2")

        assert exc_info.value.message == "Passwords do not match."
        mock_auth_client.auth.sign_up.assert_not_called()


class TestAuthEndpoints:

    def test_sign_in_200(self, test_client: TestClient, mock_auth_client: MagicMock) -> None:
        response = test_client.post(
            "/api/v1/auth/sign-in",
            json={"email": "recruiter@acme.com", "password": "secret1"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["redirect_to"] == "/hr"
        assert body["notification"]["title"] == "Login Successful"

    def test_sign_in_401(self, test_client: TestClient, mock_auth_client: MagicMock) -> None:
        mock_auth_client.auth.sign_in_with_password.side_effect = _api_error(
            "invalid_credentials"
        )
        response = test_client.post(
            "/api/v1/auth/sign-in",
            json={"email": "recruiter@acme.com", "password": "nope"},
        )

        assert response.status_code == 401
        detail = response.json()["detail"]
        assert detail["title"] == "Login Failed"
        assert detail["description"] == "Invalid email or password."

    def test_sign_up_mismatch_422(
        self, test_client: TestClient, mock_auth_client: MagicMock
    ) -> None:
        response = test_client.post(
            "/api/v1/auth/sign-up",
            json={"email": "a@b.com", "password": "secret1", "confirm_password": "x"},
        )

        assert response.status_code == 422
        assert response.json()["detail"]["title"] == "Registration Failed"

    def test_sign_up_201(self, test_client: TestClient, mock_auth_client: MagicMock) -> None:
        response = test_client.post(
            "/api/v1/auth/sign-up",
            json={"email": "a@b.com", "password": "secret1", "confirm_password": "secret1"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["redirect_to"] == "/hr"
        assert body["access_token"] is None

    def test_sign_out(self, test_client: TestClient, mock_auth_client: MagicMock) -> None:
        response = test_client.post("/api/v1/auth/sign-out")

        assert response.status_code == 200
        assert response.json()["title"] == "Logged Out"
        mock_auth_client.auth.sign_out.assert_called_once()
