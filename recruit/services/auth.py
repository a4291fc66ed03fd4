"""Email/password authentication through Supabase auth.

Failures are normalized onto ``AuthErrorCode`` and a fixed human-readable
message; sign-in routes the user to the admin or HR screen by email.
"""

from __future__ import annotations

import logging
from typing import Any

from supabase import AuthError

from recruit.core.config import settings
from recruit.core.constants import (
    AUTH_ERROR_MESSAGES,
    AUTH_GENERIC_MESSAGE,
    MSG_MISSING_CREDENTIALS,
    MSG_PASSWORD_MISMATCH,
    SUPABASE_AUTH_CODES,
)
from recruit.db.supabase import get_supabase
from recruit.models.auth import AuthResult
from recruit.models.enums import AuthErrorCode, UserRole
from recruit.models.notification import Notification

logger = logging.getLogger(__name__)

ROUTES: dict[UserRole, str] = {
    UserRole.admin: "/admin",
    UserRole.hr: "/hr",
}


class AuthFailure(Exception):
    """Sign-in, sign-up or sign-out failed."""

    def __init__(self, message: str, code: AuthErrorCode = AuthErrorCode.unknown) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class AuthInputError(AuthFailure):
    """The form was incomplete or inconsistent; no call was made."""


def normalize_error_code(raw_code: str | None) -> AuthErrorCode:
    """Map a provider error code (Supabase or ``auth/...`` style) to ours."""
    if not raw_code:
        return AuthErrorCode.unknown
    code = raw_code.removeprefix("auth/").replace("-", "_").lower()
    code = SUPABASE_AUTH_CODES.get(code, code)
    try:
        return AuthErrorCode(code)
    except ValueError:
        return AuthErrorCode.unknown


def error_message(code: AuthErrorCode) -> str:
    return AUTH_ERROR_MESSAGES.get(code.value, AUTH_GENERIC_MESSAGE)


def route_for_email(email: str) -> UserRole:
    """Admin if the email contains any configured marker (case-sensitive), else HR."""
    if any(marker in email for marker in settings.admin_email_markers):
        return UserRole.admin
    return UserRole.hr


def _failure_from(exc: Exception, action: str) -> AuthFailure:
    if isinstance(exc, AuthError):
        code = normalize_error_code(getattr(exc, "code", None))
    else:
        code = AuthErrorCode.unknown
    logger.error(
        "auth_call_failed",
        extra={
            "action": action,
            "error_code": code.value,
            "error_message": str(exc),
        },
    )
    return AuthFailure(error_message(code), code)


def _access_token(response: Any) -> str | None:
    session = getattr(response, "session", None)
    return getattr(session, "access_token", None)


def sign_in(email: str, password: str) -> AuthResult:
    """Sign in and return where the user should be routed."""
    if not email or not password:
        raise AuthInputError(MSG_MISSING_CREDENTIALS)

    client = get_supabase()
    try:
        response = client.auth.sign_in_with_password(
            {"email": email, "password": password}
        )
    except Exception as exc:
        raise _failure_from(exc, "sign_in") from exc

    role = route_for_email(email)
    logger.info("user_signed_in", extra={"role": role.value})
    return AuthResult(
        email=email,
        role=role,
        redirect_to=ROUTES[role],
        access_token=_access_token(response),
        notification=Notification(title="Login Successful", description="Welcome back!"),
    )


def sign_up(email: str, password: str, confirm_password: str) -> AuthResult:
    """Register a new account; new accounts always land on the HR screen."""
    if not email or not password:
        raise AuthInputError(MSG_MISSING_CREDENTIALS)
    if password != confirm_password:
        raise AuthInputError(MSG_PASSWORD_MISMATCH)

    client = get_supabase()
    try:
        response = client.auth.sign_up({"email": email, "password": password})
    except Exception as exc:
        raise _failure_from(exc, "sign_up") from exc

    logger.info("user_signed_up")
    return AuthResult(
        email=email,
        role=UserRole.hr,
        redirect_to=ROUTES[UserRole.hr],
        access_token=_access_token(response),
        notification=Notification(
            title="Account Created",
            description="Your account has been created successfully!",
        ),
    )


def sign_out() -> Notification:
    client = get_supabase()
    try:
        client.auth.sign_out()
    except Exception as exc:
        raise _failure_from(exc, "sign_out") from exc
    return Notification(
        title="Logged Out",
        description="You have been successfully logged out.",
    )
