"""Sign-in / sign-up / sign-out endpoints backed by Supabase auth."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from recruit.models.auth import AuthResult, SignInRequest, SignUpRequest
from recruit.models.notification import Notification
from recruit.services import auth

logger = logging.getLogger(__name__)

router = APIRouter()


def _http_error(exc: auth.AuthFailure, title: str) -> HTTPException:
    status = 422 if isinstance(exc, auth.AuthInputError) else 401
    return HTTPException(
        status_code=status,
        detail={"title": title, "description": exc.message, "code": exc.code.value},
    )


@router.post("/sign-in", response_model=AuthResult)
async def sign_in(body: SignInRequest) -> AuthResult:
    """Sign in and return the screen to route to (admin or HR)."""
    try:
        return auth.sign_in(body.email, body.password)
    except auth.AuthFailure as exc:
        raise _http_error(exc, "Login Failed") from exc


@router.post("/sign-up", status_code=201, response_model=AuthResult)
async def sign_up(body: SignUpRequest) -> AuthResult:
    try:
        return auth.sign_up(body.email, body.password, body.confirm_password)
    except auth.AuthFailure as exc:
        raise _http_error(exc, "Registration Failed") from exc


@router.post("/sign-out", response_model=Notification)
async def sign_out() -> Notification:
    try:
        return auth.sign_out()
    except auth.AuthFailure as exc:
        raise HTTPException(
            status_code=502,
            detail={"title": "Error", "description": "Failed to log out. Please try again."},
        ) from exc
