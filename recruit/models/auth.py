"""Request / response models for sign-in, sign-up and sign-out."""

from pydantic import BaseModel

from recruit.models.enums import UserRole
from recruit.models.notification import Notification


class SignInRequest(BaseModel):
    """Email / password credentials."""
    email: str = ""
    password: str = ""


class SignUpRequest(SignInRequest):
    """Registration form; ``confirm_password`` must match ``password``."""
    confirm_password: str = ""


class AuthResult(BaseModel):
    """Outcome of a successful sign-in or sign-up."""
    email: str
    role: UserRole
    redirect_to: str
    access_token: str | None = None
    notification: Notification
