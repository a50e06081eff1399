import logging
from datetime import timedelta
from typing import Callable

from bson.objectid import ObjectId
from fastapi import APIRouter, Depends, Response, status
from mongoengine import NotUniqueError, ValidationError
from pydantic import BaseModel, ConfigDict, EmailStr, Field

from app.models.base import utcnow
from app.models.user import User
from app.utils.config import Settings, get_settings
from app.utils.errors import AuthError
from app.services.auth import (
    clear_session_cookie,
    get_current_user_id,
    hash_password,
    set_session_cookie,
    verify_password,
)
from app.services.mail import MailDeliveryError, Mailer, get_mailer
from app.services.tokens import (
    expires_in,
    generate_reset_token,
    generate_verification_code,
    is_expired,
)


logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_CREDENTIALS = "Invalid credentials"


def normalize_email(raw_email: str) -> str:
    """Stored and looked-up emails are stripped and lowercased."""
    return raw_email.strip().lower()


def _try_send(send: Callable[..., None], *args: str) -> bool:
    """Best-effort delivery; failures are logged and never reach the caller."""
    try:
        send(*args)
        return True
    except MailDeliveryError as e:
        logger.warning("Email delivery failed: %s", e)
        return False


class SignupBody(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=1)


@router.post("/signup", status_code=status.HTTP_201_CREATED)
def signup(
    body: SignupBody,
    response: Response,
    config: Settings = Depends(get_settings),
    mailer: Mailer = Depends(get_mailer),
) -> dict:
    email = normalize_email(body.email)
    logger.info("Signup attempt for %s", email)
    # Reject duplicate email signups early; the unique index covers races
    if User.objects(email=email).first():
        raise AuthError(400, "User already exists")

    code = generate_verification_code()
    user = User(
        name=body.name,
        email=email,
        password=hash_password(body.password),
        verification_token=code,
        verification_token_expires_at=expires_in(timedelta(hours=config.verification_token_expires_hours)),
    )
    try:
        user.save()
    except NotUniqueError:
        raise AuthError(400, "User already exists")
    except ValidationError as e:
        logger.info("Rejected signup for %s: %s", email, e)
        raise AuthError(400, "Invalid signup details")
    logger.info("User created: %s", user.email)

    set_session_cookie(response, str(user.id), config)

    if not _try_send(mailer.send_verification_email, user.email, code):
        # Local fallback so the account can still be verified during development
        logger.warning(
            "Verification code for %s: %s (expires %s)",
            user.email,
            code,
            user.verification_token_expires_at.isoformat(),
        )

    return {"success": True, "message": "User created successfully", "user": user.to_output()}


class VerifyEmailBody(BaseModel):
    # Clients may post the 6-digit code as a JSON number
    model_config = ConfigDict(coerce_numbers_to_str=True)

    code: str = Field(min_length=1)


@router.post("/verify-email")
def verify_email(body: VerifyEmailBody, mailer: Mailer = Depends(get_mailer)) -> dict:
    now = utcnow()
    # Codes are short, so more than one user may briefly hold the same one
    candidates: list[User] = User.objects(verification_token=body.code)
    user = next((u for u in candidates if not is_expired(u.verification_token_expires_at, now)), None)
    if not user:
        raise AuthError(400, "Invalid or expired verification code")

    user.is_verified = True
    user.clear_verification()
    user.save()
    logger.info("Email verified for %s", user.email)

    _try_send(mailer.send_welcome_email, user.email, user.name)

    return {"success": True, "message": "Email verified successfully", "user": user.to_output()}


class LoginBody(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


@router.post("/login")
def login(body: LoginBody, response: Response, config: Settings = Depends(get_settings)) -> dict:
    email = normalize_email(body.email)
    logger.info("Login attempt for %s", email)
    user: User | None = User.objects(email=email).first()
    # Same message for unknown email and wrong password; avoid leaking whether email exists
    if not user or not verify_password(body.password, user.password):
        raise AuthError(400, INVALID_CREDENTIALS)

    set_session_cookie(response, str(user.id), config)
    user.last_login = utcnow()
    user.save()

    return {"success": True, "message": "Logged in successfully", "user": user.to_output()}


@router.post("/logout")
def logout(response: Response, config: Settings = Depends(get_settings)) -> dict:
    clear_session_cookie(response, config)
    return {"success": True, "message": "Logged out successfully"}


class ForgotPasswordBody(BaseModel):
    email: str = Field(min_length=1)


@router.post("/forgot-password")
def forgot_password(
    body: ForgotPasswordBody,
    config: Settings = Depends(get_settings),
    mailer: Mailer = Depends(get_mailer),
) -> dict:
    email = normalize_email(body.email)
    logger.info("Forgot password request for %s", email)
    user: User | None = User.objects(email=email).first()
    if not user:
        raise AuthError(400, "User not found")

    token = generate_reset_token()
    user.reset_password_token = token
    user.reset_password_expires_at = expires_in(timedelta(minutes=config.reset_token_expires_minutes))
    user.save()

    reset_url = f"{config.client_url}/reset-password/{token}"
    if not _try_send(mailer.send_password_reset_email, user.email, reset_url):
        logger.warning("Password reset link for %s: %s", user.email, reset_url)

    return {"success": True, "message": "Password reset link sent to your email"}


class ResetPasswordBody(BaseModel):
    password: str = Field(min_length=1)


@router.post("/reset-password/{token}")
def reset_password(token: str, body: ResetPasswordBody, mailer: Mailer = Depends(get_mailer)) -> dict:
    user: User | None = User.objects(reset_password_token=token).first()
    if not user or is_expired(user.reset_password_expires_at):
        raise AuthError(400, "Invalid or expired reset token")

    user.password = hash_password(body.password)
    user.clear_reset()
    user.save()
    logger.info("Password reset for %s", user.email)

    _try_send(mailer.send_reset_success_email, user.email)

    return {"success": True, "message": "Password reset successful"}


@router.get("/check-auth")
def check_auth(user_id: str = Depends(get_current_user_id)) -> dict:
    user: User | None = None
    if ObjectId.is_valid(user_id):
        user = User.objects(id=user_id).exclude("password").first()
    if not user:
        raise AuthError(400, "User not found")
    return {"success": True, "user": user.to_output()}
