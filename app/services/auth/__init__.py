from datetime import datetime, timedelta, timezone

from fastapi import Depends, Request, Response
from passlib.context import CryptContext
from jose import jwt, JWTError

from app.utils.config import Settings, get_settings
from app.utils.errors import AuthError


pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

SESSION_TOKEN_TYPE = "session"


def verify_password(plain: str, hashed: str) -> bool:
    """Verify plaintext password against a bcrypt hash."""
    return pwd_context.verify(plain, hashed)


def hash_password(plain: str) -> str:
    """Hash a plaintext password using bcrypt."""
    return pwd_context.hash(plain)


def create_session_token(subject: str, config: Settings) -> str:
    """Create a signed JWT identifying the user, expiring after session_expires_days."""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": subject,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(days=config.session_expires_days)).timestamp()),
        "typ": SESSION_TOKEN_TYPE,
    }
    return jwt.encode(payload, config.jwt_secret_key, algorithm=config.jwt_algorithm)


def decode_session_token(token: str, config: Settings) -> str:
    """Return the user id carried by a session token or raise AuthError(401)."""
    try:
        payload = jwt.decode(token, config.jwt_secret_key, algorithms=[config.jwt_algorithm])
    except JWTError:
        raise AuthError(401, "Unauthorized - invalid token")
    user_id = payload.get("sub")
    if not user_id or payload.get("typ") != SESSION_TOKEN_TYPE:
        raise AuthError(401, "Unauthorized - invalid token")
    return user_id


def set_session_cookie(response: Response, user_id: str, config: Settings) -> str:
    """Issue a session token for user_id and attach it as an http-only cookie."""
    token = create_session_token(user_id, config)
    response.set_cookie(
        key=config.session_cookie_name,
        value=token,
        max_age=int(timedelta(days=config.session_expires_days).total_seconds()),
        httponly=True,
        secure=config.secure_cookies,
        samesite="strict",
    )
    return token


def clear_session_cookie(response: Response, config: Settings) -> None:
    response.delete_cookie(
        key=config.session_cookie_name,
        httponly=True,
        secure=config.secure_cookies,
        samesite="strict",
    )


def get_current_user_id(request: Request, config: Settings = Depends(get_settings)) -> str:
    """Auth dependency that validates the session cookie and returns the user id.

    No lookup happens here; check-auth decides what a missing user means.
    """
    token = request.cookies.get(config.session_cookie_name)
    if not token:
        raise AuthError(401, "Unauthorized - no token provided")
    return decode_session_token(token, config)
