from __future__ import annotations

import secrets
from datetime import datetime, timedelta

from app.models.base import as_utc, utcnow


VERIFICATION_CODE_MIN = 100000
VERIFICATION_CODE_MAX = 999999
RESET_TOKEN_BYTES = 20


def generate_verification_code() -> str:
    """Return a 6-digit numeric code drawn from the OS CSPRNG."""
    span = VERIFICATION_CODE_MAX - VERIFICATION_CODE_MIN + 1
    return str(VERIFICATION_CODE_MIN + secrets.randbelow(span))


def generate_reset_token() -> str:
    """Return a 40-character hex token (20 random bytes)."""
    return secrets.token_hex(RESET_TOKEN_BYTES)


def expires_in(delta: timedelta, now: datetime | None = None) -> datetime:
    return (now or utcnow()) + delta


def is_expired(expires_at: datetime | None, now: datetime | None = None) -> bool:
    """A token is live only while now < expires_at; a missing expiry is expired."""
    if expires_at is None:
        return True
    return as_utc(now or utcnow()) >= as_utc(expires_at)
