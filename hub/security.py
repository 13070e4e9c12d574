"""
Password hashing (passlib[bcrypt]) and signed access tokens (PyJWT).

Tokens only carry the user id; whoever holds a valid one counts as logged in.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt  # PyJWT
from passlib.context import CryptContext

from hub.config import DEV_SECRET_KEY, get_settings
from shared.constants import PASSWORD_HASH_ROUNDS, PASSWORD_MAX_BYTES

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
pwd_context = CryptContext(
    schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=PASSWORD_HASH_ROUNDS
)

_warned_dev_secret = False


def password_too_long(plain: str) -> bool:
    return len(plain.encode("utf-8")) > PASSWORD_MAX_BYTES


def hash_password(plain: str) -> str:
    if not isinstance(plain, str):
        raise TypeError("password must be a string")
    if password_too_long(plain):
        raise ValueError(f"password must be at most {PASSWORD_MAX_BYTES} bytes")
    return pwd_context.hash(plain)


def verify_password(hashed: str, plain: str) -> bool:
    """
    Check a plaintext password against a stored digest.

    A mismatch is a plain False. A digest passlib cannot identify is treated
    the same way, after logging, so a corrupt row cannot be used to log in.
    """
    # bcrypt would truncate it and could match a different password.
    if not isinstance(plain, str) or password_too_long(plain):
        return False
    try:
        return pwd_context.verify(plain, hashed)
    except (ValueError, TypeError):
        logger.warning("Stored password hash is not a recognised bcrypt digest")
        return False


def get_secret_key() -> str:
    global _warned_dev_secret
    key = get_settings().secret_key
    if key == DEV_SECRET_KEY and not _warned_dev_secret:
        logger.warning(
            "SECRET_KEY is not set; using the development secret. "
            "Set SECRET_KEY in production."
        )
        _warned_dev_secret = True
    return key


def create_access_token(user_id: str, expires_minutes: Optional[int] = None) -> str:
    if expires_minutes is None:
        expires_minutes = get_settings().access_token_expire_minutes
    expire = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes)
    payload = {"sub": user_id, "exp": expire}
    return jwt.encode(payload, get_secret_key(), algorithm=ALGORITHM)


def decode_access_token(token: str) -> Optional[str]:
    """Return the user id carried by a token, or None if it is invalid or expired."""
    try:
        payload = jwt.decode(token, get_secret_key(), algorithms=[ALGORITHM])
    except jwt.PyJWTError:
        return None
    user_id = payload.get("sub")
    return user_id if isinstance(user_id, str) and user_id else None
