from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
from jose import jwt

from meetcross.core.config import require_service_config


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(
    subject: str,
    *,
    email: str,
    session_version: int,
    expires_minutes: int | None = None,
) -> tuple[str, datetime]:
    config = require_service_config()
    minutes = expires_minutes if expires_minutes is not None else config.ACCESS_TOKEN_EXPIRE_MINUTES
    expires_at = datetime.now(timezone.utc) + timedelta(minutes=minutes)
    payload = {"sub": subject, "email": email, "sv": session_version, "exp": expires_at}
    token = jwt.encode(payload, config.JWT_SECRET, algorithm=config.JWT_ALG)
    return token, expires_at


def decode_access_token(token: str) -> dict[str, Any]:
    config = require_service_config()
    return jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALG])
