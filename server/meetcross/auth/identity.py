from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from jose import JWTError
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from meetcross.auth.security import create_access_token, decode_access_token, hash_password, verify_password
from meetcross.core.config import settings
from meetcross.core.errors import AuthError
from meetcross.models.account import AuthAccount

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthUser:
    id: str
    email: str


@dataclass(frozen=True)
class AuthSession:
    access_token: str
    expires_at: datetime
    user: AuthUser

    @property
    def expired(self) -> bool:
        return self.expires_at <= datetime.now(timezone.utc)


def validate_password_strength(password: str) -> None:
    minimum = max(settings.PASSWORD_MIN_LENGTH, 1)
    if len(password) < minimum:
        raise AuthError("weak_password", f"Password must be at least {minimum} characters long.")


class IdentityService:
    """Credential store and token issuer backing every sign-in path."""

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def sign_up(self, email: str, password: str) -> AuthSession:
        validate_password_strength(password)
        normalized = email.strip().lower()
        try:
            with self._session_factory() as db:
                existing = db.query(AuthAccount).filter(func.lower(AuthAccount.email) == normalized).first()
                if existing:
                    raise AuthError("email_taken", "An account with this email already exists.")
                account = AuthAccount(
                    email=normalized,
                    hashed_password=hash_password(password),
                    last_sign_in_at=datetime.now(timezone.utc),
                )
                db.add(account)
                db.commit()
                logger.info("auth_account_created", extra={"account_id": account.id})
                return self._issue(account)
        except SQLAlchemyError as exc:
            logger.exception("auth_sign_up_failed", extra={"email": normalized})
            raise AuthError("network_error", "Could not reach the identity store.") from exc

    def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        normalized = email.strip().lower()
        try:
            with self._session_factory() as db:
                account = db.query(AuthAccount).filter(func.lower(AuthAccount.email) == normalized).first()
                if not account or not verify_password(password, account.hashed_password):
                    logger.info("auth_sign_in_rejected", extra={"email": normalized})
                    raise AuthError("invalid_credentials", "Invalid email or password.")
                account.last_sign_in_at = datetime.now(timezone.utc)
                db.commit()
                return self._issue(account)
        except SQLAlchemyError as exc:
            logger.exception("auth_sign_in_failed", extra={"email": normalized})
            raise AuthError("network_error", "Could not reach the identity store.") from exc

    def get_user(self, access_token: str) -> AuthUser:
        account = self._account_for_token(access_token)
        return AuthUser(id=account.id, email=account.email)

    def refresh(self, access_token: str) -> AuthSession:
        return self._issue(self._account_for_token(access_token))

    def sign_out(self, access_token: str) -> None:
        """Revoke every token issued for the account. Unknown or stale tokens are ignored."""

        try:
            payload = decode_access_token(access_token)
        except JWTError:
            return
        try:
            with self._session_factory() as db:
                account = db.get(AuthAccount, payload.get("sub"))
                if account is None or account.session_version != payload.get("sv"):
                    return
                account.session_version += 1
                db.commit()
                logger.info("auth_signed_out", extra={"account_id": account.id})
        except SQLAlchemyError as exc:
            logger.exception("auth_sign_out_failed")
            raise AuthError("network_error", "Could not reach the identity store.") from exc

    def _account_for_token(self, access_token: str) -> AuthAccount:
        try:
            payload = decode_access_token(access_token)
        except JWTError as exc:
            raise AuthError("not_authenticated", "Session is invalid or expired.") from exc
        try:
            with self._session_factory() as db:
                account = db.get(AuthAccount, payload.get("sub"))
        except SQLAlchemyError as exc:
            logger.exception("auth_token_lookup_failed")
            raise AuthError("network_error", "Could not reach the identity store.") from exc
        if account is None or account.session_version != payload.get("sv"):
            raise AuthError("not_authenticated", "Session has been revoked.")
        return account

    @staticmethod
    def _issue(account: AuthAccount) -> AuthSession:
        token, expires_at = create_access_token(
            account.id,
            email=account.email,
            session_version=account.session_version,
        )
        return AuthSession(access_token=token, expires_at=expires_at, user=AuthUser(id=account.id, email=account.email))
