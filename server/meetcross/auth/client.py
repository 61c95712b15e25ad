from __future__ import annotations

import enum
import itertools
import logging
import threading
from typing import Callable, Optional

from meetcross.auth.identity import AuthSession, AuthUser, IdentityService
from meetcross.core.errors import AuthError

logger = logging.getLogger(__name__)


class AuthEvent(str, enum.Enum):
    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"
    TOKEN_REFRESHED = "TOKEN_REFRESHED"
    USER_UPDATED = "USER_UPDATED"


# Listeners receive the generation the transition produced, captured under the lock.
AuthListener = Callable[[AuthEvent, Optional[AuthSession], int], None]


class Subscription:
    def __init__(self, release: Callable[[], None]) -> None:
        self._release = release
        self._lock = threading.Lock()
        self.active = True

    def unsubscribe(self) -> None:
        with self._lock:
            if not self.active:
                logger.debug("auth_subscription_already_released")
                return
            self.active = False
        self._release()


class AuthClient:
    """Holds the current session for one application instance and reports its transitions.

    Every transition bumps ``generation`` before listeners run, so work that started
    under an older generation can be recognised as stale.
    """

    def __init__(self, identity: IdentityService) -> None:
        self._identity = identity
        self._session: AuthSession | None = None
        self._lock = threading.RLock()
        self._listeners: dict[int, AuthListener] = {}
        self._ids = itertools.count(1)
        self._generation = 0

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    def sign_up(self, email: str, password: str) -> AuthSession:
        session = self._identity.sign_up(email, password)
        self._transition(session, AuthEvent.SIGNED_IN)
        return session

    def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        session = self._identity.sign_in_with_password(email, password)
        self._transition(session, AuthEvent.SIGNED_IN)
        return session

    def sign_out(self) -> None:
        with self._lock:
            session = self._session
        if session is None:
            return
        try:
            self._identity.sign_out(session.access_token)
        except AuthError:
            # The local session is dropped even when revocation could not be recorded.
            logger.warning("auth_remote_sign_out_failed", extra={"account_id": session.user.id})
        self._transition(None, AuthEvent.SIGNED_OUT)

    def get_session(self) -> AuthSession | None:
        with self._lock:
            session = self._session
        if session is not None and session.expired:
            logger.info("auth_session_expired", extra={"account_id": session.user.id})
            self._transition(None, AuthEvent.SIGNED_OUT)
            return None
        return session

    def get_user(self) -> AuthUser | None:
        session = self.get_session()
        if session is None:
            return None
        return self._identity.get_user(session.access_token)

    def refresh_session(self) -> AuthSession | None:
        session = self.get_session()
        if session is None:
            return None
        refreshed = self._identity.refresh(session.access_token)
        self._transition(refreshed, AuthEvent.TOKEN_REFRESHED)
        return refreshed

    def notify_user_updated(self) -> None:
        session = self.get_session()
        if session is not None:
            self._transition(session, AuthEvent.USER_UPDATED)

    def on_auth_state_change(self, listener: AuthListener) -> Subscription:
        with self._lock:
            key = next(self._ids)
            self._listeners[key] = listener

        def release() -> None:
            with self._lock:
                self._listeners.pop(key, None)

        return Subscription(release)

    def _transition(self, session: AuthSession | None, event: AuthEvent) -> None:
        with self._lock:
            self._session = session
            self._generation += 1
            generation = self._generation
            listeners = list(self._listeners.values())
        logger.debug("auth_state_changed", extra={"auth_event": event.value})
        for listener in listeners:
            try:
                listener(event, session, generation)
            except Exception:
                logger.exception("auth_listener_failed", extra={"auth_event": event.value})
