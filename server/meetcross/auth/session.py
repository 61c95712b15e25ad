"""Session state for one running application instance.

``SessionManager`` answers "who is logged in" and pushes changes to subscribers.
``SessionStore`` and ``SessionBootstrap`` implement the startup protocol: an initial
lookup, the change subscription and a safety timer all feed one reducer, and every
write carries the auth generation it was computed under so late results from an
older generation are dropped instead of overwriting newer state.
"""

from __future__ import annotations

import enum
import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional

from sqlalchemy.orm import Session

from meetcross.auth.client import AuthClient, AuthEvent, Subscription
from meetcross.auth.identity import AuthSession
from meetcross.core.config import settings
from meetcross.core.errors import AuthError, GatewayError
from meetcross.schemas.profile import ProfileRecord
from meetcross.services.profiles import clean_profile_name, provision_profile, resolve_profile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    session: Optional[AuthSession] = None
    error: Optional[AuthError] = None

    @property
    def ok(self) -> bool:
        return self.session is not None


@dataclass(frozen=True)
class SessionResolution:
    generation: int
    profile: Optional[ProfileRecord]


class SessionManager:
    def __init__(self, client: AuthClient, session_factory: Callable[[], Session]) -> None:
        self.client = client
        self._session_factory = session_factory

    def get_current_user(self) -> ProfileRecord | None:
        """Resolve the signed-in profile; lookup failures degrade to ``None``."""

        try:
            user = self.client.get_user()
            if user is None:
                return None
            with self._session_factory() as db:
                return resolve_profile(db, user)
        except AuthError as exc:
            logger.warning("session_lookup_failed", extra={"code": exc.code})
            return None
        except Exception:
            logger.exception("session_lookup_failed")
            return None

    def resolve(self) -> SessionResolution:
        generation = self.client.generation
        return SessionResolution(generation=generation, profile=self.get_current_user())

    def login(self, email: str, password: str) -> LoginResult:
        try:
            session = self.client.sign_in_with_password(email, password)
        except AuthError as exc:
            return LoginResult(error=exc)
        return LoginResult(session=session)

    def register(self, email: str, password: str, name: str) -> ProfileRecord:
        # Rejected before the account exists, so a bad name cannot strand one.
        name = clean_profile_name(name)
        session = self.client.sign_up(email, password)
        try:
            with self._session_factory() as db:
                profile = provision_profile(db, session.user, name)
        except GatewayError:
            logger.error(
                "registration_profile_insert_failed",
                extra={"account_id": session.user.id, "email": session.user.email},
            )
            raise
        self.client.notify_user_updated()
        return profile

    def logout(self) -> None:
        self.client.sign_out()

    def watch(self, on_resolution: Callable[[SessionResolution], None]) -> Subscription:
        def _handle(event: AuthEvent, session: AuthSession | None, generation: int) -> None:
            if event is AuthEvent.SIGNED_OUT or session is None:
                on_resolution(SessionResolution(generation=generation, profile=None))
                return
            on_resolution(SessionResolution(generation=generation, profile=self.get_current_user()))

        return self.client.on_auth_state_change(_handle)

    def subscribe(self, on_change: Callable[[Optional[ProfileRecord]], None]) -> Subscription:
        return self.watch(lambda resolution: on_change(resolution.profile))


class SessionStatus(str, enum.Enum):
    UNRESOLVED = "unresolved"
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True)
class SessionState:
    status: SessionStatus = SessionStatus.UNRESOLVED
    profile: Optional[ProfileRecord] = None

    @classmethod
    def from_profile(cls, profile: Optional[ProfileRecord]) -> "SessionState":
        if profile is None:
            return cls(status=SessionStatus.ANONYMOUS)
        return cls(status=SessionStatus.AUTHENTICATED, profile=profile)


class SessionStore:
    def __init__(self) -> None:
        self._state = SessionState()
        self._generation = -1
        self._condition = threading.Condition()
        self._listeners: list[Callable[[SessionState], None]] = []

    @property
    def state(self) -> SessionState:
        with self._condition:
            return self._state

    def listen(self, listener: Callable[[SessionState], None]) -> Callable[[], None]:
        with self._condition:
            self._listeners.append(listener)

        def remove() -> None:
            with self._condition:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return remove

    def apply(self, resolution: SessionResolution) -> bool:
        with self._condition:
            if resolution.generation < self._generation:
                logger.debug(
                    "stale_session_resolution_discarded",
                    extra={"generation": resolution.generation, "current": self._generation},
                )
                return False
            self._generation = resolution.generation
            return self._set(SessionState.from_profile(resolution.profile))

    def release_loading(self) -> bool:
        with self._condition:
            if self._state.status is not SessionStatus.UNRESOLVED:
                return False
            logger.warning("session_resolution_timed_out")
            return self._set(SessionState(status=SessionStatus.ANONYMOUS))

    def wait_until_resolved(self, timeout: float | None = None) -> bool:
        with self._condition:
            return self._condition.wait_for(lambda: self._state.status is not SessionStatus.UNRESOLVED, timeout)

    def _set(self, state: SessionState) -> bool:
        # Caller holds the condition.
        if state == self._state:
            return False
        self._state = state
        self._condition.notify_all()
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("session_listener_failed")
        return True


class SessionBootstrap:
    def __init__(
        self,
        manager: SessionManager,
        store: SessionStore | None = None,
        timeout: float | None = None,
    ) -> None:
        self.manager = manager
        self.store = store or SessionStore()
        self.timeout = settings.SESSION_SAFETY_TIMEOUT_SECONDS if timeout is None else timeout
        self._subscription: Subscription | None = None
        self._timer: threading.Timer | None = None
        self._worker: threading.Thread | None = None
        self._lock = threading.Lock()

    def start(self) -> SessionStore:
        with self._lock:
            if self._subscription is not None:
                return self.store
            self._worker = threading.Thread(target=self._resolve_initial, name="session-bootstrap", daemon=True)
            self._worker.start()
            self._subscription = self.manager.watch(self.store.apply)
            self._timer = threading.Timer(self.timeout, self.store.release_loading)
            self._timer.daemon = True
            self._timer.start()
        return self.store

    def stop(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            subscription, self._subscription = self._subscription, None
        if subscription is not None:
            subscription.unsubscribe()

    def wait_until_resolved(self, timeout: float | None = None) -> bool:
        return self.store.wait_until_resolved(timeout)

    def _resolve_initial(self) -> None:
        self.store.apply(self.manager.resolve())
