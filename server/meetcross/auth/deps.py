from typing import Callable

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session, sessionmaker

from meetcross.auth.identity import IdentityService
from meetcross.core.db import SessionLocal, get_db, get_engine
from meetcross.core.errors import AuthError
from meetcross.schemas.profile import ProfileRecord
from meetcross.services.profiles import resolve_profile

bearer_scheme = HTTPBearer(auto_error=False)

ADMIN_ROLES = ("Admin",)
FINANCE_ROLES = ("Admin", "Pastor", "Treasurer")


def get_session_factory() -> sessionmaker:
    get_engine()
    return SessionLocal


def get_identity(session_factory: sessionmaker = Depends(get_session_factory)) -> IdentityService:
    return IdentityService(session_factory)


def get_access_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str:
    if not credentials:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    return credentials.credentials


def get_current_profile(
    token: str = Depends(get_access_token),
    db: Session = Depends(get_db),
    identity: IdentityService = Depends(get_identity),
) -> ProfileRecord:
    try:
        user = identity.get_user(token)
    except AuthError as exc:
        if exc.code == "network_error":
            raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=exc.message) from exc
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=exc.message) from exc
    return resolve_profile(db, user)


def require_roles(*roles: str) -> Callable[[ProfileRecord], ProfileRecord]:
    def checker(profile: ProfileRecord = Depends(get_current_profile)) -> ProfileRecord:
        if profile.role not in roles:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Insufficient permissions")
        return profile

    return checker
