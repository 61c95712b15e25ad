from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from meetcross.auth.deps import bearer_scheme, get_current_profile, get_identity
from meetcross.auth.identity import AuthSession, IdentityService
from meetcross.core.db import get_db
from meetcross.core.errors import AuthError
from meetcross.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from meetcross.schemas.profile import ProfileRecord
from meetcross.services.profiles import provision_profile

router = APIRouter(prefix="/auth", tags=["auth"])


def _token_response(session: AuthSession) -> TokenResponse:
    return TokenResponse(access_token=session.access_token, expires_at=session.expires_at)


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterRequest,
    db: Session = Depends(get_db),
    identity: IdentityService = Depends(get_identity),
) -> TokenResponse:
    session = identity.sign_up(payload.email, payload.password)
    provision_profile(db, session.user, payload.name)
    return _token_response(session)


@router.post("/login", response_model=TokenResponse)
def login(payload: LoginRequest, identity: IdentityService = Depends(get_identity)) -> TokenResponse:
    return _token_response(identity.sign_in_with_password(payload.email, payload.password))


@router.post("/logout", response_model=None, status_code=status.HTTP_204_NO_CONTENT)
def logout(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    identity: IdentityService = Depends(get_identity),
) -> Response:
    if credentials:
        identity.sign_out(credentials.credentials)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/refresh", response_model=TokenResponse)
def refresh(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    identity: IdentityService = Depends(get_identity),
) -> TokenResponse:
    if not credentials:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    try:
        return _token_response(identity.refresh(credentials.credentials))
    except AuthError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=exc.message) from exc


@router.get("/me", response_model=ProfileRecord)
def me(profile: ProfileRecord = Depends(get_current_profile)) -> ProfileRecord:
    return profile
