from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from meetcross.auth.deps import ADMIN_ROLES, require_roles
from meetcross.core.db import get_db
from meetcross.schemas.profile import ProfileRecord
from meetcross.services import profiles as profiles_service

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[ProfileRecord])
def list_users(
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(require_roles(*ADMIN_ROLES)),
) -> list[ProfileRecord]:
    return profiles_service.list_users(db)


@router.post("", response_model=ProfileRecord, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: ProfileRecord,
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(require_roles(*ADMIN_ROLES)),
) -> ProfileRecord:
    return profiles_service.save_user(db, payload.copy(update={"id": None}))


@router.put("/{user_id}", response_model=ProfileRecord)
def update_user(
    user_id: str,
    payload: ProfileRecord,
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(require_roles(*ADMIN_ROLES)),
) -> ProfileRecord:
    return profiles_service.save_user(db, payload.copy(update={"id": user_id}))


@router.delete("/{user_id}", response_model=None, status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: str,
    db: Session = Depends(get_db),
    acting: ProfileRecord = Depends(require_roles(*ADMIN_ROLES)),
) -> Response:
    profiles_service.delete_user(db, user_id, acting_user_id=acting.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
