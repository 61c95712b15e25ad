from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from meetcross.auth.deps import ADMIN_ROLES, get_current_profile, require_roles
from meetcross.core.db import get_db
from meetcross.schemas.church_settings import ChurchSettingsRecord
from meetcross.schemas.profile import ProfileRecord
from meetcross.services import church_settings as settings_service

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=ChurchSettingsRecord)
def get_settings(
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(get_current_profile),
) -> ChurchSettingsRecord:
    return settings_service.get_settings(db)


@router.put("", response_model=ChurchSettingsRecord)
def save_settings(
    payload: ChurchSettingsRecord,
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(require_roles(*ADMIN_ROLES)),
) -> ChurchSettingsRecord:
    return settings_service.save_settings(db, payload)
