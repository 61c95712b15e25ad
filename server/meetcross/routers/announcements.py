from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from meetcross.auth.deps import get_current_profile
from meetcross.core.db import get_db
from meetcross.schemas.announcement import AnnouncementRecord
from meetcross.schemas.profile import ProfileRecord
from meetcross.services import announcements as announcements_service

router = APIRouter(prefix="/announcements", tags=["announcements"])


@router.get("", response_model=list[AnnouncementRecord])
def list_announcements(
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(get_current_profile),
) -> list[AnnouncementRecord]:
    return announcements_service.list_announcements(db)


@router.post("", response_model=AnnouncementRecord, status_code=status.HTTP_201_CREATED)
def create_announcement(
    payload: AnnouncementRecord,
    db: Session = Depends(get_db),
    profile: ProfileRecord = Depends(get_current_profile),
) -> AnnouncementRecord:
    return announcements_service.save_announcement(db, payload.copy(update={"id": None}), author=profile.name)


@router.put("/{announcement_id}", response_model=AnnouncementRecord)
def update_announcement(
    announcement_id: str,
    payload: AnnouncementRecord,
    db: Session = Depends(get_db),
    profile: ProfileRecord = Depends(get_current_profile),
) -> AnnouncementRecord:
    return announcements_service.save_announcement(
        db, payload.copy(update={"id": announcement_id}), author=profile.name
    )


@router.delete("/{announcement_id}", response_model=None, status_code=status.HTTP_204_NO_CONTENT)
def delete_announcement(
    announcement_id: str,
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(get_current_profile),
) -> Response:
    announcements_service.delete_announcement(db, announcement_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
