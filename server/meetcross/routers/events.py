from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from meetcross.auth.deps import get_current_profile
from meetcross.core.db import get_db
from meetcross.schemas.event import AttendanceUpdate, EventRecord
from meetcross.schemas.profile import ProfileRecord
from meetcross.services import events as events_service

router = APIRouter(prefix="/events", tags=["events"])


@router.get("", response_model=list[EventRecord])
def list_events(
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(get_current_profile),
) -> list[EventRecord]:
    return events_service.list_events(db)


@router.get("/{event_id}", response_model=EventRecord)
def get_event(
    event_id: str,
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(get_current_profile),
) -> EventRecord:
    return events_service.get_event(db, event_id)


@router.post("", response_model=EventRecord, status_code=status.HTTP_201_CREATED)
def create_event(
    payload: EventRecord,
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(get_current_profile),
) -> EventRecord:
    return events_service.save_event(db, payload.copy(update={"id": None}))


@router.put("/{event_id}", response_model=EventRecord)
def update_event(
    event_id: str,
    payload: EventRecord,
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(get_current_profile),
) -> EventRecord:
    return events_service.save_event(db, payload.copy(update={"id": event_id}))


@router.put("/{event_id}/attendance", response_model=EventRecord)
def mark_attendance(
    event_id: str,
    payload: AttendanceUpdate,
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(get_current_profile),
) -> EventRecord:
    return events_service.mark_attendance(db, event_id, payload.member_ids)


@router.delete("/{event_id}", response_model=None, status_code=status.HTTP_204_NO_CONTENT)
def delete_event(
    event_id: str,
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(get_current_profile),
) -> Response:
    events_service.delete_event(db, event_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
