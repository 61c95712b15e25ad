from __future__ import annotations

import logging
from typing import Iterable

from sqlalchemy.orm import Session

from meetcross.core.errors import InvalidRecordError
from meetcross.models.event import Event, EventAttendance
from meetcross.models.member import Member
from meetcross.schemas.event import EventRecord
from meetcross.services.gateway import EntityGateway

logger = logging.getLogger(__name__)


def _unique(member_ids: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(member_ids))


class EventGateway(EntityGateway[EventRecord]):
    def validate(self, db: Session, record: EventRecord) -> None:
        ensure_members_exist(db, _unique(record.attendee_ids))

    def apply(self, db: Session, row: Event, record: EventRecord) -> None:
        super().apply(db, row, record)
        replace_attendance(db, row, record.attendee_ids)


events = EventGateway(
    Event,
    EventRecord,
    entity="Event",
    order_by=(Event.date.desc(),),
    read_only=("attendee_ids", "attendance_count"),
)


def ensure_members_exist(db: Session, member_ids: list[str]) -> None:
    if not member_ids:
        return
    found = {member_id for (member_id,) in db.query(Member.id).filter(Member.id.in_(member_ids)).all()}
    missing = [member_id for member_id in member_ids if member_id not in found]
    if missing:
        raise InvalidRecordError(f"Attendees are not members: {', '.join(missing)}")


def replace_attendance(db: Session, event: Event, member_ids: Iterable[str]) -> None:
    """Swap the attendee list wholesale, keeping first-seen order."""

    event.attendance.clear()
    db.flush()
    for position, member_id in enumerate(_unique(member_ids)):
        event.attendance.append(EventAttendance(member_id=member_id, position=position))


def list_events(db: Session) -> list[EventRecord]:
    return events.list(db)


def get_event(db: Session, event_id: str) -> EventRecord:
    return events.get(db, event_id)


def save_event(db: Session, record: EventRecord) -> EventRecord:
    return events.save(db, record)


def delete_event(db: Session, event_id: str) -> None:
    events.delete(db, event_id)


def mark_attendance(db: Session, event_id: str, member_ids: list[str]) -> EventRecord:
    attendees = _unique(member_ids)

    def _mark() -> Event:
        event = events.load(db, event_id)
        ensure_members_exist(db, attendees)
        replace_attendance(db, event, attendees)
        db.flush()
        return event

    event = events.write(db, "mark attendance", _mark)
    logger.info("attendance_marked", extra={"event_id": event_id, "attendance_count": len(attendees)})
    return events.to_record(event)
