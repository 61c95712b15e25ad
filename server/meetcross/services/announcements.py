from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Session

from meetcross.core.errors import InvalidRecordError
from meetcross.models.announcement import Announcement
from meetcross.models.member import Member
from meetcross.schemas.announcement import AnnouncementRecord
from meetcross.services.gateway import EntityGateway
from meetcross.services.notifications import notify_announcement_emailed

DEFAULT_AUTHOR = "Admin"


class AnnouncementGateway(EntityGateway[AnnouncementRecord]):
    def validate(self, db: Session, record: AnnouncementRecord) -> None:
        if record.target == "Individual":
            if not record.target_member_id:
                raise InvalidRecordError("Individual announcements need a target member")
            self.require_reference(db, Member, record.target_member_id, "Member")


announcements = AnnouncementGateway(
    Announcement,
    AnnouncementRecord,
    entity="Announcement",
    order_by=(Announcement.date.desc(),),
)


def list_announcements(db: Session) -> list[AnnouncementRecord]:
    return announcements.list(db)


def save_announcement(db: Session, record: AnnouncementRecord, author: str | None = None) -> AnnouncementRecord:
    if record.id:
        # Updates keep the original timestamp and author unless the caller sends new ones.
        current = announcements.get(db, record.id)
        updates = {"date": record.date or current.date, "author": record.author or current.author}
    else:
        updates = {
            "date": record.date or datetime.utcnow(),
            "author": record.author or author or DEFAULT_AUTHOR,
        }
    if record.target == "All":
        updates["target_member_id"] = None
    saved = announcements.save(db, record.copy(update=updates))
    if saved.sent_via_email and not record.id:
        row = announcements.load(db, saved.id)
        recipients = 1 if saved.target == "Individual" else announcements.read(
            "count recipients",
            lambda: db.query(Member).filter(Member.email.isnot(None)).count(),
        )
        notify_announcement_emailed(row, recipients)
    return saved


def delete_announcement(db: Session, announcement_id: str) -> None:
    announcements.delete(db, announcement_id)
