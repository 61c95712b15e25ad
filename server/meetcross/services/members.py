from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from meetcross.models.announcement import Announcement
from meetcross.models.donation import Donation
from meetcross.models.event import EventAttendance
from meetcross.models.family import Family
from meetcross.models.member import Member
from meetcross.schemas.member import MemberRecord
from meetcross.services.gateway import EntityGateway

logger = logging.getLogger(__name__)


class MemberGateway(EntityGateway[MemberRecord]):
    def validate(self, db: Session, record: MemberRecord) -> None:
        self.require_reference(db, Family, record.family_id, "Family")

    def before_delete(self, db: Session, row: Member) -> None:
        # The store does not enforce these references, so clear them alongside the delete.
        db.query(Family).filter(Family.head_of_family_id == row.id).update(
            {Family.head_of_family_id: None}, synchronize_session=False
        )
        db.query(Donation).filter(Donation.member_id == row.id).update(
            {Donation.member_id: None}, synchronize_session=False
        )
        db.query(Announcement).filter(Announcement.target_member_id == row.id).update(
            {Announcement.target_member_id: None}, synchronize_session=False
        )
        db.query(EventAttendance).filter(EventAttendance.member_id == row.id).delete(synchronize_session=False)


members = MemberGateway(
    Member,
    MemberRecord,
    entity="Member",
    order_by=(Member.last_name.asc(), Member.first_name.asc()),
)


def list_members(db: Session) -> list[MemberRecord]:
    return members.list(db)


def get_member(db: Session, member_id: str) -> MemberRecord:
    return members.get(db, member_id)


def save_member(db: Session, record: MemberRecord) -> MemberRecord:
    return members.save(db, record)


def delete_member(db: Session, member_id: str) -> None:
    members.delete(db, member_id)
