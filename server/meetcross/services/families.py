from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from meetcross.core.errors import InvalidRecordError
from meetcross.models.family import Family
from meetcross.models.member import Member
from meetcross.schemas.family import FamilyRecord
from meetcross.schemas.member import MemberRecord
from meetcross.services.gateway import EntityGateway
from meetcross.services.members import members

logger = logging.getLogger(__name__)


class FamilyGateway(EntityGateway[FamilyRecord]):
    def validate(self, db: Session, record: FamilyRecord) -> None:
        self.require_reference(db, Member, record.head_of_family_id, "Head of family")


families = FamilyGateway(Family, FamilyRecord, entity="Family")


def list_families(db: Session) -> list[FamilyRecord]:
    return families.list(db)


def get_family(db: Session, family_id: str) -> FamilyRecord:
    return families.get(db, family_id)


def save_family(db: Session, record: FamilyRecord) -> FamilyRecord:
    return families.save(db, record)


def delete_family(db: Session, family_id: str) -> int:
    """Delete a family and unlink its members in one transaction.

    Returns the number of members whose family reference was cleared.
    """

    def _delete() -> int:
        family = families.load(db, family_id)
        unlinked = (
            db.query(Member)
            .filter(Member.family_id == family.id)
            .update({Member.family_id: None}, synchronize_session=False)
        )
        db.delete(family)
        return unlinked

    unlinked = families.write(db, "delete", _delete)
    logger.info("family_deleted", extra={"family_id": family_id, "members_unlinked": unlinked})
    return unlinked


def list_family_members(db: Session, family_id: str) -> list[MemberRecord]:
    family = families.load(db, family_id)
    rows = families.read(
        "list members",
        lambda: db.query(Member)
        .filter(Member.family_id == family.id)
        .order_by(*members.order_by)
        .all(),
    )
    return [members.to_record(row) for row in rows]


def assign_family_members(db: Session, family_id: str, member_ids: list[str]) -> list[MemberRecord]:
    """Make ``member_ids`` exactly the members of the family."""

    wanted = list(dict.fromkeys(member_ids))

    def _assign() -> None:
        family = families.load(db, family_id)
        found = db.query(Member).filter(Member.id.in_(wanted)).all() if wanted else []
        missing = set(wanted) - {member.id for member in found}
        if missing:
            raise InvalidRecordError(f"Members not found: {', '.join(sorted(missing))}")

        clear_query = db.query(Member).filter(Member.family_id == family.id)
        if wanted:
            clear_query = clear_query.filter(~Member.id.in_(wanted))
        clear_query.update({Member.family_id: None}, synchronize_session=False)

        for member in found:
            member.family_id = family.id
        if family.head_of_family_id and family.head_of_family_id not in wanted:
            family.head_of_family_id = None

    families.write(db, "assign members", _assign)
    logger.info("family_members_assigned", extra={"family_id": family_id, "members": len(wanted)})
    db.expire_all()
    return list_family_members(db, family_id)
