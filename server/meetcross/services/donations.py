from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy import func
from sqlalchemy.orm import Session

from meetcross.models.donation import Donation
from meetcross.models.member import Member
from meetcross.schemas.donation import DonationRecord, GivingSummary
from meetcross.services.gateway import EntityGateway

logger = logging.getLogger(__name__)


class DonationGateway(EntityGateway[DonationRecord]):
    def validate(self, db: Session, record: DonationRecord) -> None:
        self.require_reference(db, Member, record.member_id, "Member")


donations = DonationGateway(
    Donation,
    DonationRecord,
    entity="Donation",
    order_by=(Donation.date.desc(), Donation.created_at.desc()),
)


def list_donations(db: Session) -> list[DonationRecord]:
    return donations.list(db)


def add_donation(db: Session, record: DonationRecord) -> DonationRecord:
    """Record a gift. Donations are never edited, so any incoming id is dropped."""

    return donations.save(db, record.copy(update={"id": None}))


def giving_summary(db: Session) -> GivingSummary:
    rows = donations.read(
        "summarize",
        lambda: db.query(Donation.fund, func.sum(Donation.amount), func.count(Donation.id))
        .group_by(Donation.fund)
        .all(),
    )
    by_fund = {fund: Decimal(str(amount or 0)) for fund, amount, _ in rows}
    return GivingSummary(
        total=sum(by_fund.values(), Decimal("0")),
        by_fund=by_fund,
        count=sum(count for _, _, count in rows),
    )
