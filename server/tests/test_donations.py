from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from meetcross.core.errors import InvalidRecordError
from meetcross.schemas.donation import DonationRecord
from meetcross.services.donations import add_donation, giving_summary, list_donations


def gift(amount: str, **fields) -> DonationRecord:
    fields.setdefault("date", date(2026, 3, 1))
    fields.setdefault("fund", "Tithe")
    fields.setdefault("method", "Cash")
    return DonationRecord(amount=Decimal(amount), **fields)


def test_anonymous_donation_is_recorded(db_session):
    saved = add_donation(db_session, gift("500", member_id=None, fund="Building Fund", method="Transfer"))

    assert saved.id
    assert saved.member_id is None
    listed = list_donations(db_session)
    assert len(listed) == 1
    assert listed[0].amount == Decimal("500")
    assert listed[0].fund == "Building Fund"


def test_incoming_identifier_is_ignored(db_session):
    first = add_donation(db_session, gift("10"))
    second = add_donation(db_session, gift("15", id=first.id))

    assert second.id != first.id
    assert len(list_donations(db_session)) == 2


def test_non_positive_amount_fails_validation():
    with pytest.raises(ValidationError):
        gift("0")


def test_unknown_donor_is_rejected(db_session):
    with pytest.raises(InvalidRecordError):
        add_donation(db_session, gift("25", member_id="missing"))


def test_donations_are_listed_newest_first(db_session, sample_member):
    add_donation(db_session, gift("10", date=date(2026, 1, 4), member_id=sample_member.id))
    add_donation(db_session, gift("20", date=date(2026, 2, 1)))
    assert [donation.date for donation in list_donations(db_session)] == [date(2026, 2, 1), date(2026, 1, 4)]


def test_giving_summary_groups_by_fund(db_session):
    add_donation(db_session, gift("100", fund="Tithe"))
    add_donation(db_session, gift("50.50", fund="Tithe"))
    add_donation(db_session, gift("25", fund="Missions"))

    summary = giving_summary(db_session)

    assert summary.count == 3
    assert summary.total == Decimal("175.50")
    assert summary.by_fund["Tithe"] == Decimal("150.50")
    assert summary.by_fund["Missions"] == Decimal("25")


def test_empty_summary(db_session):
    summary = giving_summary(db_session)
    assert summary.total == 0
    assert summary.count == 0
    assert summary.by_fund == {}
