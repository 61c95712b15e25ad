from __future__ import annotations

import logging
from datetime import datetime

import pytest

from meetcross.core.errors import InvalidRecordError, RecordNotFoundError
from meetcross.schemas.announcement import AnnouncementRecord
from meetcross.services.announcements import delete_announcement, list_announcements, save_announcement


def notice(**fields) -> AnnouncementRecord:
    fields.setdefault("title", "Choir practice")
    fields.setdefault("message", "Thursday at 7pm")
    return AnnouncementRecord(**fields)


def test_defaults_are_filled_on_save(db_session):
    saved = save_announcement(db_session, notice())
    assert saved.id
    assert saved.author == "Admin"
    assert saved.date is not None
    assert saved.target == "All"


def test_author_falls_back_to_signed_in_name(db_session):
    saved = save_announcement(db_session, notice(), author="Grace Admin")
    assert saved.author == "Grace Admin"

    explicit = save_announcement(db_session, notice(author="Pastor John"), author="Grace Admin")
    assert explicit.author == "Pastor John"


def test_individual_target_needs_a_member(db_session, sample_member):
    with pytest.raises(InvalidRecordError):
        save_announcement(db_session, notice(target="Individual"))
    with pytest.raises(InvalidRecordError):
        save_announcement(db_session, notice(target="Individual", target_member_id="missing"))

    saved = save_announcement(db_session, notice(target="Individual", target_member_id=sample_member.id))
    assert saved.target_member_id == sample_member.id


def test_broadcast_drops_target_member(db_session, sample_member):
    saved = save_announcement(db_session, notice(target="All", target_member_id=sample_member.id))
    assert saved.target_member_id is None


def test_new_emailed_announcement_triggers_delivery_hook(db_session, make_member, caplog):
    make_member("Abel", "Bekele", email="abel@example.com")
    make_member("Saba", "Bekele")

    with caplog.at_level(logging.INFO, logger="meetcross.services.notifications"):
        save_announcement(db_session, notice(sent_via_email=True))

    requests = [record for record in caplog.records if record.getMessage() == "announcement_email_requested"]
    assert len(requests) == 1
    assert requests[0].recipients == 1


def test_listed_newest_first_and_deletable(db_session):
    older = save_announcement(db_session, notice(title="Older", date=datetime(2026, 1, 1)))
    save_announcement(db_session, notice(title="Newer", date=datetime(2026, 2, 1)))
    assert [item.title for item in list_announcements(db_session)] == ["Newer", "Older"]

    delete_announcement(db_session, older.id)
    assert [item.title for item in list_announcements(db_session)] == ["Newer"]


def test_update_keeps_original_date_and_author(db_session):
    first = save_announcement(db_session, notice(title="First", date=datetime(2026, 1, 1)), author="Grace Admin")
    save_announcement(db_session, notice(title="Second", date=datetime(2026, 2, 1)))

    edited = save_announcement(
        db_session,
        notice(id=first.id, title="First (edited)"),
        author="Sam Staff",
    )

    assert edited.date == datetime(2026, 1, 1)
    assert edited.author == "Grace Admin"
    assert [item.title for item in list_announcements(db_session)] == ["Second", "First (edited)"]


def test_update_of_missing_announcement(db_session):
    with pytest.raises(RecordNotFoundError):
        save_announcement(db_session, notice(id="missing"))
