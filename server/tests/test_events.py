from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from meetcross.core.errors import InvalidRecordError, RecordNotFoundError
from meetcross.schemas.event import EventRecord
from meetcross.services.events import delete_event, get_event, list_events, mark_attendance, save_event


def service(title: str = "Sunday Service", **fields) -> EventRecord:
    fields.setdefault("date", datetime(2026, 3, 1, 10, 0))
    return EventRecord(title=title, **fields)


def test_mark_attendance_sets_exact_list_and_count(db_session, make_member):
    m1 = make_member("Abel", "Bekele")
    m2 = make_member("Saba", "Bekele")
    event = save_event(db_session, service(attendee_ids=[]))

    updated = mark_attendance(db_session, event.id, [m1.id, m2.id])

    assert updated.attendee_ids == [m1.id, m2.id]
    assert updated.attendance_count == 2
    assert get_event(db_session, event.id).attendance_count == 2


def test_mark_attendance_replaces_previous_list(db_session, make_member):
    m1 = make_member("Abel", "Bekele")
    m2 = make_member("Saba", "Bekele")
    event = save_event(db_session, service(attendee_ids=[m1.id, m2.id]))

    updated = mark_attendance(db_session, event.id, [m2.id, m2.id])

    assert updated.attendee_ids == [m2.id]
    assert updated.attendance_count == 1


def test_unknown_attendee_leaves_attendance_untouched(db_session, make_member):
    m1 = make_member("Abel", "Bekele")
    event = save_event(db_session, service(attendee_ids=[m1.id]))

    with pytest.raises(InvalidRecordError):
        mark_attendance(db_session, event.id, [m1.id, "stranger"])

    db_session.expire_all()
    assert get_event(db_session, event.id).attendee_ids == [m1.id]


def test_attendance_on_missing_event(db_session):
    with pytest.raises(RecordNotFoundError):
        mark_attendance(db_session, "missing", [])


def test_inbound_attendance_count_is_recomputed(db_session, sample_member):
    saved = save_event(db_session, service(attendee_ids=[sample_member.id], attendance_count=40))
    assert saved.attendance_count == 1


def test_events_are_listed_newest_first(db_session):
    save_event(db_session, service("Older", date=datetime(2026, 1, 4, 10)))
    save_event(db_session, service("Newer", date=datetime(2026, 2, 1, 10)))
    assert [event.title for event in list_events(db_session)] == ["Newer", "Older"]


def test_aware_dates_are_stored_in_utc(db_session):
    eastern = timezone(timedelta(hours=-5))
    saved = save_event(db_session, service(date=datetime(2026, 3, 1, 10, 0, tzinfo=eastern)))
    assert get_event(db_session, saved.id).date == datetime(2026, 3, 1, 15, 0)


def test_delete_event(db_session, sample_member):
    event = save_event(db_session, service(attendee_ids=[sample_member.id]))
    delete_event(db_session, event.id)
    assert list_events(db_session) == []
    with pytest.raises(RecordNotFoundError):
        delete_event(db_session, event.id)
