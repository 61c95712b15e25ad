from __future__ import annotations

import pytest

from meetcross.core.errors import InvalidRecordError, RecordNotFoundError
from meetcross.models.member import Member
from meetcross.schemas.family import FamilyMemberAssignment, FamilyRecord
from meetcross.services.families import (
    assign_family_members,
    delete_family,
    get_family,
    list_families,
    list_family_members,
    save_family,
)


def test_save_family_inserts_and_updates(db_session, sample_member):
    family = save_family(db_session, FamilyRecord(family_name="Tesfaye Family", head_of_family_id=sample_member.id))
    assert family.id

    renamed = save_family(db_session, family.copy(update={"address": "12 King St"}))
    assert renamed.id == family.id
    assert get_family(db_session, family.id).address == "12 King St"
    assert len(list_families(db_session)) == 1


def test_head_of_family_must_exist(db_session):
    with pytest.raises(InvalidRecordError):
        save_family(db_session, FamilyRecord(family_name="Nobody", head_of_family_id="missing"))


def test_delete_family_unlinks_only_its_members(db_session, make_member):
    family = save_family(db_session, FamilyRecord(family_name="Bekele Family"))
    other = save_family(db_session, FamilyRecord(family_name="Alemu Family"))
    linked = [make_member(f"Child{i}", "Bekele", family_id=family.id) for i in range(3)]
    outsider = make_member("Dawit", "Alemu", family_id=other.id)

    unlinked = delete_family(db_session, family.id)

    assert unlinked == 3
    db_session.expire_all()
    for member in linked:
        assert db_session.get(Member, member.id).family_id is None
    assert db_session.get(Member, outsider.id).family_id == other.id
    assert [record.id for record in list_families(db_session)] == [other.id]


def test_delete_missing_family_changes_nothing(db_session, make_member):
    family = save_family(db_session, FamilyRecord(family_name="Kept Family"))
    member = make_member("Ruth", "Kept", family_id=family.id)

    with pytest.raises(RecordNotFoundError):
        delete_family(db_session, "missing")

    db_session.expire_all()
    assert db_session.get(Member, member.id).family_id == family.id


def test_assign_members_replaces_membership(db_session, make_member):
    family = save_family(db_session, FamilyRecord(family_name="Girma Family"))
    first = make_member("Abel", "Girma", family_id=family.id)
    second = make_member("Bethel", "Girma")
    third = make_member("Caleb", "Girma")
    save_family(db_session, FamilyRecord(id=family.id, family_name="Girma Family", head_of_family_id=first.id))

    assigned = assign_family_members(db_session, family.id, [second.id, third.id])

    assert [member.id for member in assigned] == [second.id, third.id]
    assert db_session.get(Member, first.id).family_id is None
    assert get_family(db_session, family.id).head_of_family_id is None
    assert [member.id for member in list_family_members(db_session, family.id)] == [second.id, third.id]


def test_assign_unknown_member_is_rejected(db_session, make_member):
    family = save_family(db_session, FamilyRecord(family_name="Haile Family"))
    member = make_member("Hiwot", "Haile", family_id=family.id)

    with pytest.raises(InvalidRecordError):
        assign_family_members(db_session, family.id, [member.id, "missing"])

    db_session.expire_all()
    assert db_session.get(Member, member.id).family_id == family.id


def test_assignment_rejects_duplicates():
    with pytest.raises(ValueError):
        FamilyMemberAssignment(member_ids=["a", "a"])
