from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from meetcross.auth.deps import get_current_profile
from meetcross.core.db import get_db
from meetcross.schemas.family import FamilyMemberAssignment, FamilyRecord
from meetcross.schemas.member import MemberRecord
from meetcross.schemas.profile import ProfileRecord
from meetcross.services import families as families_service

router = APIRouter(prefix="/families", tags=["families"])


@router.get("", response_model=list[FamilyRecord])
def list_families(
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(get_current_profile),
) -> list[FamilyRecord]:
    return families_service.list_families(db)


@router.get("/{family_id}", response_model=FamilyRecord)
def get_family(
    family_id: str,
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(get_current_profile),
) -> FamilyRecord:
    return families_service.get_family(db, family_id)


@router.post("", response_model=FamilyRecord, status_code=status.HTTP_201_CREATED)
def create_family(
    payload: FamilyRecord,
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(get_current_profile),
) -> FamilyRecord:
    return families_service.save_family(db, payload.copy(update={"id": None}))


@router.put("/{family_id}", response_model=FamilyRecord)
def update_family(
    family_id: str,
    payload: FamilyRecord,
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(get_current_profile),
) -> FamilyRecord:
    return families_service.save_family(db, payload.copy(update={"id": family_id}))


@router.delete("/{family_id}", response_model=None, status_code=status.HTTP_204_NO_CONTENT)
def delete_family(
    family_id: str,
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(get_current_profile),
) -> Response:
    families_service.delete_family(db, family_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{family_id}/members", response_model=list[MemberRecord])
def list_family_members(
    family_id: str,
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(get_current_profile),
) -> list[MemberRecord]:
    return families_service.list_family_members(db, family_id)


@router.post("/{family_id}/members", response_model=list[MemberRecord])
def assign_family_members(
    family_id: str,
    payload: FamilyMemberAssignment,
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(get_current_profile),
) -> list[MemberRecord]:
    return families_service.assign_family_members(db, family_id, payload.member_ids)
