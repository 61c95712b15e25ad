from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from meetcross.auth.deps import get_current_profile
from meetcross.core.db import get_db
from meetcross.schemas.member import MemberRecord
from meetcross.schemas.profile import ProfileRecord
from meetcross.services import members as members_service

router = APIRouter(prefix="/members", tags=["members"])


@router.get("", response_model=list[MemberRecord])
def list_members(
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(get_current_profile),
) -> list[MemberRecord]:
    return members_service.list_members(db)


@router.get("/{member_id}", response_model=MemberRecord)
def get_member(
    member_id: str,
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(get_current_profile),
) -> MemberRecord:
    return members_service.get_member(db, member_id)


@router.post("", response_model=MemberRecord, status_code=status.HTTP_201_CREATED)
def create_member(
    payload: MemberRecord,
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(get_current_profile),
) -> MemberRecord:
    return members_service.save_member(db, payload.copy(update={"id": None}))


@router.put("/{member_id}", response_model=MemberRecord)
def update_member(
    member_id: str,
    payload: MemberRecord,
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(get_current_profile),
) -> MemberRecord:
    return members_service.save_member(db, payload.copy(update={"id": member_id}))


@router.delete("/{member_id}", response_model=None, status_code=status.HTTP_204_NO_CONTENT)
def delete_member(
    member_id: str,
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(get_current_profile),
) -> Response:
    members_service.delete_member(db, member_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
