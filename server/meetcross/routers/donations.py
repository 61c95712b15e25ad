from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from meetcross.auth.deps import FINANCE_ROLES, require_roles
from meetcross.core.db import get_db
from meetcross.schemas.donation import DonationRecord, GivingSummary
from meetcross.schemas.profile import ProfileRecord
from meetcross.services import donations as donations_service

router = APIRouter(prefix="/donations", tags=["donations"])


@router.get("", response_model=list[DonationRecord])
def list_donations(
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(require_roles(*FINANCE_ROLES)),
) -> list[DonationRecord]:
    return donations_service.list_donations(db)


@router.get("/summary", response_model=GivingSummary)
def giving_summary(
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(require_roles(*FINANCE_ROLES)),
) -> GivingSummary:
    return donations_service.giving_summary(db)


@router.post("", response_model=DonationRecord, status_code=status.HTTP_201_CREATED)
def add_donation(
    payload: DonationRecord,
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(require_roles(*FINANCE_ROLES)),
) -> DonationRecord:
    return donations_service.add_donation(db, payload)
