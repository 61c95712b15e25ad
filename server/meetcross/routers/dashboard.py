from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from meetcross.auth.deps import get_current_profile
from meetcross.core.db import get_db
from meetcross.schemas.dashboard import DashboardMetrics
from meetcross.schemas.profile import ProfileRecord
from meetcross.services.dashboard import compute_dashboard

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardMetrics)
def dashboard(
    db: Session = Depends(get_db),
    _: ProfileRecord = Depends(get_current_profile),
) -> DashboardMetrics:
    return compute_dashboard(db)
