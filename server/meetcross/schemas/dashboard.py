from __future__ import annotations

from decimal import Decimal
from typing import List

from pydantic import BaseModel


class GivingPoint(BaseModel):
    name: str
    amount: Decimal


class DashboardMetrics(BaseModel):
    total_members: int
    active_members: int
    upcoming_events: int
    avg_attendance: int
    monthly_giving: Decimal
    giving_data: List[GivingPoint]
