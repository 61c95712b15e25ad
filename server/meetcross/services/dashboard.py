from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy.orm import Session

from meetcross.schemas.dashboard import DashboardMetrics, GivingPoint
from meetcross.services.donations import list_donations
from meetcross.services.events import list_events
from meetcross.services.members import list_members

MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
GIVING_WINDOW_MONTHS = 6


def _months_back(today: date, count: int) -> list[tuple[int, int]]:
    months = []
    year, month = today.year, today.month
    for _ in range(count):
        months.append((year, month))
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    return list(reversed(months))


def compute_dashboard(db: Session, now: datetime | None = None) -> DashboardMetrics:
    now = now or datetime.utcnow()
    today = now.date()
    members = list_members(db)
    events = list_events(db)
    donations = list_donations(db)

    past_with_attendance = [event for event in events if event.date <= now and event.attendance_count > 0]
    avg_attendance = 0
    if past_with_attendance:
        total = sum(event.attendance_count for event in past_with_attendance)
        avg_attendance = int((Decimal(total) / len(past_with_attendance)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))

    window = _months_back(today, GIVING_WINDOW_MONTHS)
    totals = {key: Decimal("0") for key in window}
    for donation in donations:
        key = (donation.date.year, donation.date.month)
        if key in totals:
            totals[key] += donation.amount

    return DashboardMetrics(
        total_members=len(members),
        active_members=len([member for member in members if member.status == "Active"]),
        upcoming_events=len([event for event in events if event.date > now]),
        avg_attendance=avg_attendance,
        monthly_giving=totals[(today.year, today.month)],
        giving_data=[GivingPoint(name=MONTH_ABBREVIATIONS[month - 1], amount=totals[(year, month)]) for year, month in window],
    )
