from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, validator

from meetcross.schemas.common import blank_to_none, naive_utc

EventTypeValue = Literal["Service", "Meeting", "Program"]


class EventRecord(BaseModel):
    id: Optional[str] = None
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    date: datetime
    location: Optional[str] = Field(None, max_length=255)
    type: EventTypeValue = "Service"
    attendee_ids: List[str] = Field(default_factory=list)
    # Derived from attendee_ids on every save; inbound values are ignored.
    attendance_count: int = 0

    @validator("id", pre=True)
    def empty_as_missing(cls, value):
        return blank_to_none(value)

    @validator("date")
    def store_as_utc(cls, value: datetime) -> datetime:
        return naive_utc(value)

    class Config:
        from_attributes = True


class AttendanceUpdate(BaseModel):
    member_ids: List[str] = Field(default_factory=list)
