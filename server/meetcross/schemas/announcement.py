from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, validator

from meetcross.schemas.common import blank_to_none, naive_utc

TargetValue = Literal["All", "Individual"]


class AnnouncementRecord(BaseModel):
    id: Optional[str] = None
    title: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1)
    date: Optional[datetime] = None
    target: TargetValue = "All"
    target_member_id: Optional[str] = None
    author: Optional[str] = Field(None, max_length=255)
    sent_via_email: bool = False

    @validator("id", "target_member_id", "author", pre=True)
    def empty_as_missing(cls, value):
        return blank_to_none(value)

    @validator("date")
    def store_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return naive_utc(value)

    class Config:
        from_attributes = True
