from __future__ import annotations

from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, EmailStr, Field, validator

from meetcross.schemas.common import blank_to_none

MemberStatusValue = Literal["Active", "Inactive", "Visitor"]
GenderValue = Literal["Male", "Female"]


class MemberRecord(BaseModel):
    id: Optional[str] = None
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=40)
    gender: Optional[GenderValue] = None
    status: MemberStatusValue = "Active"
    birth_date: Optional[date] = None
    baptism_date: Optional[date] = None
    address: Optional[str] = Field(None, max_length=255)
    photo_url: Optional[str] = None
    notes: Optional[str] = Field(None, max_length=2000)
    family_id: Optional[str] = None

    @validator("id", "email", "phone", "gender", "birth_date", "baptism_date", "family_id", "photo_url", pre=True)
    def empty_as_missing(cls, value):
        return blank_to_none(value)

    class Config:
        from_attributes = True
