from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, EmailStr, Field, validator

from meetcross.schemas.common import blank_to_none

RoleValue = Literal["Admin", "Pastor", "Treasurer", "Staff"]


class ProfileRecord(BaseModel):
    id: Optional[str] = None
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    role: RoleValue = "Staff"
    avatar: Optional[str] = None

    @validator("id", "avatar", pre=True)
    def empty_as_missing(cls, value):
        return blank_to_none(value)

    class Config:
        from_attributes = True
