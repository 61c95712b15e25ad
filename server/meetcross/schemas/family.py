from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, validator

from meetcross.schemas.common import blank_to_none


class FamilyRecord(BaseModel):
    id: Optional[str] = None
    family_name: str = Field(..., min_length=1, max_length=150)
    address: Optional[str] = Field(None, max_length=255)
    head_of_family_id: Optional[str] = None

    @validator("id", "head_of_family_id", pre=True)
    def empty_as_missing(cls, value):
        return blank_to_none(value)

    class Config:
        from_attributes = True


class FamilyMemberAssignment(BaseModel):
    member_ids: List[str] = Field(default_factory=list)

    @validator("member_ids")
    def validate_member_ids(cls, value: List[str]) -> List[str]:
        if len(set(value)) != len(value):
            raise ValueError("Duplicate member ids detected")
        return value
