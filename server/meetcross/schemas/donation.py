from __future__ import annotations

from datetime import date as date_type
from decimal import Decimal
from typing import Dict, Literal, Optional

from pydantic import BaseModel, Field, validator

from meetcross.schemas.common import blank_to_none

FundValue = Literal["Tithe", "Offering", "Building Fund", "Missions"]
MethodValue = Literal["Cash", "Cheque", "Transfer"]


class DonationRecord(BaseModel):
    id: Optional[str] = None
    member_id: Optional[str] = None
    amount: Decimal = Field(..., gt=0)
    date: date_type
    fund: FundValue
    method: MethodValue
    notes: Optional[str] = Field(None, max_length=500)

    @validator("id", "member_id", pre=True)
    def empty_as_missing(cls, value):
        return blank_to_none(value)

    class Config:
        from_attributes = True


class GivingSummary(BaseModel):
    total: Decimal = Decimal("0")
    by_fund: Dict[str, Decimal] = Field(default_factory=dict)
    count: int = 0
