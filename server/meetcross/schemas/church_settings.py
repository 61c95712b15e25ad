from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class ChurchSettingsRecord(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    address: Optional[str] = Field(None, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=40)
    currency: str = Field("$", min_length=1, max_length=8)
    logo_url: Optional[str] = None

    class Config:
        from_attributes = True
