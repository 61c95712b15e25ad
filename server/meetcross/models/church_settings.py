from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String

from meetcross.core.db import Base

SETTINGS_ROW_ID = 1


class ChurchSettings(Base):
    __tablename__ = "church_settings"

    id = Column(Integer, primary_key=True, default=SETTINGS_ROW_ID)
    name = Column(String(255), nullable=False)
    address = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(40), nullable=True)
    currency = Column(String(8), nullable=False, default="$")
    logo_url = Column(String(2048), nullable=True)
    # Set once, by the registration that claimed the first-registrant admin role.
    admin_account_id = Column(String(36), nullable=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
