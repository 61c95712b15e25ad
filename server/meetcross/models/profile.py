from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime, Enum, String

from meetcross.core.db import Base
from meetcross.models._ids import new_id

ProfileRole = Enum("Admin", "Pastor", "Treasurer", "Staff", name="profile_role")


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    role = Column(ProfileRole, nullable=False, default="Staff")
    avatar = Column(String(2048), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
