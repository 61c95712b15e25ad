from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, Date, DateTime, Enum, ForeignKey, String
from sqlalchemy.orm import relationship

from meetcross.core.db import Base
from meetcross.models._ids import new_id

MemberStatus = Enum("Active", "Inactive", "Visitor", name="member_status")
MemberGender = Enum("Male", "Female", name="member_gender")


class Member(Base):
    __tablename__ = "members"

    id = Column(String(36), primary_key=True, default=new_id)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(40), nullable=True)
    gender = Column(MemberGender, nullable=True)
    status = Column(MemberStatus, nullable=False, default="Active")
    birth_date = Column(Date, nullable=True)
    baptism_date = Column(Date, nullable=True)
    address = Column(String(255), nullable=True)
    photo_url = Column(String(2048), nullable=True)
    notes = Column(String(2000), nullable=True)
    family_id = Column(String(36), ForeignKey("families.id", ondelete="SET NULL"), nullable=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    family = relationship("Family", back_populates="members", foreign_keys=[family_id])

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
