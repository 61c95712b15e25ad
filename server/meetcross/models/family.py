from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, String
from sqlalchemy.orm import relationship

from meetcross.core.db import Base
from meetcross.models._ids import new_id


class Family(Base):
    __tablename__ = "families"

    id = Column(String(36), primary_key=True, default=new_id)
    family_name = Column(String(150), nullable=False)
    address = Column(String(255), nullable=True)
    head_of_family_id = Column(
        String(36),
        ForeignKey("members.id", ondelete="SET NULL", use_alter=True, name="fk_families_head_of_family_id"),
        nullable=True,
    )
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    head = relationship("Member", foreign_keys=[head_of_family_id], post_update=True)
    members = relationship("Member", back_populates="family", foreign_keys="Member.family_id")
