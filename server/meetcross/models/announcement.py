from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Enum, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from meetcross.core.db import Base
from meetcross.models._ids import new_id

AnnouncementTarget = Enum("All", "Individual", name="announcement_target")


class Announcement(Base):
    __tablename__ = "announcements"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    date = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    target = Column(AnnouncementTarget, nullable=False, default="All")
    target_member_id = Column(String(36), ForeignKey("members.id", ondelete="SET NULL"), nullable=True)
    author = Column(String(255), nullable=False)
    sent_via_email = Column(Boolean, default=False, nullable=False)

    target_member = relationship("Member")
