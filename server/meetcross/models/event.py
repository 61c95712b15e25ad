from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from meetcross.core.db import Base
from meetcross.models._ids import new_id

EventType = Enum("Service", "Meeting", "Program", name="event_type")


class Event(Base):
    __tablename__ = "events"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    date = Column(DateTime, nullable=False, index=True)
    location = Column(String(255), nullable=True)
    type = Column(EventType, nullable=False, default="Service")
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    attendance = relationship(
        "EventAttendance",
        back_populates="event",
        cascade="all, delete-orphan",
        order_by="EventAttendance.position",
        lazy="selectin",
    )

    @property
    def attendee_ids(self) -> list[str]:
        return [row.member_id for row in self.attendance]

    @property
    def attendance_count(self) -> int:
        return len(self.attendance)


class EventAttendance(Base):
    __tablename__ = "event_attendance"

    event_id = Column(String(36), ForeignKey("events.id", ondelete="CASCADE"), primary_key=True)
    member_id = Column(String(36), ForeignKey("members.id", ondelete="CASCADE"), primary_key=True, index=True)
    position = Column(Integer, nullable=False, default=0)

    event = relationship("Event", back_populates="attendance")
