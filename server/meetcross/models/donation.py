from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, Date, DateTime, Enum, ForeignKey, Numeric, String
from sqlalchemy.orm import relationship

from meetcross.core.db import Base
from meetcross.models._ids import new_id

FundType = Enum("Tithe", "Offering", "Building Fund", "Missions", name="donation_fund")
PaymentMethod = Enum("Cash", "Cheque", "Transfer", name="donation_method")


class Donation(Base):
    __tablename__ = "donations"

    id = Column(String(36), primary_key=True, default=new_id)
    member_id = Column(String(36), ForeignKey("members.id", ondelete="SET NULL"), nullable=True, index=True)
    amount = Column(Numeric(12, 2), nullable=False)
    date = Column(Date, nullable=False, index=True)
    fund = Column(FundType, nullable=False)
    method = Column(PaymentMethod, nullable=False)
    notes = Column(String(500), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    member = relationship("Member")
