from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func

from meetcross.core.db import Base
from meetcross.models._ids import new_id


class AuthAccount(Base):
    """Identity-provider account. Profiles share its id once provisioned."""

    __tablename__ = "auth_accounts"

    id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    session_version = Column(Integer, nullable=False, default=0)
    last_sign_in_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
