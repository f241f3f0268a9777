"""SQLAlchemy Models."""
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Index, String, Text
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BankingDetails(Base):
    """Banking details of a user. ``iban`` and ``full_name`` are AES-GCM envelopes."""
    __tablename__ = "banking_details"
    id = Column(String(36), primary_key=True)
    user_id = Column(String(255), nullable=False)
    title = Column(String(255), nullable=False)
    iban = Column(Text, nullable=False)
    full_name = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)

    __table_args__ = (
        Index("ix_banking_details_user_id", "user_id"),
    )
