from datetime import datetime, UTC

from sqlalchemy import Column, DateTime, String, Text

from .base import Base


class SessionRecord(Base):
    __tablename__ = "session_records"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, default=lambda: datetime.now(UTC), onupdate=lambda: datetime.now(UTC))
