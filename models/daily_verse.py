from sqlalchemy import Column, String, JSON, DateTime, func
from database import Base

class DailyVerse(Base):
    __tablename__ = 'daily_verses'

    day = Column(String(10), primary_key=True) # ISO date, e.g. "2025-05-08"
    payload = Column(JSON, nullable=False)     # Serialized VerseRecord
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f'<DailyVerse {self.day} {self.payload.get("reference") if self.payload else None}>'
