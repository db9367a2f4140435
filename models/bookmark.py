from sqlalchemy import Column, String, DateTime, JSON, Text, func
from database import Base

class Bookmark(Base):
    __tablename__ = 'bookmarks'

    # "<user_id>:<verse_id>", one bookmark per user and verse
    id = Column(String(255), primary_key=True)
    user_id = Column(String(64), nullable=False, index=True)

    verse_id = Column(String(160), nullable=False, index=True) # E.g., "acf:João 3:16"
    reference = Column(String(120), nullable=False)            # E.g., "João 3:16"

    note = Column(Text, nullable=True) # Optional user note for the bookmark
    tags = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    @staticmethod
    def make_id(user_id, verse_id):
        return f"{user_id}:{verse_id}"

    def __repr__(self):
        return f'<Bookmark {self.id} User: {self.user_id} - {self.reference}>'
