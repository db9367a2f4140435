from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime

class BookmarkBase(BaseModel):
    note: Optional[str] = None
    tags: List[str] = Field(default_factory=list)

class BookmarkCreate(BookmarkBase):
    reference: str = Field(..., min_length=1, max_length=120)
    translation: Optional[str] = None

class BookmarkRead(BookmarkBase):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True) # For compatibility with SQLAlchemy models

    id: str
    user_id: str = Field(..., serialization_alias='userId')
    verse_id: str = Field(..., serialization_alias='verseId')
    reference: str
    created_at: Optional[datetime] = Field(None, serialization_alias='createdAt')
