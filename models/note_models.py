# models/note_models.py
from typing import Optional
from datetime import datetime
from pydantic import Field

from .base import MongoDocument, utc_now


class Note(MongoDocument):
    email: str
    title: str
    description: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)
