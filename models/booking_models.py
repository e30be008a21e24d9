# models/booking_models.py
from typing import Optional
from datetime import datetime
from pydantic import Field

from .base import MongoDocument, utc_now


class BookedSession(MongoDocument):
    """A student's reservation of a session; unique per (student, session)"""
    student_email: str
    session_id: str
    tutor_email: str
    session_title: Optional[str] = None
    student_name: Optional[str] = None
    registration_fee: Optional[float] = None
    booked_at: datetime = Field(default_factory=utc_now)

    def key(self) -> dict:
        return {"studentEmail": self.student_email, "sessionId": self.session_id}
