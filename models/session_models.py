# models/session_models.py
from enum import Enum
from typing import List, Optional, Union
from datetime import datetime
from pydantic import Field

from .base import MongoDocument, utc_now


class SessionStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["SessionStatus"]:
        try:
            return cls(value)
        except ValueError:
            return None


# target status -> statuses a session may be in before moving there
ALLOWED_TRANSITIONS = {
    SessionStatus.APPROVED: (SessionStatus.PENDING,),
    SessionStatus.REJECTED: (SessionStatus.PENDING,),
    SessionStatus.PENDING: (SessionStatus.REJECTED,),
}


def allowed_sources(target: SessionStatus) -> List[str]:
    """Statuses from which ``target`` can be reached"""
    return [status.value for status in ALLOWED_TRANSITIONS[target]]


DEFAULT_REJECTION_REASON = "No reason provided"

SESSION_DETAIL_PROJECTION = {
    "title": 1,
    "description": 1,
    "registrationStart": 1,
    "registrationEnd": 1,
    "classStart": 1,
    "classEnd": 1,
    "duration": 1,
    "tutorName": 1,
    "tutorEmail": 1,
    "registrationFee": 1,
    "status": 1,
    "createdAt": 1,
    "approvedAt": 1,
    "updatedAt": 1,
    "averageRating": 1,
}


class StudySession(MongoDocument):
    """A tutoring class proposed by a tutor. Always created as pending and free."""
    title: str
    tutor_name: str
    tutor_email: str
    description: Optional[str] = None
    registration_start: Optional[str] = None
    registration_end: Optional[str] = None
    class_start: Optional[str] = None
    class_end: Optional[str] = None
    duration: Optional[Union[float, str]] = None
    registration_fee: float = 0
    status: SessionStatus = SessionStatus.PENDING
    created_at: datetime = Field(default_factory=utc_now)
