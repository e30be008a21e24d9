# models/user_models.py
from enum import Enum
from typing import Optional
from datetime import datetime
from pydantic import Field

from .base import MongoDocument, utc_now


class Role(str, Enum):
    STUDENT = "student"
    TUTOR = "tutor"
    ADMIN = "admin"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["Role"]:
        """Return the matching role or None for anything outside the enum"""
        try:
            return cls(value)
        except ValueError:
            return None


# Fields removed once a tutor request is approved or declined
PENDING_TUTOR_FIELDS = ("pendingTutor", "pendingReason", "pendingRequestedAt")

PENDING_TUTOR_PROJECTION = {
    "name": 1,
    "email": 1,
    "pendingReason": 1,
    "pendingRequestedAt": 1,
}


class UserDocument(MongoDocument):
    email: str
    name: str
    photo: str
    role: Role = Role.STUDENT
    created_at: datetime = Field(default_factory=utc_now)


class TutorRequest(MongoDocument):
    """Fields set on a user when they ask to become a tutor"""
    pending_tutor: bool = True
    pending_reason: str = ""
    pending_requested_at: datetime = Field(default_factory=utc_now)
