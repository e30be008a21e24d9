# models/__init__.py
from .base import MongoDocument, utc_now
from .user_models import Role, UserDocument, TutorRequest
from .session_models import SessionStatus, StudySession
from .material_models import Material
from .review_models import Review
from .booking_models import BookedSession
from .note_models import Note

__all__ = [
    "MongoDocument",
    "utc_now",
    "Role",
    "UserDocument",
    "TutorRequest",
    "SessionStatus",
    "StudySession",
    "Material",
    "Review",
    "BookedSession",
    "Note",
]
