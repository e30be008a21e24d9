# api/booked_sessions/usecases.py
from typing import Any, Dict, List, Optional
import logging

from services.database import DatabaseServices
from models.booking_models import BookedSession
from ..base.errors import ConflictError
from ..base.base_schemas import InsertResult
from .schemas import BookSessionRequest, BookingStatus

logger = logging.getLogger(__name__)


def book_session(db: DatabaseServices, payload: BookSessionRequest) -> Dict[str, Any]:
    """Reserve a session for a student; a second booking of the same pair is refused"""
    booking = BookedSession(**payload.model_dump(exclude_none=True))
    inserted_id = db.booked_sessions.book(booking)
    if inserted_id is None:
        raise ConflictError("Already booked")

    logger.info(f"{booking.student_email} booked session {booking.session_id}")
    return InsertResult(insertedId=str(inserted_id)).model_dump()


def list_bookings(db: DatabaseServices, student_email: Optional[str]) -> List[Dict]:
    return db.booked_sessions.find_all(student_email)


def check_booking(db: DatabaseServices, session_id: str, student_email: str) -> Dict[str, bool]:
    return BookingStatus(booked=db.booked_sessions.is_booked(session_id, student_email)).model_dump()
