# api/booked_sessions/routes.py
from flask import jsonify

from services.database import get_db
from ..base.utils import parse_body, query_param
from .schemas import BookSessionRequest
from .usecases import book_session, list_bookings, check_booking
from . import booked_sessions_bp


@booked_sessions_bp.route('', methods=['POST'])
def create_booking():
    """
    Student books a session

    Request Example:
        {"studentEmail": "s@x.com", "sessionId": "665f...", "tutorEmail": "t@x.com"}

    Errors:
        400 "Missing required booking fields"
        400 "Already booked"
    """
    payload = parse_body(BookSessionRequest, message="Missing required booking fields")
    return jsonify(book_session(get_db(), payload))


@booked_sessions_bp.route('', methods=['GET'])
def get_bookings():
    """All bookings, or one student's with ?email="""
    return jsonify(list_bookings(get_db(), query_param("email")))


@booked_sessions_bp.route('/<session_id>/<student_email>', methods=['GET'])
def is_booked(session_id, student_email):
    return jsonify(check_booking(get_db(), session_id, student_email))
