# api/sessions/routes.py
from flask import jsonify

from services.database import get_db
from ..base.utils import parse_body, query_param
from .schemas import (
    CreateSessionRequest,
    UpdateSessionRequest,
    ApprovalRequest,
    RejectionRequest,
    StatusUpdateRequest,
)
from .usecases import (
    list_sessions,
    list_approved_sessions,
    list_tutor_sessions,
    get_session,
    propose_session,
    update_status,
    approve_session,
    reject_session,
    edit_session,
    delete_session,
)
from . import sessions_bp


@sessions_bp.route('', methods=['GET'])
def get_sessions():
    """All sessions, optionally filtered by ?status= and ?tutorEmail="""
    return jsonify(list_sessions(get_db(), query_param("status"), query_param("tutorEmail")))


@sessions_bp.route('/approved', methods=['GET'])
def get_approved_sessions():
    """Approved sessions only (public listing)"""
    return jsonify(list_approved_sessions(get_db()))


@sessions_bp.route('/tutor/<email>', methods=['GET'])
def get_tutor_sessions(email):
    return jsonify(list_tutor_sessions(get_db(), email))


@sessions_bp.route('/<session_id>', methods=['GET'])
def get_single_session(session_id):
    return jsonify(get_session(get_db(), session_id))


@sessions_bp.route('', methods=['POST'])
def create_session():
    """
    Tutor proposes a session

    Request Example:
        {"title": "Algebra", "tutorName": "T", "tutorEmail": "t@x.com",
         "classStart": "2025-01-10", "duration": "2 hours"}

    Response Example:
        {"acknowledged": true, "insertedId": "665f...", "status": "pending", "registrationFee": 0}
    """
    payload = parse_body(CreateSessionRequest, message="Missing required fields")
    return jsonify(propose_session(get_db(), payload))


@sessions_bp.route('/<session_id>/status', methods=['PATCH'])
def patch_status(session_id):
    payload = parse_body(StatusUpdateRequest)
    return jsonify(update_status(get_db(), session_id, payload))


@sessions_bp.route('/<session_id>/approve', methods=['PATCH'])
def approve(session_id):
    """Admin approves a pending session; body {"isPaid": bool, "fee": number}"""
    payload = parse_body(ApprovalRequest)
    return jsonify(approve_session(get_db(), session_id, payload))


@sessions_bp.route('/<session_id>/reject', methods=['PATCH'])
def reject(session_id):
    """Admin rejects a pending session; body {"reason": str, "feedback": str}"""
    payload = parse_body(RejectionRequest)
    return jsonify(reject_session(get_db(), session_id, payload))


@sessions_bp.route('/<session_id>', methods=['PATCH'])
def patch_session(session_id):
    payload = parse_body(UpdateSessionRequest)
    return jsonify(edit_session(get_db(), session_id, payload))


@sessions_bp.route('/<session_id>', methods=['DELETE'])
def remove_session(session_id):
    return jsonify(delete_session(get_db(), session_id))
