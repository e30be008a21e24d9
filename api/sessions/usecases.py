# api/sessions/usecases.py
from typing import Any, Dict, List, Optional
import logging

from services.database import DatabaseServices
from models.base import utc_now
from models.session_models import SessionStatus, StudySession, allowed_sources
from ..base.errors import NotFoundError, ValidationError
from ..base.base_schemas import InsertResult, UpdateResult, DeleteResult
from ..base.utils import parse_object_id
from .schemas import (
    CreateSessionRequest,
    UpdateSessionRequest,
    ApprovalRequest,
    RejectionRequest,
    StatusUpdateRequest,
)
from .utils import transition_fields, parse_status

logger = logging.getLogger(__name__)


def list_sessions(db: DatabaseServices, status: Optional[str], tutor_email: Optional[str]) -> List[Dict]:
    status_filter = parse_status(status) if status else None
    return db.sessions.find_all(status=status_filter, tutor_email=tutor_email)


def list_approved_sessions(db: DatabaseServices) -> List[Dict]:
    return db.sessions.find_all(status=SessionStatus.APPROVED)


def list_tutor_sessions(db: DatabaseServices, tutor_email: str) -> List[Dict]:
    return db.sessions.find_all(tutor_email=tutor_email)


def get_session(db: DatabaseServices, session_id: str) -> Dict:
    session = db.sessions.get(parse_object_id(session_id, "session ID"))
    if not session:
        raise NotFoundError("Session not found")
    return session


def propose_session(db: DatabaseServices, payload: CreateSessionRequest) -> Dict[str, Any]:
    """
    Store a tutor's new session

    The session always starts pending and free; the fee is only set when an
    admin approves it.
    """
    session = StudySession(**payload.model_dump(exclude_none=True))
    result = db.sessions.create(session)
    return InsertResult(
        acknowledged=result.acknowledged,
        insertedId=str(result.inserted_id),
        status=session.status,
        registrationFee=session.registration_fee,
    ).model_dump()


def _move(db: DatabaseServices, session_id: str, target: SessionStatus, fields: Dict[str, Any], message: str):
    result = db.sessions.update_where(
        parse_object_id(session_id, "session ID"),
        fields,
        statuses=allowed_sources(target),
    )
    if result.matched_count == 0:
        raise NotFoundError(message)

    logger.info(f"Session {session_id} moved to {target.value}")
    return result


def update_status(db: DatabaseServices, session_id: str, payload: StatusUpdateRequest) -> Dict[str, str]:
    """Generic status change, restricted to the allowed transitions"""
    target = parse_status(payload.status)
    fields = transition_fields(
        target,
        is_paid=payload.is_paid,
        fee=payload.fee,
        reason=payload.rejection_reason,
        feedback=payload.feedback,
    )
    _move(db, session_id, target, fields, f"Session not found or cannot move to {target.value}")
    return {"message": f"Session updated to {target.value}"}


def approve_session(db: DatabaseServices, session_id: str, payload: ApprovalRequest) -> Dict[str, bool]:
    fields = transition_fields(SessionStatus.APPROVED, is_paid=payload.is_paid, fee=payload.fee)
    _move(db, session_id, SessionStatus.APPROVED, fields, "Session not found or not pending")
    return {"success": True}


def reject_session(db: DatabaseServices, session_id: str, payload: RejectionRequest) -> Dict[str, bool]:
    fields = transition_fields(SessionStatus.REJECTED, reason=payload.reason, feedback=payload.feedback)
    _move(db, session_id, SessionStatus.REJECTED, fields, "Session not found or not pending")
    return {"success": True}


def edit_session(db: DatabaseServices, session_id: str, payload: UpdateSessionRequest) -> Dict[str, Any]:
    """
    Edit a session's own fields; with ``status: pending`` also resubmit a
    rejected session for review
    """
    fields = payload.to_patch()
    status = fields.pop("status", None)
    statuses = None

    if status is not None:
        target = parse_status(status)
        if target is not SessionStatus.PENDING:
            raise ValidationError("Only resubmission to pending is allowed here")
        fields.update(transition_fields(target))
        statuses = allowed_sources(target)
    elif not fields:
        raise ValidationError("No fields to update")
    else:
        fields["updatedAt"] = utc_now()

    result = db.sessions.update_where(parse_object_id(session_id, "session ID"), fields, statuses=statuses)
    if result.matched_count == 0:
        raise NotFoundError("Session not found" if statuses is None else "Session not found or not rejected")

    return UpdateResult(message="Session updated", modifiedCount=result.modified_count).model_dump()


def delete_session(db: DatabaseServices, session_id: str) -> Dict[str, Any]:
    result = db.sessions.delete(parse_object_id(session_id, "session ID"))
    return DeleteResult(acknowledged=result.acknowledged, deletedCount=result.deleted_count).model_dump()
