from typing import Optional, Union
from pydantic import Field

from ..base.base_schemas import RequestModel

# REQUEST SCHEMAS

class SessionFields(RequestModel):
    """Editable, tutor-owned fields of a study session"""
    not_clearable = ("title",)
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    registration_start: Optional[str] = None
    registration_end: Optional[str] = None
    class_start: Optional[str] = None
    class_end: Optional[str] = None
    duration: Optional[Union[float, str]] = None


class CreateSessionRequest(SessionFields):
    """
    Request body for POST /sessions

    ``status`` and ``registrationFee`` are not accepted from the client.
    """
    title: str = Field(..., min_length=1)
    tutor_name: str = Field(..., min_length=1)
    tutor_email: str = Field(..., min_length=1)


class UpdateSessionRequest(SessionFields):
    """Request body for PATCH /sessions/<id> (edit and/or resubmit)"""
    status: Optional[str] = None


class ApprovalRequest(RequestModel):
    is_paid: bool = False
    fee: Optional[float] = Field(None, ge=0, allow_inf_nan=False)


class RejectionRequest(RequestModel):
    reason: Optional[str] = None
    feedback: Optional[str] = None


class StatusUpdateRequest(ApprovalRequest):
    """Request body for PATCH /sessions/<id>/status"""
    status: Optional[str] = None
    rejection_reason: Optional[str] = None
    feedback: Optional[str] = None
