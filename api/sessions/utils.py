# api/sessions/utils.py
from typing import Any, Dict, Optional

from models.base import utc_now
from models.session_models import SessionStatus, DEFAULT_REJECTION_REASON
from ..base.errors import ValidationError


def resolve_fee(is_paid: bool, fee: Optional[float]) -> float:
    """Registration fee for an approval: the given fee for paid sessions, else 0"""
    if not is_paid:
        return 0
    if fee is None:
        raise ValidationError("Fee is required for paid sessions")
    return fee


def transition_fields(
    target: SessionStatus,
    *,
    is_paid: bool = False,
    fee: Optional[float] = None,
    reason: Optional[str] = None,
    feedback: Optional[str] = None,
) -> Dict[str, Any]:
    """Fields written when a session moves to ``target``"""
    now = utc_now()
    fields: Dict[str, Any] = {"status": target.value, "updatedAt": now}

    if target is SessionStatus.APPROVED:
        fields["registrationFee"] = resolve_fee(is_paid, fee)
        fields["approvedAt"] = now
    elif target is SessionStatus.REJECTED:
        fields["rejectionReason"] = reason or DEFAULT_REJECTION_REASON
        fields["feedback"] = feedback or ""
        fields["rejectedAt"] = now
    elif target is SessionStatus.PENDING:
        fields["rejectionReason"] = None
        fields["feedback"] = None
        fields["rejectedAt"] = None
    else:
        raise ValueError(f"Unhandled session status: {target}")

    return fields


def parse_status(value: Optional[str]) -> SessionStatus:
    status = SessionStatus.parse(value)
    if status is None:
        raise ValidationError("Invalid status")
    return status
