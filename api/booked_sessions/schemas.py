from typing import Optional
from pydantic import BaseModel, Field

from ..base.base_schemas import RequestModel


class BookSessionRequest(RequestModel):
    """Request body for POST /bookedSessions"""
    student_email: str = Field(..., min_length=1)
    session_id: str = Field(..., min_length=1)
    tutor_email: str = Field(..., min_length=1)
    session_title: Optional[str] = None
    student_name: Optional[str] = None
    registration_fee: Optional[float] = Field(None, ge=0, allow_inf_nan=False)


# RESPONSE SCHEMAS

class BookingStatus(BaseModel):
    booked: bool
