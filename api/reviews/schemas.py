from typing import Optional
from pydantic import Field

from ..base.base_schemas import RequestModel
from models.review_models import MIN_RATING, MAX_RATING


class CreateReviewRequest(RequestModel):
    """Request body for POST /reviews; numeric strings are accepted for rating"""
    session_id: str = Field(..., min_length=1)
    student_email: str = Field(..., min_length=1)
    rating: float = Field(..., ge=MIN_RATING, le=MAX_RATING, allow_inf_nan=False)
    student_name: Optional[str] = None
    comment: Optional[str] = None
