# models/review_models.py
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional
from datetime import datetime
from pydantic import Field

from .base import MongoDocument, utc_now

MIN_RATING = 0
MAX_RATING = 5


class Review(MongoDocument):
    session_id: str
    student_email: str
    rating: float = Field(..., ge=MIN_RATING, le=MAX_RATING)
    student_name: Optional[str] = None
    comment: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)


def round_rating(value: float) -> float:
    """Round the exact binary value to one decimal, halves going up (4.25 -> 4.3, 4.35 -> 4.3)"""
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def average_rating(ratings: Iterable[float]) -> Optional[float]:
    """Mean of the ratings rounded to one decimal, None when there are none"""
    values = list(ratings)
    if not values:
        return None
    return round_rating(sum(values) / len(values))
