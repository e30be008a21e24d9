# api/reviews/usecases.py
from typing import Any, Dict, List
import logging

from services.database import DatabaseServices
from shared.locks import KeyedLock
from models.review_models import Review
from ..base.errors import NotFoundError
from ..base.base_schemas import InsertResult
from ..base.utils import parse_object_id
from .schemas import CreateReviewRequest

logger = logging.getLogger(__name__)

# one writer per session while a review is stored and the average rewritten
rating_locks = KeyedLock()


def list_session_reviews(db: DatabaseServices, session_id: str) -> List[Dict]:
    return db.reviews.list_by_session(session_id)


def submit_review(db: DatabaseServices, payload: CreateReviewRequest) -> Dict[str, Any]:
    """
    Store a review and refresh the session's averageRating

    The average is recomputed from every review of the session rather than
    adjusted incrementally. If the average write fails the review stays
    stored; the next review recomputes from scratch.
    """
    session_oid = parse_object_id(payload.session_id, "session ID")
    if not db.sessions.exists(session_oid):
        raise NotFoundError("Session not found")

    review = Review(**payload.model_dump(exclude_none=True))

    with rating_locks.hold(payload.session_id):
        result = db.reviews.create(review)
        average = db.reviews.average_for_session(payload.session_id)
        db.sessions.set_average_rating(session_oid, average)

    logger.info(f"Review added to session {payload.session_id}, average now {average}")
    return InsertResult(
        acknowledged=result.acknowledged,
        insertedId=str(result.inserted_id),
        averageRating=average,
    ).model_dump()
