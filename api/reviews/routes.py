# api/reviews/routes.py
from flask import jsonify

from services.database import get_db
from ..base.utils import parse_body
from .schemas import CreateReviewRequest
from .usecases import list_session_reviews, submit_review
from . import reviews_bp


@reviews_bp.route('/sessions/<session_id>/reviews', methods=['GET'])
def get_session_reviews(session_id):
    return jsonify(list_session_reviews(get_db(), session_id))


@reviews_bp.route('/reviews', methods=['POST'])
def create_review():
    """
    Student reviews a session

    Request Example:
        {"sessionId": "665f...", "studentEmail": "s@x.com", "rating": 4, "comment": "Great"}

    Response Example:
        {"acknowledged": true, "insertedId": "6660...", "averageRating": 4.5}
    """
    payload = parse_body(CreateReviewRequest)
    return jsonify(submit_review(get_db(), payload))
