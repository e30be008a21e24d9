"""
Reviews Service - reviews collection
"""
from typing import Dict, List, Optional
from pymongo import ASCENDING, DESCENDING

from .base import BaseMongoService
from models.review_models import Review, round_rating


class ReviewsService(BaseMongoService):
    """Service for reviews collection"""

    indexes = [([("sessionId", ASCENDING)], {})]

    def __init__(self, store, collection_name: str = "reviews"):
        super().__init__(store, collection_name)

    def list_by_session(self, session_id: str) -> List[Dict]:
        return list(self.collection.find({"sessionId": session_id}).sort("createdAt", DESCENDING))

    def create(self, review: Review):
        return self.collection.insert_one(review.to_mongo())

    def average_for_session(self, session_id: str) -> Optional[float]:
        """Mean rating of the session's reviews, rounded to one decimal"""
        pipeline = [
            {"$match": {"sessionId": session_id}},
            {"$group": {"_id": "$sessionId", "average": {"$avg": "$rating"}}},
        ]
        rows = list(self.collection.aggregate(pipeline))
        if not rows or rows[0].get("average") is None:
            return None
        return round_rating(rows[0]["average"])
