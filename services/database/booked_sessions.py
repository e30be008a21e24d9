"""
Booked Sessions Service - bookedSessions collection
"""
from typing import Dict, List, Optional
from bson import ObjectId
from pymongo import ASCENDING
import logging

from .base import BaseMongoService
from models.booking_models import BookedSession

logger = logging.getLogger(__name__)


class BookedSessionsService(BaseMongoService):
    """Service for bookedSessions collection"""

    indexes = [([("studentEmail", ASCENDING), ("sessionId", ASCENDING)], {"unique": True})]

    def __init__(self, store, collection_name: str = "bookedSessions"):
        super().__init__(store, collection_name)

    def book(self, booking: BookedSession) -> Optional[ObjectId]:
        """
        Insert the booking unless the student already booked the session

        Returns:
            Id of the new booking, or None for a duplicate
        """
        key = booking.key()
        document = booking.to_mongo()
        for field in key:
            document.pop(field)

        result = self.collection.update_one(key, {"$setOnInsert": document}, upsert=True)
        if result.upserted_id is None:
            logger.info(f"Duplicate booking {key}")
            return None
        return result.upserted_id

    def find_all(self, student_email: Optional[str] = None) -> List[Dict]:
        query = {"studentEmail": student_email} if student_email else {}
        return list(self.collection.find(query))

    def is_booked(self, session_id: str, student_email: str) -> bool:
        query = {"sessionId": session_id, "studentEmail": student_email}
        return self.collection.find_one(query, {"_id": 1}) is not None
