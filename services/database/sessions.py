"""
Sessions Service - sessions collection
"""
from typing import Dict, List, Optional
from bson import ObjectId
from pymongo import ASCENDING
import logging

from .base import BaseMongoService
from models.session_models import SessionStatus, StudySession, SESSION_DETAIL_PROJECTION

logger = logging.getLogger(__name__)


class SessionsService(BaseMongoService):
    """Service for sessions collection"""

    indexes = [
        ([("status", ASCENDING)], {}),
        ([("tutorEmail", ASCENDING)], {}),
    ]

    def __init__(self, store, collection_name: str = "sessions"):
        super().__init__(store, collection_name)

    def find_all(self, status: Optional[SessionStatus] = None, tutor_email: Optional[str] = None) -> List[Dict]:
        query = {}
        if status is not None:
            query["status"] = status.value
        if tutor_email:
            query["tutorEmail"] = tutor_email
        return list(self.collection.find(query))

    def get(self, session_id: ObjectId) -> Optional[Dict]:
        return self.collection.find_one({"_id": session_id}, SESSION_DETAIL_PROJECTION)

    def exists(self, session_id: ObjectId) -> bool:
        return self.collection.find_one({"_id": session_id}, {"_id": 1}) is not None

    def create(self, session: StudySession):
        result = self.collection.insert_one(session.to_mongo())
        logger.info(f"Session '{session.title}' proposed by {session.tutor_email}")
        return result

    def update_where(self, session_id: ObjectId, fields: Dict, statuses: Optional[List[str]] = None):
        """
        ``$set`` fields on the session, only if its current status is one of
        ``statuses`` (any status when None). Null values clear the field.
        """
        query = {"_id": session_id}
        if statuses is not None:
            query["status"] = {"$in": statuses}
        return self.collection.update_one(query, {"$set": fields})

    def set_average_rating(self, session_id: ObjectId, average: Optional[float]):
        return self.collection.update_one({"_id": session_id}, {"$set": {"averageRating": average}})

    def delete(self, session_id: ObjectId):
        result = self.collection.delete_one({"_id": session_id})
        logger.info(f"Deleted session {session_id} ({result.deleted_count})")
        return result
