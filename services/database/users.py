"""
Users Service - users collection
"""
import re
from typing import Dict, List, Optional
from bson import ObjectId
from pymongo import ASCENDING, ReturnDocument
import logging

from .base import BaseMongoService
from models.base import utc_now
from models.user_models import (
    Role,
    UserDocument,
    TutorRequest,
    PENDING_TUTOR_FIELDS,
    PENDING_TUTOR_PROJECTION,
)

logger = logging.getLogger(__name__)


class UsersService(BaseMongoService):
    """Service for users collection"""

    indexes = [([("email", ASCENDING)], {"unique": True})]

    def __init__(self, store, collection_name: str = "users"):
        super().__init__(store, collection_name)

    def search(self, text: Optional[str] = None) -> List[Dict]:
        """Users whose name or email contains ``text`` (case-insensitive)"""
        query = {}
        if text:
            pattern = re.escape(text)
            query = {
                "$or": [
                    {"name": {"$regex": pattern, "$options": "i"}},
                    {"email": {"$regex": pattern, "$options": "i"}},
                ]
            }
        return list(self.collection.find(query))

    def search_by_email(self, text: str, limit: int = 50) -> List[Dict]:
        query = {"email": {"$regex": re.escape(text or ""), "$options": "i"}}
        return list(self.collection.find(query).limit(limit))

    def get_by_email(self, email: str) -> Optional[Dict]:
        return self.collection.find_one({"email": email})

    def get_by_id(self, user_id: ObjectId) -> Optional[Dict]:
        return self.collection.find_one({"_id": user_id})

    def create_if_absent(self, user: UserDocument) -> Optional[ObjectId]:
        """
        Insert ``user`` unless its email is already registered

        Single upsert so two concurrent signups cannot both insert.

        Returns:
            Id of the new document, or None when the email existed
        """
        document = user.to_mongo()
        email = document.pop("email")
        result = self.collection.update_one(
            {"email": email},
            {"$setOnInsert": document},
            upsert=True,
        )
        if result.upserted_id is None:
            logger.info(f"Signup skipped, '{email}' already registered")
            return None

        logger.info(f"Created user '{email}'")
        return result.upserted_id

    def set_role(self, user_id: ObjectId, role: Role):
        return self.collection.update_one(
            {"_id": user_id},
            {"$set": {"role": role.value, "updatedAt": utc_now()}},
        )

    def request_tutor(self, email: str, request: TutorRequest) -> Optional[Dict]:
        """Flag the user as waiting for tutor approval; None if email unknown"""
        fields = request.to_mongo()
        fields["updatedAt"] = utc_now()
        return self.collection.find_one_and_update(
            {"email": email},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )

    def list_pending_tutors(self) -> List[Dict]:
        return list(self.collection.find({"pendingTutor": True}, PENDING_TUTOR_PROJECTION))

    def resolve_tutor_request(self, user_id: ObjectId, role: Role, **extra) -> Optional[Dict]:
        """
        Close a pending tutor request by setting ``role`` and dropping the
        pending fields. None when the user has no pending request.
        """
        fields = {"role": role.value, "updatedAt": utc_now(), **extra}
        return self.collection.find_one_and_update(
            {"_id": user_id, "pendingTutor": True},
            {
                "$set": fields,
                "$unset": {field: "" for field in PENDING_TUTOR_FIELDS},
            },
            return_document=ReturnDocument.AFTER,
        )
