"""
Notes Service - notes collection
"""
from typing import Dict, List, Optional
from bson import ObjectId
from pymongo import ASCENDING, DESCENDING

from .base import BaseMongoService
from models.note_models import Note


class NotesService(BaseMongoService):
    """Service for notes collection"""

    indexes = [([("email", ASCENDING), ("createdAt", DESCENDING)], {})]

    def __init__(self, store, collection_name: str = "notes"):
        super().__init__(store, collection_name)

    def create(self, note: Note):
        return self.collection.insert_one(note.to_mongo())

    def list_for_owner(self, email: str) -> List[Dict]:
        return list(self.collection.find({"email": email}).sort("createdAt", DESCENDING))

    @staticmethod
    def _owned(note_id: ObjectId, email: Optional[str]) -> Dict:
        query = {"_id": note_id}
        if email:
            query["email"] = email
        return query

    def update(self, note_id: ObjectId, fields: Dict, email: Optional[str] = None):
        return self.collection.update_one(self._owned(note_id, email), {"$set": fields})

    def delete(self, note_id: ObjectId, email: Optional[str] = None):
        return self.collection.delete_one(self._owned(note_id, email))
