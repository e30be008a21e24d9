"""
Materials Service - materials collection
"""
from typing import Dict, List, Optional
from bson import ObjectId
from pymongo import ASCENDING

from .base import BaseMongoService
from models.material_models import Material


class MaterialsService(BaseMongoService):
    """Service for materials collection"""

    indexes = [
        ([("studySessionId", ASCENDING)], {}),
        ([("tutorEmail", ASCENDING)], {}),
    ]

    def __init__(self, store, collection_name: str = "materials"):
        super().__init__(store, collection_name)

    def create(self, material: Material):
        return self.collection.insert_one(material.to_mongo())

    def find_all(self, tutor_email: Optional[str] = None) -> List[Dict]:
        query = {"tutorEmail": tutor_email} if tutor_email else {}
        return list(self.collection.find(query))

    def list_by_session(self, session_id: str) -> List[Dict]:
        return list(self.collection.find({"studySessionId": session_id}))

    def update(self, material_id: ObjectId, fields: Dict):
        return self.collection.update_one({"_id": material_id}, {"$set": fields})

    def delete(self, material_id: ObjectId):
        return self.collection.delete_one({"_id": material_id})
