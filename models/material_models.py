# models/material_models.py
from typing import Optional
from datetime import datetime
from pydantic import Field

from .base import MongoDocument, utc_now


class Material(MongoDocument):
    """Study material uploaded by a tutor for one session"""
    title: str
    study_session_id: str
    tutor_email: str
    image_url: Optional[str] = None
    resource_link: Optional[str] = None
    description: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)
