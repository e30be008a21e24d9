from typing import Optional
from pydantic import Field

from ..base.base_schemas import RequestModel


class MaterialContent(RequestModel):
    """Fields a tutor may change after upload"""
    not_clearable = ("title",)
    title: Optional[str] = Field(None, min_length=1)
    image_url: Optional[str] = None
    resource_link: Optional[str] = None
    description: Optional[str] = None


class CreateMaterialRequest(MaterialContent):
    """Request body for POST /materials"""
    title: str = Field(..., min_length=1)
    study_session_id: str = Field(..., min_length=1)
    tutor_email: str = Field(..., min_length=1)


class UpdateMaterialRequest(MaterialContent):
    """Request body for PUT /materials/<id>; ids and owner cannot be changed"""
