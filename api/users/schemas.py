from typing import Optional
from pydantic import Field

from ..base.base_schemas import RequestModel

# REQUEST SCHEMAS

class CreateUserRequest(RequestModel):
    """Request body for POST /users"""
    email: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    photo: str = Field(..., min_length=1)


class UpdateRoleRequest(RequestModel):
    """Request body for PATCH /users/<id>/role (checked against Role in usecases)"""
    role: Optional[str] = None


class TutorRequestBody(RequestModel):
    """Request body for PATCH /users/request-tutor"""
    email: str = Field(..., min_length=1)
    reason: Optional[str] = ""
