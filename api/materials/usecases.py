# api/materials/usecases.py
from typing import Any, Dict, List, Optional

from services.database import DatabaseServices
from models.base import utc_now
from models.material_models import Material
from models.user_models import Role
from ..base.errors import NotFoundError, ValidationError
from ..base.base_schemas import InsertResult, UpdateResult, DeleteResult
from ..base.utils import parse_object_id
from .schemas import CreateMaterialRequest, UpdateMaterialRequest


def upload_material(db: DatabaseServices, payload: CreateMaterialRequest) -> Dict[str, Any]:
    result = db.materials.create(Material(**payload.model_dump(exclude_none=True)))
    return InsertResult(acknowledged=result.acknowledged, insertedId=str(result.inserted_id)).model_dump()


def list_materials(db: DatabaseServices, email: Optional[str], role: Optional[str]) -> List[Dict]:
    """
    Tutors see their own uploads, admins (or callers without a role) see all
    """
    if role is None:
        return db.materials.find_all()

    parsed = Role.parse(role)
    if parsed is Role.TUTOR:
        if not email:
            raise ValidationError("Email is required for tutor materials")
        return db.materials.find_all(tutor_email=email)
    if parsed is Role.ADMIN:
        return db.materials.find_all()

    raise ValidationError("Invalid role")


def list_session_materials(db: DatabaseServices, session_id: str) -> List[Dict]:
    return db.materials.list_by_session(session_id)


def update_material(db: DatabaseServices, material_id: str, payload: UpdateMaterialRequest) -> Dict[str, Any]:
    oid = parse_object_id(material_id, "material ID")
    fields = payload.to_patch()
    if not fields:
        raise ValidationError("No fields to update")
    fields["updatedAt"] = utc_now()

    result = db.materials.update(oid, fields)
    if result.matched_count == 0:
        raise NotFoundError("Material not found")

    return UpdateResult(message="Material updated", modifiedCount=result.modified_count).model_dump()


def delete_material(db: DatabaseServices, material_id: str) -> Dict[str, Any]:
    result = db.materials.delete(parse_object_id(material_id, "material ID"))
    return DeleteResult(acknowledged=result.acknowledged, deletedCount=result.deleted_count).model_dump()
