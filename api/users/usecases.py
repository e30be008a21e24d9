# api/users/usecases.py
from typing import Any, Dict, List, Optional
import logging

from services.database import DatabaseServices
from models.base import utc_now
from models.user_models import Role, UserDocument, TutorRequest
from ..base.errors import NotFoundError, ValidationError
from ..base.base_schemas import InsertResult, MessageResponse, UpdateResult
from ..base.utils import parse_object_id
from .schemas import CreateUserRequest

logger = logging.getLogger(__name__)


def search_users(db: DatabaseServices, text: Optional[str]) -> List[Dict]:
    return db.users.search(text)


def search_users_by_email(db: DatabaseServices, text: Optional[str], limit: int) -> List[Dict]:
    return db.users.search_by_email(text or "", limit=limit)


def get_user_role(db: DatabaseServices, email: str) -> Dict[str, str]:
    user = db.users.get_by_email(email)
    if not user:
        raise NotFoundError("User not found")
    return {"role": user.get("role") or Role.STUDENT.value}


def register_user(db: DatabaseServices, payload: CreateUserRequest) -> Dict[str, Any]:
    """
    Sign a user up as a student

    Signing up with an email that already exists is not an error: the
    existing user is left untouched and ``inserted`` is False.
    """
    user = UserDocument(email=payload.email, name=payload.name, photo=payload.photo)
    inserted_id = db.users.create_if_absent(user)

    if inserted_id is None:
        return MessageResponse(message="User already exists", inserted=False).model_dump()

    return InsertResult(insertedId=str(inserted_id), inserted=True).model_dump()


def change_role(db: DatabaseServices, user_id: str, role_value: Optional[str]) -> Dict[str, Any]:
    if not role_value:
        raise ValidationError("Role is required")
    role = Role.parse(role_value)
    if role is None:
        raise ValidationError("Invalid role")

    result = db.users.set_role(parse_object_id(user_id, "user ID"), role)
    if result.matched_count == 0:
        raise NotFoundError("User not found")

    logger.info(f"User {user_id} role set to {role.value}")
    return UpdateResult(
        message=f"User role updated to {role.value}",
        modifiedCount=result.modified_count,
    ).model_dump()


def request_tutor_role(db: DatabaseServices, email: str, reason: Optional[str]) -> Dict:
    user = db.users.request_tutor(email, TutorRequest(pending_reason=reason or ""))
    if user is None:
        raise NotFoundError("User not found")
    return user


def list_pending_tutor_requests(db: DatabaseServices) -> List[Dict]:
    return db.users.list_pending_tutors()


def approve_tutor_request(db: DatabaseServices, user_id: str) -> Dict:
    user = db.users.resolve_tutor_request(
        parse_object_id(user_id, "user ID"),
        Role.TUTOR,
        approvedAt=utc_now(),
    )
    if user is None:
        raise NotFoundError("No pending request found for this user")

    logger.info(f"Tutor request approved for {user.get('email')}")
    return user


def decline_tutor_request(db: DatabaseServices, user_id: str) -> Dict[str, Any]:
    user = db.users.resolve_tutor_request(parse_object_id(user_id, "user ID"), Role.STUDENT)
    if user is None:
        raise NotFoundError("No pending request found for this user")

    logger.info(f"Tutor request declined for {user.get('email')}")
    return {"message": "Tutor request declined", "user": user}
