# api/base/utils.py
from typing import Optional, Type, TypeVar

from bson import ObjectId
from flask import request
from pydantic import BaseModel, ValidationError as PydanticValidationError

from .errors import ValidationError

M = TypeVar("M", bound=BaseModel)


def format_validation_error(error: PydanticValidationError) -> str:
    """Turn the first pydantic error into a one-line message"""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {first.get('msg')}" if location else first.get("msg", "Invalid request")


def parse_body(model: Type[M], message: Optional[str] = None) -> M:
    """
    Validate the JSON body of the current request against ``model``

    Args:
        model: pydantic model describing the body
        message: message to report instead of pydantic's own

    Raises:
        ValidationError: body missing, not JSON, or not matching the model
    """
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValidationError(message or "Request body must be a JSON object")

    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(message or format_validation_error(e)) from e


def parse_object_id(value: str, label: str = "ID") -> ObjectId:
    """Convert a path parameter into an ObjectId or fail with 400"""
    if not ObjectId.is_valid(value):
        raise ValidationError(f"Invalid {label}")
    return ObjectId(value)


def query_param(name: str) -> Optional[str]:
    """Stripped query string value, None when absent or blank"""
    value = (request.args.get(name) or "").strip()
    return value or None
