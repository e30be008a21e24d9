from typing import Optional
from pydantic import Field

from ..base.base_schemas import RequestModel


class CreateNoteRequest(RequestModel):
    email: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    description: Optional[str] = None


class UpdateNoteRequest(RequestModel):
    not_clearable = ("title",)

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
