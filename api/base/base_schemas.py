# api/base/base_schemas.py
from typing import ClassVar, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RequestModel(BaseModel):
    """
    Base for request bodies

    Clients send camelCase keys (``tutorEmail``); fields are snake_case.
    Strings are trimmed and unknown keys (``_id`` included) are dropped.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    # fields an explicit null cannot clear on update
    not_clearable: ClassVar[Tuple[str, ...]] = ()

    def to_patch(self) -> dict:
        """
        Only the fields the client actually sent, keyed by stored name

        An explicit ``null`` clears an optional field; for the names in
        ``not_clearable`` it is ignored.
        """
        patch = self.model_dump(by_alias=True, exclude_unset=True)
        fields = type(self).model_fields
        for name in self.not_clearable:
            key = fields[name].alias or name
            if key in patch and patch[key] is None:
                del patch[key]
        return patch


class MessageResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    message: str = Field(..., description="Human-friendly message")


class InsertResult(BaseModel):
    """Shape of a MongoDB insert acknowledgement"""
    model_config = ConfigDict(extra="allow")

    acknowledged: bool = True
    insertedId: Optional[str] = Field(None, description="Id of the inserted document")


class UpdateResult(MessageResponse):
    modifiedCount: int = 0


class DeleteResult(BaseModel):
    acknowledged: bool = True
    deletedCount: int = 0
