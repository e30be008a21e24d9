# models/base.py
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MongoDocument(BaseModel):
    """
    Base for documents persisted in MongoDB

    Attributes are snake_case in Python and camelCase in the collection,
    matching what the web client reads.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
    )

    def to_mongo(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
