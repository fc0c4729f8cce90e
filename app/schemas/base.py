from datetime import datetime, timezone
from typing import Annotated
from pydantic import AfterValidator, BaseModel
from pydantic.alias_generators import to_camel


def as_utc(value: datetime) -> datetime:
    """
    Normalize a datetime to UTC.

    Offsets are converted; naive values are taken to be UTC already
    (SQLite hands timestamps back without tzinfo).
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# Datetime that is always timezone-aware UTC, on the way in and out
UtcDateTime = Annotated[datetime, AfterValidator(as_utc)]


class CamelModel(BaseModel):
    """
    Base schema exposing fields in camelCase on the wire
    (processo_seletivo_id <-> processoSeletivoId).

    Input accepts both spellings.
    """

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True  # Allows conversion from SQLAlchemy models
