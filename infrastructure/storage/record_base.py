"""
Base model for the flat records the address book is stored as.

Records are pydantic models: they check the *shape* a model declares for its
fields (text, list of text), nothing more. Domain rules are applied by the
adapters when a record is turned back into an entity.
"""
from typing import Any, ClassVar
from pydantic import BaseModel, ConfigDict, ValidationError as PydanticValidationError

from domain.exceptions import InvalidFormat, ValidationError


class StoredRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    # record key -> (field name reported in InvalidFormat, message)
    INVALID_FIELDS: ClassVar[dict[str, tuple[str, str]]] = {}
    RECORD_NAME: ClassVar[str] = "record"

    @classmethod
    def from_raw(cls, raw: Any):
        """
        Build a record from decoded JSON.

        Raises:
            ValidationError: InvalidFormat of the first field with the wrong
                shape, or of the whole record when ``raw`` is not an object
        """
        try:
            return cls.model_validate(raw)
        except PydanticValidationError as e:
            loc = e.errors()[0]["loc"]
            key = loc[0] if loc else None
            if key in cls.INVALID_FIELDS:
                field_name, message = cls.INVALID_FIELDS[key]
                raise ValidationError(InvalidFormat(field_name), message) from e
            raise ValidationError(InvalidFormat(cls.RECORD_NAME)) from e

    def to_dict(self) -> dict[str, Any]:
        """Serialisable form, keyed by the persisted field names."""
        return self.model_dump(by_alias=True, exclude_none=True)
