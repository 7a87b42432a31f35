"""
Validation errors raised while turning stored records back into entities.

The error kind is a closed set of three variants. Each variant is a frozen
dataclass so callers can compare kinds directly:

    except ValidationError as e:
        if e.kind == MissingField("plan name"):
            ...
"""
from dataclasses import dataclass
from typing import Optional, Union

from .base import DomainException


@dataclass(frozen=True)
class MissingField:
    """A required field is absent from the record."""
    field_name: str


@dataclass(frozen=True)
class InvalidFormat:
    """A field is present but its text breaks the value type's rules."""
    field_name: str


@dataclass(frozen=True)
class ReferenceNotFound:
    """The record points at an entity that is not in the catalog."""
    entity_type: str


ValidationErrorKind = Union[MissingField, InvalidFormat, ReferenceNotFound]

_CODES = {
    MissingField: "MISSING_FIELD",
    InvalidFormat: "INVALID_FORMAT",
    ReferenceNotFound: "REFERENCE_NOT_FOUND",
}


class ValidationError(DomainException):
    """Raised when a record cannot be converted into a valid entity."""

    def __init__(self, kind: ValidationErrorKind, message: Optional[str] = None):
        super().__init__(
            message=message or _default_message(kind),
            code=_CODES[type(kind)],
        )
        self.kind = kind

    def __repr__(self) -> str:
        return f"ValidationError(kind={self.kind!r}, message={self.message!r})"


def _default_message(kind: ValidationErrorKind) -> str:
    if isinstance(kind, MissingField):
        return f"The {kind.field_name} field is missing!"
    if isinstance(kind, InvalidFormat):
        return f"The {kind.field_name} field has an invalid format"
    return f"The {kind.entity_type} specified does not exist"
