from .base import DomainException
from .validation import (
    ValidationError,
    ValidationErrorKind,
    MissingField,
    InvalidFormat,
    ReferenceNotFound,
)
from .address_book import (
    MESSAGE_PERSON_DOES_NOT_EXIST,
    DuplicatePersonError,
    PersonNotFoundError,
    DataLoadingError,
)

__all__ = [
    "MESSAGE_PERSON_DOES_NOT_EXIST",
    "DomainException",
    "ValidationError",
    "ValidationErrorKind",
    "MissingField",
    "InvalidFormat",
    "ReferenceNotFound",
    "DuplicatePersonError",
    "PersonNotFoundError",
    "DataLoadingError",
]
