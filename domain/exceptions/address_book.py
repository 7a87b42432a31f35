"""Address-book exceptions."""

from .base import DomainException

MESSAGE_PERSON_DOES_NOT_EXIST = "The person specified does not exist in the address book"


class DuplicatePersonError(DomainException):
    """Raised when a person with the same name is already in the address book."""

    def __init__(self, name: str):
        super().__init__(
            message=f"This person already exists in the address book: {name}",
            code="DUPLICATE_PERSON",
        )
        self.name = name


class PersonNotFoundError(DomainException):
    """Raised when an operation refers to a person the address book does not hold."""

    def __init__(self, name: str):
        super().__init__(
            message=f"{MESSAGE_PERSON_DOES_NOT_EXIST}: {name}",
            code="PERSON_NOT_FOUND",
        )
        self.name = name


class DataLoadingError(DomainException):
    """Raised when stored data cannot be turned into an address book."""

    def __init__(self, message: str):
        super().__init__(message=message, code="DATA_LOADING_ERROR")
