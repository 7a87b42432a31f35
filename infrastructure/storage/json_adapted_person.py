from typing import Any, ClassVar, Mapping, Optional, Union
from pydantic import Field

from domain.entities import Name, Person
from domain.exceptions import InvalidFormat, MissingField, ValidationError
from infrastructure.storage.record_base import StoredRecord

MISSING_FIELD_MESSAGE_FORMAT = "Person's {} field is missing!"


class PersonRecord(StoredRecord):
    INVALID_FIELDS: ClassVar[dict[str, tuple[str, str]]] = {
        "name": ("name", Name.MESSAGE_CONSTRAINTS),
        "phone": ("phone", "Phone should be text"),
        "email": ("email", "Email should be text"),
        "address": ("address", "Address should be text"),
        "tags": ("tags", "Tags should be a list of text"),
    }
    RECORD_NAME: ClassVar[str] = "person record"

    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    tags: list[str] = Field(default_factory=list)


class PersonRecordAdapter:
    """Converts between Person entities and their stored records."""

    @staticmethod
    def from_entity(person: Person) -> PersonRecord:
        return PersonRecord(
            name=str(person.name),
            phone=person.phone,
            email=person.email,
            address=person.address,
            tags=sorted(person.tags),
        )

    @staticmethod
    def to_entity(record: Union[PersonRecord, Mapping[str, Any]]) -> Person:
        """
        Raises:
            ValidationError: if the name is missing or malformed, or the record
                has the wrong shape
        """
        if not isinstance(record, PersonRecord):
            record = PersonRecord.from_raw(record)
        if record.name is None:
            raise ValidationError(MissingField("name"), MISSING_FIELD_MESSAGE_FORMAT.format("name"))
        if not Name.is_valid_name(record.name):
            raise ValidationError(InvalidFormat("name"), Name.MESSAGE_CONSTRAINTS)
        return Person(
            name=Name(record.name),
            phone=record.phone,
            email=record.email,
            address=record.address,
            tags=frozenset(record.tags),
        )
