from typing import Any, ClassVar, Mapping, Union
from pydantic import Field

from domain.entities import Name, Plan, PlanName, PlanDateTime
from domain.exceptions import (
    MESSAGE_PERSON_DOES_NOT_EXIST,
    InvalidFormat,
    MissingField,
    ReferenceNotFound,
    ValidationError,
)
from domain.interfaces import ContactCatalog
from domain.result import Err, Ok, Result
from infrastructure.storage.record_base import StoredRecord

MISSING_FIELD_MESSAGE_FORMAT = "Plan's {} field is missing!"

# persisted key -> name used in MissingField errors and messages
FIELD_DISPLAY_NAMES = {
    "friend": "friend name",
    "planName": "plan name",
    "planDateTime": "plan date-time",
}


class PlanRecord(StoredRecord):
    """
    Serialisable shape of a Plan: ``planName``, ``planDateTime``, ``friend``.

    Field values are taken as stored, whatever their type; a value that is
    not text fails its own check in ``PlanRecordAdapter.convert``, so the
    friend is always checked first.
    """

    RECORD_NAME: ClassVar[str] = "plan record"

    plan_name: Any = Field(default=None, alias="planName")
    plan_date_time: Any = Field(default=None, alias="planDateTime")
    friend: Any = None


def _missing(key: str) -> Err[ValidationError]:
    display_name = FIELD_DISPLAY_NAMES[key]
    return Err(ValidationError(MissingField(display_name), MISSING_FIELD_MESSAGE_FORMAT.format(display_name)))


def _invalid(field_name: str, message: str) -> Err[ValidationError]:
    return Err(ValidationError(InvalidFormat(field_name), message))


class PlanRecordAdapter:
    """Converts between Plan entities and their stored records."""

    @staticmethod
    def from_entity(plan: Plan) -> PlanRecord:
        return PlanRecord(
            plan_name=str(plan.plan_name),
            plan_date_time=str(plan.plan_date_time),
            friend=str(plan.friend.name),
        )

    @staticmethod
    def convert(record: Union[PlanRecord, Mapping[str, Any]], catalog: ContactCatalog) -> Result[Plan, ValidationError]:
        """
        Rebuild a Plan from its record, resolving the friend against ``catalog``.

        Checks run in a fixed order and stop at the first failure: the friend
        (present, well-formed, known), then the plan name, then the date-time.

        Returns:
            Ok(plan), or Err(ValidationError) describing the first failure
        """
        if not isinstance(record, PlanRecord):
            try:
                record = PlanRecord.from_raw(record)
            except ValidationError as e:
                return Err(e)

        if record.friend is None:
            return _missing("friend")
        if not Name.is_valid_name(record.friend):
            return _invalid("name", Name.MESSAGE_CONSTRAINTS)
        friend_name = Name(record.friend)
        friend = catalog.find_contact(friend_name) if catalog.has_contact(friend_name) else None
        if friend is None:
            return Err(ValidationError(ReferenceNotFound("person"), MESSAGE_PERSON_DOES_NOT_EXIST))

        if record.plan_name is None:
            return _missing("planName")
        if not PlanName.is_valid_plan_name(record.plan_name):
            return _invalid("plan name", PlanName.MESSAGE_CONSTRAINTS)
        plan_name = PlanName(record.plan_name)

        if record.plan_date_time is None:
            return _missing("planDateTime")
        try:
            plan_date_time = PlanDateTime.parse(record.plan_date_time)
        except ValueError:
            return _invalid("plan date-time", PlanDateTime.MESSAGE_CONSTRAINTS)

        return Ok(Plan(plan_name=plan_name, plan_date_time=plan_date_time, friend=friend))

    @staticmethod
    def to_entity(record: Union[PlanRecord, Mapping[str, Any]], catalog: ContactCatalog) -> Plan:
        """
        Same as ``convert`` but raises instead of returning Err.

        Raises:
            ValidationError: if the record breaks any of the plan's constraints
        """
        return PlanRecordAdapter.convert(record, catalog).unwrap()
