import re
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from .person import Person


@dataclass(frozen=True)
class PlanName:
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Plan names should only contain alphanumeric characters and spaces, and it should not be blank"
    )
    VALIDATION_REGEX: ClassVar[re.Pattern] = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")

    value: str

    def __post_init__(self):
        if not PlanName.is_valid_plan_name(self.value):
            raise ValueError(PlanName.MESSAGE_CONSTRAINTS)

    @staticmethod
    def is_valid_plan_name(text: str) -> bool:
        return isinstance(text, str) and PlanName.VALIDATION_REGEX.fullmatch(text) is not None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PlanDateTime:
    """
    Date and time of a plan, stored with minute precision.

    The textual form is ``yyyy-MM-dd HH:mm`` (e.g. ``2024-12-25 18:00``).
    Parsing is strict: the text has to be exactly what ``str()`` would
    produce for the parsed value.
    """

    FORMAT: ClassVar[str] = "%Y-%m-%d %H:%M"
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Plan date-time should be in the format yyyy-MM-dd HH:mm and be a valid calendar date-time"
    )

    value: datetime

    def __post_init__(self):
        # drop seconds so equality matches what survives a save/load cycle
        object.__setattr__(self, "value", self.value.replace(second=0, microsecond=0))

    @staticmethod
    def parse(text: str) -> 'PlanDateTime':
        """
        Parse ``text`` into a PlanDateTime.

        Raises:
            ValueError: if the text is not a valid ``yyyy-MM-dd HH:mm`` date-time
        """
        if not isinstance(text, str):
            raise ValueError(PlanDateTime.MESSAGE_CONSTRAINTS)
        try:
            parsed = datetime.strptime(text, PlanDateTime.FORMAT)
        except ValueError:
            raise ValueError(PlanDateTime.MESSAGE_CONSTRAINTS) from None
        # strptime accepts "2024-1-5 8:00"; only the zero-padded form is allowed
        if PlanDateTime._render(parsed) != text:
            raise ValueError(PlanDateTime.MESSAGE_CONSTRAINTS)
        return PlanDateTime(parsed)

    @staticmethod
    def _render(value: datetime) -> str:
        # strftime("%Y") does not pad years below 1000 on every platform
        return f"{value.year:04d}-{value:%m-%d %H:%M}"

    def __str__(self) -> str:
        return PlanDateTime._render(self.value)


@dataclass(frozen=True)
class Plan:
    plan_name: PlanName
    plan_date_time: PlanDateTime
    friend: Person

    @staticmethod
    def create(plan_name: str, plan_date_time: str, friend: Person) -> 'Plan':
        return Plan(
            plan_name=PlanName(plan_name),
            plan_date_time=PlanDateTime.parse(plan_date_time),
            friend=friend,
        )
