import re
from dataclasses import dataclass, field
from typing import ClassVar, Optional


@dataclass(frozen=True)
class Name:
    """A contact's display name."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Names should only contain alphanumeric characters and spaces, and it should not be blank"
    )
    # first character must not be a space, so " " alone is rejected
    VALIDATION_REGEX: ClassVar[re.Pattern] = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")

    full_name: str

    def __post_init__(self):
        if not Name.is_valid_name(self.full_name):
            raise ValueError(Name.MESSAGE_CONSTRAINTS)

    @staticmethod
    def is_valid_name(text: str) -> bool:
        return isinstance(text, str) and Name.VALIDATION_REGEX.fullmatch(text) is not None

    def __str__(self) -> str:
        return self.full_name


@dataclass(frozen=True)
class Person:
    name: Name
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    tags: frozenset[str] = field(default_factory=frozenset)

    @staticmethod
    def create(name: str, phone: Optional[str] = None, email: Optional[str] = None,
               address: Optional[str] = None, tags: Optional[list[str]] = None) -> 'Person':
        return Person(
            name=Name(name),
            phone=phone,
            email=email,
            address=address,
            tags=frozenset(tags or ()),
        )

    def is_same_person(self, other: Optional['Person']) -> bool:
        """Two entries describe the same contact when their names match."""
        return other is not None and other.name == self.name
