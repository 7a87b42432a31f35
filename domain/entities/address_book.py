from typing import Iterable, Optional, Sequence

from domain.exceptions import DuplicatePersonError, PersonNotFoundError
from .person import Name, Person
from .plan import Plan


def _key(name) -> str:
    return name.full_name if isinstance(name, Name) else name


class AddressBook:
    """
    Contacts and the plans made with them.

    Persons are kept in insertion order and indexed by name, so a name
    identifies at most one person. Every plan's friend must be in the book.
    Implements the ContactCatalog port.
    """

    def __init__(self, persons: Iterable[Person] = (), plans: Iterable[Plan] = ()):
        self._persons: list[Person] = []
        self._index: dict[str, Person] = {}
        self._plans: list[Plan] = []
        for person in persons:
            self.add_person(person)
        for plan in plans:
            self.add_plan(plan)

    # ContactCatalog
    def has_contact(self, name) -> bool:
        return _key(name) in self._index

    def find_contact(self, name) -> Optional[Person]:
        return self._index.get(_key(name))

    def list_contacts(self) -> Sequence[Person]:
        return tuple(self._persons)

    def add_person(self, person: Person) -> None:
        key = _key(person.name)
        if person.is_same_person(self._index.get(key)):
            raise DuplicatePersonError(key)
        self._persons.append(person)
        self._index[key] = person

    def add_plan(self, plan: Plan) -> None:
        if not self.has_contact(plan.friend.name):
            raise PersonNotFoundError(_key(plan.friend.name))
        self._plans.append(plan)

    def list_plans(self) -> Sequence[Plan]:
        return tuple(self._plans)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._persons == other._persons and self._plans == other._plans
