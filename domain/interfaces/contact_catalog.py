from typing_extensions import Protocol
from typing import Optional, Sequence
from domain.entities import Name, Person


class ContactCatalog(Protocol):
    """Read-only view of the known contacts, looked up by display name."""

    def has_contact(self, name: Name) -> bool: ...
    def find_contact(self, name: Name) -> Optional[Person]: ...
    def list_contacts(self) -> Sequence[Person]: ...
