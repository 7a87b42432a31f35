from typing_extensions import Protocol
from typing import Any, Optional


class AddressBookStorage(Protocol):
    """Where the serialised address book document lives."""

    def read_raw(self) -> Optional[dict[str, Any]]:
        """
        Read the stored document.

        Returns:
            The decoded document, or None when nothing has been stored yet

        Raises:
            DataLoadingError: if the stored data cannot be decoded
        """
        ...

    def write_raw(self, data: dict[str, Any]) -> None:
        """Replace the stored document with ``data``."""
        ...
