"""
JSON file storage for the address book.

The file holds a single object:

    {
      "persons": [{"name": "Alice", "phone": "91234567", "tags": ["friends"]}],
      "plans": [{"planName": "Dinner", "planDateTime": "2024-12-25 18:00", "friend": "Alice"}]
    }
"""
import json
from pathlib import Path
from typing import Any, Optional, Union

from domain.exceptions import DataLoadingError
from domain.interfaces import AddressBookStorage


class JsonAddressBookStorage(AddressBookStorage):
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def read_raw(self) -> Optional[dict[str, Any]]:
        if not self.path.exists():
            return None
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DataLoadingError(f"Could not read address book file {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise DataLoadingError(f"Address book file {self.path} must contain a JSON object")
        return data

    def write_raw(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
