import time
from typing import Any, Optional
from domain.entities import AddressBook
from domain.interfaces import AddressBookStorage, LoggingPort
from infrastructure.storage import PersonRecordAdapter, PlanRecordAdapter
from application.service.no_op_logger import NoOpLogger


class SaveAddressBookService:
    def __init__(self, storage: AddressBookStorage, logging_port: Optional[LoggingPort] = None):
        self.storage = storage
        self.logging_port = logging_port

    def execute(self, book: AddressBook, request_id: Optional[str] = None) -> dict[str, Any]:
        """Serialise ``book`` and write it to storage. Returns the written document."""
        start_time = time.time()
        log = self.logging_port.bind(request_id=request_id or "unknown", step="address_book_save") \
            if self.logging_port else NoOpLogger()

        data = {
            "persons": [PersonRecordAdapter.from_entity(p).to_dict() for p in book.list_contacts()],
            "plans": [PlanRecordAdapter.from_entity(p).to_dict() for p in book.list_plans()],
        }
        self.storage.write_raw(data)

        duration = (time.time() - start_time) * 1000
        log.info(
            "address_book_saved",
            person_count=len(data["persons"]),
            plan_count=len(data["plans"]),
            duration_ms=round(duration, 2),
        )
        return data
