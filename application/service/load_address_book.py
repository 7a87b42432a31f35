import time
from typing import Any, Optional
from domain.config import StorageConfig, get_storage_config
from domain.entities import AddressBook
from domain.exceptions import DataLoadingError, DuplicatePersonError, ValidationError
from domain.interfaces import AddressBookStorage, LoggingPort
from infrastructure.storage import PersonRecordAdapter, PlanRecordAdapter
from application.service.no_op_logger import NoOpLogger


class LoadAddressBookService:
    def __init__(
        self,
        storage: AddressBookStorage,
        logging_port: Optional[LoggingPort] = None,
        config: Optional[StorageConfig] = None,
    ):
        """
        Initialize the load service.

        Args:
            storage: Where the serialised address book is read from (required)
            logging_port: Logging port for structured logging (optional)
            config: Storage configuration; read from the environment when omitted
        """
        self.storage = storage
        self.logging_port = logging_port
        self.config = config or get_storage_config()

    def execute(self, request_id: Optional[str] = None) -> Optional[AddressBook]:
        """
        Load the stored address book.

        Persons are loaded first so that plans can be resolved against them.
        A bad person record always aborts the load. A bad plan record aborts
        it too, unless ``skip_invalid_plans`` is set, in which case the record
        is logged and left out.

        Returns:
            The address book, or None when nothing has been stored yet

        Raises:
            DataLoadingError: if the stored data cannot be turned into an address book
        """
        start_time = time.time()
        if self.logging_port:
            log = self.logging_port.bind(request_id=request_id or "unknown", step="address_book_load")
        else:
            log = NoOpLogger()

        log.info("address_book_load_started", skip_invalid_plans=self.config.skip_invalid_plans)
        try:
            raw = self.storage.read_raw()
        except DataLoadingError as e:
            log.error("address_book_read_failed", error=e.message)
            raise
        if raw is None:
            log.info("address_book_not_found")
            return None

        persons_raw = self._section(raw, "persons")
        plans_raw = self._section(raw, "plans")

        book = AddressBook()
        for index, person_raw in enumerate(persons_raw):
            try:
                book.add_person(PersonRecordAdapter.to_entity(person_raw))
            except (ValidationError, DuplicatePersonError) as e:
                log.error("person_record_invalid", index=index, code=e.code, error=e.message)
                raise DataLoadingError(f"Invalid person record at index {index}: {e.message}") from e

        skipped = 0
        for index, plan_raw in enumerate(plans_raw):
            result = PlanRecordAdapter.convert(plan_raw, book)
            if result.is_ok():
                book.add_plan(result.value)
                continue
            error = result.error
            if not self.config.skip_invalid_plans:
                log.error("plan_record_invalid", index=index, kind=type(error.kind).__name__, error=error.message)
                raise DataLoadingError(f"Invalid plan record at index {index}: {error.message}") from error
            skipped += 1
            log.warning("plan_record_skipped", index=index, kind=type(error.kind).__name__, error=error.message)

        duration = (time.time() - start_time) * 1000
        log.info(
            "address_book_loaded",
            person_count=len(book.list_contacts()),
            plan_count=len(book.list_plans()),
            skipped_plan_count=skipped,
            duration_ms=round(duration, 2),
        )
        return book

    @staticmethod
    def _section(raw: dict[str, Any], key: str) -> list:
        section = raw.get(key, [])
        if section is None:
            return []
        if not isinstance(section, list):
            raise DataLoadingError(f"Address book '{key}' must be a list")
        return section
