from .contact_catalog import ContactCatalog
from .address_book_storage import AddressBookStorage
from .logging_port import LoggingPort, BoundLogger

__all__ = ["ContactCatalog", "AddressBookStorage", "LoggingPort", "BoundLogger"]
