from .json_adapted_plan import PlanRecord, PlanRecordAdapter
from .json_adapted_person import PersonRecord, PersonRecordAdapter
from .json_address_book import JsonAddressBookStorage

__all__ = ["PlanRecord", "PlanRecordAdapter", "PersonRecord", "PersonRecordAdapter", "JsonAddressBookStorage"]
