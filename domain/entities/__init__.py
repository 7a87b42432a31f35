from .person import Name, Person
from .plan import Plan, PlanName, PlanDateTime
from .address_book import AddressBook

__all__ = ["Name", "Person", "Plan", "PlanName", "PlanDateTime", "AddressBook"]
