"""
Tests for PlanRecordAdapter.

Tests verify:
- Plans survive a record round trip
- Each failure reports the right error kind and message
- Failures are reported in a fixed order (friend, plan name, date-time)
"""
from datetime import datetime

import pytest

from domain.entities import AddressBook, Name, Person, Plan, PlanName, PlanDateTime
from domain.exceptions import (
    MESSAGE_PERSON_DOES_NOT_EXIST,
    InvalidFormat,
    MissingField,
    ReferenceNotFound,
    ValidationError,
)
from domain.interfaces import ContactCatalog
from domain.result import Err, Ok
from infrastructure.storage import PlanRecord, PlanRecordAdapter

VALID = {"planName": "Dinner", "planDateTime": "2024-12-25 18:00", "friend": "Alice"}


@pytest.fixture
def alice():
    return Person.create("Alice", phone="91234567", tags=["friends"])


@pytest.fixture
def catalog(alice):
    return AddressBook(persons=[alice, Person.create("Bob")])


def record(**overrides) -> dict:
    data = dict(VALID)
    for key, value in overrides.items():
        if value is None:
            data.pop(key, None)
        else:
            data[key] = value
    return data


def kind_of(raw, catalog):
    with pytest.raises(ValidationError) as exc:
        PlanRecordAdapter.to_entity(raw, catalog)
    return exc.value.kind


def test_from_entity(alice):
    plan = Plan.create("Dinner", "2024-12-25 18:00", alice)
    rec = PlanRecordAdapter.from_entity(plan)
    assert rec.plan_name == "Dinner"
    assert rec.plan_date_time == "2024-12-25 18:00"
    assert rec.friend == "Alice"
    assert rec.to_dict() == VALID


def test_round_trip(alice, catalog):
    plan = Plan.create("Board games", "2025-01-03 09:30", alice)
    assert PlanRecordAdapter.to_entity(PlanRecordAdapter.from_entity(plan), catalog) == plan


def test_round_trip_early_year(alice, catalog):
    plan = Plan(PlanName("Dinner"), PlanDateTime(datetime(999, 1, 1, 10, 0)), alice)
    rec = PlanRecordAdapter.from_entity(plan)
    assert rec.plan_date_time == "0999-01-01 10:00"
    assert PlanRecordAdapter.to_entity(rec, catalog) == plan


def test_round_trip_through_plain_dict(alice, catalog):
    plan = Plan.create("Dinner", "2024-12-25 18:00", alice)
    raw = PlanRecordAdapter.from_entity(plan).to_dict()
    assert PlanRecordAdapter.to_entity(raw, catalog) == plan


def test_valid_record_builds_plan(alice, catalog):
    plan = PlanRecordAdapter.to_entity(VALID, catalog)
    assert plan.plan_name == PlanName("Dinner")
    assert plan.plan_date_time == PlanDateTime.parse("2024-12-25 18:00")
    assert plan.friend is alice


def test_record_accepts_attribute_names(alice, catalog):
    rec = PlanRecord(plan_name="Dinner", plan_date_time="2024-12-25 18:00", friend="Alice")
    assert PlanRecordAdapter.to_entity(rec, catalog).friend is alice


def test_unknown_keys_ignored(catalog):
    plan = PlanRecordAdapter.to_entity(record(location="Home"), catalog)
    assert str(plan.plan_name) == "Dinner"


def test_missing_friend(catalog):
    with pytest.raises(ValidationError) as exc:
        PlanRecordAdapter.to_entity(record(friend=None), catalog)
    assert exc.value.kind == MissingField("friend name")
    assert exc.value.message == "Plan's friend name field is missing!"
    assert exc.value.code == "MISSING_FIELD"


@pytest.mark.parametrize("friend", ["", " Alice", "Alice!", "Al/ice"])
def test_invalid_friend_name(catalog, friend):
    with pytest.raises(ValidationError) as exc:
        PlanRecordAdapter.to_entity(record(friend=friend), catalog)
    assert exc.value.kind == InvalidFormat("name")
    assert exc.value.message == Name.MESSAGE_CONSTRAINTS


@pytest.mark.parametrize("friend", ["Carol", "alice", "Alice "])
def test_unknown_friend(catalog, friend):
    with pytest.raises(ValidationError) as exc:
        PlanRecordAdapter.to_entity(record(friend=friend), catalog)
    assert exc.value.kind == ReferenceNotFound("person")
    assert exc.value.message == MESSAGE_PERSON_DOES_NOT_EXIST


def test_missing_plan_name(catalog):
    with pytest.raises(ValidationError) as exc:
        PlanRecordAdapter.to_entity(record(planName=None), catalog)
    assert exc.value.kind == MissingField("plan name")
    assert exc.value.message == "Plan's plan name field is missing!"


def test_invalid_plan_name(catalog):
    with pytest.raises(ValidationError) as exc:
        PlanRecordAdapter.to_entity(record(planName="Dinner & drinks"), catalog)
    assert exc.value.kind == InvalidFormat("plan name")
    assert exc.value.message == PlanName.MESSAGE_CONSTRAINTS


def test_missing_plan_date_time(catalog):
    assert kind_of(record(planDateTime=None), catalog) == MissingField("plan date-time")


def test_invalid_plan_date_time(catalog):
    with pytest.raises(ValidationError) as exc:
        PlanRecordAdapter.to_entity(record(planDateTime="not-a-date"), catalog)
    assert exc.value.kind == InvalidFormat("plan date-time")
    assert exc.value.message == PlanDateTime.MESSAGE_CONSTRAINTS


class TestOrdering:
    """The first failing check wins."""

    def test_friend_checked_before_plan_name(self, catalog):
        assert kind_of({"planDateTime": "bad"}, catalog) == MissingField("friend name")
        assert kind_of(record(friend="Bad!", planName=None), catalog) == InvalidFormat("name")
        assert kind_of(record(friend="Carol", planName=None), catalog) == ReferenceNotFound("person")

    def test_plan_name_checked_after_friend_succeeds(self, catalog):
        assert kind_of(record(planName=None, planDateTime="bad"), catalog) == MissingField("plan name")
        assert kind_of(record(planName="!", planDateTime=None), catalog) == InvalidFormat("plan name")

    def test_empty_record(self, catalog):
        assert kind_of({}, catalog) == MissingField("friend name")

    def test_wrongly_typed_plan_fields_do_not_mask_friend_checks(self, catalog):
        assert kind_of({"planName": 42}, catalog) == MissingField("friend name")
        assert kind_of({"friend": 7, "planDateTime": 5}, catalog) == InvalidFormat("name")
        assert kind_of(record(friend="Carol", planName=42), catalog) == ReferenceNotFound("person")

    def test_wrongly_typed_date_time_after_plan_name(self, catalog):
        assert kind_of(record(planName=None, planDateTime=5), catalog) == MissingField("plan name")
        assert kind_of(record(planName=["Dinner"], planDateTime=5), catalog) == InvalidFormat("plan name")
        assert kind_of(record(planDateTime=20241225), catalog) == InvalidFormat("plan date-time")


class TestRecordShape:
    def test_non_string_field(self, catalog):
        with pytest.raises(ValidationError) as exc:
            PlanRecordAdapter.to_entity(record(planName=42), catalog)
        assert exc.value.kind == InvalidFormat("plan name")

    def test_non_string_friend(self, catalog):
        assert kind_of(record(friend=["Alice"]), catalog) == InvalidFormat("name")

    def test_not_an_object(self, catalog):
        assert kind_of(["Dinner"], catalog) == InvalidFormat("plan record")


class TestConvert:
    def test_ok(self, alice, catalog):
        result = PlanRecordAdapter.convert(VALID, catalog)
        assert isinstance(result, Ok)
        assert result.is_ok()
        assert result.value.friend is alice

    def test_err_carries_error(self, catalog):
        result = PlanRecordAdapter.convert(record(friend="Carol"), catalog)
        assert isinstance(result, Err)
        assert not result.is_ok()
        assert result.error.kind == ReferenceNotFound("person")
        with pytest.raises(ValidationError):
            result.unwrap()

    def test_err_for_bad_shape(self, catalog):
        result = PlanRecordAdapter.convert("Dinner", catalog)
        assert result.error.kind == InvalidFormat("plan record")


def test_catalog_is_only_read(mocker, alice):
    """Resolves the friend through the catalog port without touching anything else."""
    catalog = mocker.Mock(spec=ContactCatalog)
    catalog.has_contact.return_value = True
    catalog.find_contact.return_value = alice

    plan = PlanRecordAdapter.to_entity(VALID, catalog)

    assert plan.friend is alice
    catalog.has_contact.assert_called_once_with(Name("Alice"))
    catalog.find_contact.assert_called_once_with(Name("Alice"))


def test_catalog_without_contact_is_not_searched(mocker):
    catalog = mocker.Mock(spec=ContactCatalog)
    catalog.has_contact.return_value = False

    assert kind_of(VALID, catalog) == ReferenceNotFound("person")
    catalog.find_contact.assert_not_called()
