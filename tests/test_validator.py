"""Tests for the fluent Validator and PropertyValidator."""

import logging
from dataclasses import dataclass

import pytest

from ruleforge.checks import numbers, strings
from ruleforge.rules import create_rule
from ruleforge.types import (
    FailureMetadata,
    ScopedValidationResult,
    ValidationIdentifier,
    ValidationResult,
)
from ruleforge.validator import PropertyValidator, Validator

NAME = ValidationIdentifier.of_field("name")
AGE = ValidationIdentifier.of_field("age")
ADDRESS = ValidationIdentifier.of_field("address")
CITY = ValidationIdentifier.of_path("address.city")
STREET = ValidationIdentifier.of_path("address.street")


@dataclass
class Address:
    street: str | None
    city: str | None


@dataclass
class User:
    name: str | None
    age: int | None
    address: Address | None = None


def codes(result):
    return [(str(f.identifier), f.error_code) for f in result.failures]


def recording_rule(calls):
    def rule(value, result, identifier):
        calls.append((value, identifier))

    return rule


# =============================================================================
# Validator
# =============================================================================


class TestValidator:
    def test_valid_object_has_no_failures(self):
        result = (
            Validator.of(User("Ada", 36))
            .property(NAME, lambda u: u.name)
            .validate(strings.not_blank())
            .validate(strings.min_length(2))
            .end()
            .property(AGE, lambda u: u.age)
            .validate(numbers.min_value(18))
            .end()
            .result
        )
        assert not result.has_errors()

    def test_failures_recorded_per_property(self):
        result = (
            Validator.of(User(" ", 12))
            .property(NAME, lambda u: u.name)
            .validate(strings.not_blank())
            .end()
            .property(AGE, lambda u: u.age)
            .validate(numbers.min_value(18))
            .end()
            .result
        )
        assert codes(result) == [("name", "string.not_blank"), ("age", "number.min")]

    def test_property_with_value(self):
        result = (
            Validator.of(User("Ada", 36))
            .property(ValidationIdentifier.of_custom("nickname"), value="")
            .validate(strings.not_blank())
            .end()
            .result
        )
        assert codes(result) == [("nickname", "string.not_blank")]

    def test_none_target_yields_none_values(self):
        calls = []
        Validator.of(None).property(NAME, lambda u: u.name).validate(recording_rule(calls))
        Validator.of(None).property(AGE, value=5).validate(recording_rule(calls))
        assert calls == [(None, NAME), (None, AGE)]

    def test_target_and_end_on_top_level(self):
        user = User("Ada", 36)
        validator = Validator.of(user)
        assert validator.target is user
        with pytest.raises(RuntimeError):
            validator.end()


# =============================================================================
# Short-circuiting
# =============================================================================


class TestShortCircuit:
    def test_short_circuit_if_errors_skips_later_properties(self):
        validator = (
            Validator.of(User("", 12))
            .property(NAME, lambda u: u.name)
            .validate(strings.not_blank())
            .end()
            .short_circuit_if_errors()
            .property(AGE, lambda u: u.age)
            .validate(numbers.min_value(18))
            .end()
        )
        assert validator.is_short_circuited
        assert codes(validator.result) == [("name", "string.not_blank")]

    def test_no_errors_keeps_validating(self):
        validator = (
            Validator.of(User("Ada", 12))
            .property(NAME, lambda u: u.name)
            .validate(strings.not_blank())
            .end()
            .short_circuit_if_errors()
            .property(AGE, lambda u: u.age)
            .validate(numbers.min_value(18))
            .end()
        )
        assert not validator.is_short_circuited
        assert codes(validator.result) == [("age", "number.min")]

    def test_short_circuit_if_condition(self):
        validator = Validator.of(User("", 12)).short_circuit_if(lambda r: len(r) == 0)
        assert validator.is_short_circuited

    def test_short_circuit_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="ruleforge.validator"):
            Validator.of(None).short_circuit_if(lambda r: True)
        assert "short-circuited" in caplog.text

    def test_property_short_circuit_is_local(self):
        result = (
            Validator.of(User("", 12))
            .property(NAME, lambda u: u.name)
            .validate(strings.not_blank())
            .short_circuit_if_errors()
            .validate(strings.min_length(2))
            .end()
            .property(AGE, lambda u: u.age)
            .validate(numbers.min_value(18))
            .end()
            .result
        )
        assert codes(result) == [("name", "string.not_blank"), ("age", "number.min")]

    def test_circuit_breaker(self):
        validator = Validator.of(User("", 12)).validate_with_circuit_breaker(
            "", NAME, strings.not_blank()
        )
        validator.property(AGE, lambda u: u.age).validate(numbers.min_value(18))

        assert validator.is_short_circuited
        assert codes(validator.result) == [("name", "string.not_blank")]

    def test_circuit_breaker_passes(self):
        validator = Validator.of(User("Ada", 12)).validate_with_circuit_breaker(
            "Ada", NAME, strings.not_blank()
        )
        assert not validator.is_short_circuited
        assert not validator.result.has_errors()


# =============================================================================
# Conditional Property Rules
# =============================================================================


class TestConditionalRules:
    def test_validate_when(self):
        result = (
            Validator.of(User("x", 70))
            .property(AGE, lambda u: u.age)
            .validate_when(lambda age: age < 65, numbers.max_value(10))
            .validate_when(lambda age: age >= 65, numbers.max_value(60))
            .end()
            .result
        )
        assert codes(result) == [("age", "number.max")]

    def test_validate_if_no_error(self):
        result = (
            Validator.of(User(None, 1))
            .property(NAME, lambda u: u.name)
            .validate(strings.not_blank())
            .validate_if_no_error(strings.min_length(2))
            .end()
            .result
        )
        assert codes(result) == [("name", "string.not_blank")]

    def test_validate_if_no_error_for_other_identifier(self):
        calls = []
        (
            Validator.of(User("", 30))
            .property(NAME, lambda u: u.name)
            .validate(strings.not_blank())
            .end()
            .property(AGE, lambda u: u.age)
            .validate_if_no_error_for(NAME, recording_rule(calls))
            .validate_if_no_error_for(CITY, recording_rule(calls))
            .end()
        )
        assert calls == [(30, AGE)]

    def test_peek_skips_none_and_short_circuit(self):
        seen = []
        validator = Validator.of(User(None, 30))
        validator.property(NAME, lambda u: u.name).peek(seen.append)
        validator.property(AGE, lambda u: u.age).peek(seen.append)
        validator.short_circuit_if(lambda r: True)
        validator.property(AGE, lambda u: u.age).peek(seen.append)
        assert seen == [30]


# =============================================================================
# Nested Properties
# =============================================================================


class TestNestedProperties:
    def test_nested_failures_use_nested_identifiers(self):
        user = User("Ada", 36, Address(street="", city=""))
        result = (
            Validator.of(user)
            .property(ADDRESS, lambda u: u.address)
            .property(STREET, lambda a: a.street)
            .validate(strings.not_blank())
            .end()
            .property(CITY, lambda a: a.city)
            .validate(strings.not_blank())
            .end()
            .end()
            .end()
            .result
        )
        assert codes(result) == [
            ("address.street", "string.not_blank"),
            ("address.city", "string.not_blank"),
        ]
        assert result.has_error_for(CITY)
        assert not result.has_error_for(ADDRESS)

    def test_end_chain_returns_to_root(self):
        root = Validator.of(User("Ada", 36, Address("Main", "Oslo")))
        address = root.property(ADDRESS, lambda u: u.address)
        city = address.property(CITY, lambda a: a.city)

        nested = city.end()
        assert isinstance(nested, Validator)
        assert nested.target == Address("Main", "Oslo")
        assert nested.result is root.result
        assert nested.end() is address
        assert address.end() is root

    def test_missing_parent_value(self):
        calls = []
        (
            Validator.of(User("Ada", 36, None))
            .property(ADDRESS, lambda u: u.address)
            .property(CITY, lambda a: a.city)
            .validate(recording_rule(calls))
        )
        assert calls == [(None, CITY)]

    def test_nested_inherits_short_circuit(self):
        calls = []
        root = Validator.of(User("Ada", 36, Address("Main", "Oslo")))
        root.short_circuit_if(lambda r: True)
        root.property(ADDRESS, lambda u: u.address).property(CITY, lambda a: a.city).validate(
            recording_rule(calls)
        )
        assert calls == []

    def test_validate_scoped(self):
        def address_rule(address, validator):
            validator.property(CITY, value=address.city).validate(strings.not_blank())

        result = (
            Validator.of(User("Ada", 36, Address("Main", "")))
            .property(ADDRESS, lambda u: u.address)
            .validate_scoped(address_rule)
            .end()
            .result
        )
        assert codes(result) == [("address.city", "string.not_blank")]


# =============================================================================
# Existing Results
# =============================================================================


class TestExistingResult:
    @pytest.fixture
    def parent(self):
        return ValidationResult.failure(
            FailureMetadata(identifier=NAME, error_code="string.not_blank")
        )

    def test_requires_result(self):
        with pytest.raises(ValueError):
            Validator.with_existing_result(User("Ada", 1), None)

    def test_scope_sees_parent_failures(self, parent):
        calls = []
        validator = Validator.with_existing_result(User("", 30), parent)
        (
            validator.property(AGE, lambda u: u.age)
            .validate_if_no_error_for(NAME, recording_rule(calls))
            .end()
        )
        assert isinstance(validator.result, ScopedValidationResult)
        assert calls == []
        assert validator.result.has_errors()

    def test_new_failures_do_not_touch_parent(self, parent):
        validator = (
            Validator.with_existing_result(User("Ada", 12), parent)
            .property(AGE, lambda u: u.age)
            .validate(numbers.min_value(18))
            .end()
        )
        assert codes(validator.result) == [("name", "string.not_blank"), ("age", "number.min")]
        assert len(parent) == 1

    def test_merge_scoped_failures(self, parent):
        scoped = (
            Validator.with_existing_result(User("Ada", 12), parent)
            .property(AGE, lambda u: u.age)
            .validate(numbers.min_value(18))
            .end()
        )
        merged = Validator.of(User("Ada", 12)).merge_scoped_failures(scoped)
        assert codes(merged.result) == [("age", "number.min")]

    def test_merge_unscoped_is_noop(self):
        other = Validator.of(None).validate_with_circuit_breaker(
            None, NAME, create_rule(lambda v: False, lambda i: FailureMetadata(i, "x.y"))
        )
        merged = Validator.of(None).merge_scoped_failures(other)
        assert not merged.result.has_errors()


def test_property_validator_accessors():
    validator = Validator.of(User("Ada", 36))
    prop = validator.property(NAME, lambda u: u.name)
    assert isinstance(prop, PropertyValidator)
    assert prop.identifier == NAME
    assert prop.value == "Ada"
    assert prop.end() is validator
