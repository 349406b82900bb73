"""Fluent validation of objects and their properties.

``Validator`` is the entry point: it holds the object under validation and
the result that collects failures. ``property`` selects one value of the
object and returns a ``PropertyValidator`` that applies rules to it; ``end``
returns to the enclosing validator.

Example:
    result = (
        Validator.of(user)
        .property(NAME, lambda u: u.name)
            .validate(strings.not_blank())
            .validate_if_no_error(strings.min_length(2))
            .end()
        .short_circuit_if_errors()
        .property(ADDRESS, lambda u: u.address)
            .property(CITY, lambda a: a.city)
                .validate(strings.not_blank())
                .end()
            .end()
        .end()
        .result
    )

Once a validator is short-circuited every later ``validate*`` call on it,
and on the property validators it hands out, is skipped.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from ruleforge.rules import ValidationRule, chain_if_no_errors_for, noop, skip_if
from ruleforge.types import ScopedValidationResult, ValidationIdentifier, ValidationResult

logger = logging.getLogger(__name__)

ResultCondition = Callable[[ValidationResult], bool]
ScopedRule = Callable[[Any, "Validator"], None]


class Validator:
    """Validation chain over one target object."""

    def __init__(
        self,
        target: Any,
        result: ValidationResult | None = None,
        short_circuit: bool = False,
        owner: PropertyValidator | None = None,
    ):
        """Initialize the validator.

        Args:
            target: The object under validation (may be None)
            result: Result to record failures in; a new one when omitted
            short_circuit: Start in the short-circuited state
            owner: Property validator this validator is nested in, if any
        """
        self._target = target
        self._result = result if result is not None else ValidationResult()
        self._short_circuit = short_circuit
        self._owner = owner

    @classmethod
    def of(cls, target: Any) -> Validator:
        return cls(target)

    @classmethod
    def with_existing_result(cls, target: Any, parent_result: ValidationResult) -> Validator:
        """Validate ``target`` in a scope layered over ``parent_result``.

        The parent's failures are visible to conditional rules, but new
        failures are only recorded in the scope (see ``merge_scoped_failures``).

        Raises:
            ValueError: If ``parent_result`` is None.
        """
        if parent_result is None:
            raise ValueError("ValidationResult must not be null")
        return cls(target, ScopedValidationResult(parent_result))

    @property
    def target(self) -> Any:
        return self._target

    @property
    def result(self) -> ValidationResult:
        return self._result

    @property
    def is_short_circuited(self) -> bool:
        return self._short_circuit

    def validate_with_circuit_breaker(
        self, value: Any, identifier: ValidationIdentifier, rule: ValidationRule
    ) -> Validator:
        """Run ``rule`` and short-circuit the chain if it records any failure."""
        scratch = ValidationResult()
        rule(value, scratch, identifier)
        if scratch.has_errors():
            for failure in scratch.failures:
                self._result.add_failure(failure)
            self._trip(f"circuit breaker on '{identifier}'")
        return self

    def short_circuit_if(self, condition: ResultCondition) -> Validator:
        if condition(self._result):
            self._trip("condition met")
        return self

    def short_circuit_if_errors(self) -> Validator:
        return self.short_circuit_if(lambda result: result.has_errors())

    def merge_scoped_failures(self, other: Validator) -> Validator:
        """Copy the scope-only failures of ``other`` into this result.

        Validators created with ``of`` have no scope; merging one is a no-op.
        """
        if isinstance(other.result, ScopedValidationResult):
            for failure in other.result.scoped_failures:
                self._result.add_failure(failure)
        return self

    def end(self) -> PropertyValidator:
        """Return to the property validator this validator is nested in.

        Raises:
            RuntimeError: If this is a top-level validator.
        """
        if self._owner is None:
            raise RuntimeError("end() called on a top-level validator")
        return self._owner

    def _trip(self, reason: str) -> None:
        if not self._short_circuit:
            logger.debug(
                "Validation short-circuited (%s) with %d failure(s)", reason, len(self._result)
            )
        self._short_circuit = True

    # The method name shadows the builtin from here to the end of the class body.
    def property(
        self,
        identifier: ValidationIdentifier,
        extractor: Callable[[Any], Any] | None = None,
        *,
        value: Any = None,
    ) -> PropertyValidator:
        """Select a property of the target.

        Args:
            identifier: Identifier failures for this property are recorded under
            extractor: Reads the property from the target
            value: The property value itself, when no extractor is given

        Returns:
            A PropertyValidator for the value. The value is None when the
            target is None.
        """
        if self._target is None:
            selected = None
        elif extractor is not None:
            selected = extractor(self._target)
        else:
            selected = value
        return PropertyValidator(self, identifier, selected)


class PropertyValidator:
    """Applies rules to one property value on behalf of a Validator."""

    def __init__(self, parent: Validator, identifier: ValidationIdentifier, value: Any):
        self._parent = parent
        self._identifier = identifier
        self._value = value
        self._short_circuit = False

    @property
    def identifier(self) -> ValidationIdentifier:
        return self._identifier

    @property
    def value(self) -> Any:
        return self._value

    @property
    def is_short_circuited(self) -> bool:
        return self._short_circuit or self._parent.is_short_circuited

    def _run(self, rule: ValidationRule) -> PropertyValidator:
        if not self.is_short_circuited:
            rule(self._value, self._parent.result, self._identifier)
        return self

    def validate(self, rule: ValidationRule) -> PropertyValidator:
        return self._run(rule)

    def validate_when(
        self, condition: Callable[[Any], bool], rule: ValidationRule
    ) -> PropertyValidator:
        """Run ``rule`` only when ``condition(value)`` holds."""
        return self._run(skip_if(rule, lambda value: not condition(value)))

    def validate_if_no_error(self, rule: ValidationRule) -> PropertyValidator:
        """Run ``rule`` only if this property has no failure yet."""
        return self._run(chain_if_no_errors_for(noop(), rule, self._identifier))

    def validate_if_no_error_for(
        self, other: ValidationIdentifier, rule: ValidationRule
    ) -> PropertyValidator:
        """Run ``rule`` only if ``other`` has no failure yet."""
        return self._run(chain_if_no_errors_for(noop(), rule, other))

    def validate_scoped(self, rule: ScopedRule) -> PropertyValidator:
        """Hand the value and the enclosing validator to ``rule``.

        Scoped rules drive further validation themselves, typically by
        selecting properties of the value on the validator they receive.
        """
        if not self.is_short_circuited:
            rule(self._value, self._parent)
        return self

    def peek(self, consumer: Callable[[Any], None]) -> PropertyValidator:
        """Pass a non-None value to ``consumer`` unless short-circuited."""
        if not self.is_short_circuited and self._value is not None:
            consumer(self._value)
        return self

    def short_circuit_if(self, condition: ResultCondition) -> PropertyValidator:
        if condition(self._parent.result):
            self._short_circuit = True
        return self

    def short_circuit_if_errors(self) -> PropertyValidator:
        """Skip the remaining rules of this property once it has a failure."""
        return self.short_circuit_if(lambda result: result.has_error_for(self._identifier))

    def end(self) -> Validator:
        return self._parent

    # The method name shadows the builtin from here to the end of the class body.
    def property(
        self,
        identifier: ValidationIdentifier,
        extractor: Callable[[Any], Any],
    ) -> PropertyValidator:
        """Select a property of this property's value.

        The nested validator shares this validator's result and starts
        short-circuited if this property is. Its ``end()`` returns to a
        Validator over this value, whose own ``end()`` returns here.
        """
        nested = Validator(
            self._value,
            self._parent.result,
            short_circuit=self.is_short_circuited,
            owner=self,
        )
        return nested.property(identifier, extractor)
