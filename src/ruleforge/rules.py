"""Validation rules and rule composition for RuleForge.

A rule is any callable ``rule(value, result, identifier)`` that inspects a
value and appends zero or more FailureMetadata records to ``result``.
Rules are stateless and reusable; context-specific metadata (severity,
category, group, blocking) is layered on with ``configure`` instead of
copying the check.

Example:
    name_rule = configure(strings.not_blank()).with_severity(Severity.WARNING).blocking(False).build()

    result = ValidationResult()
    name_rule("   ", result, ValidationIdentifier.of_field("name"))
"""

from dataclasses import dataclass
from typing import Any, Callable

from ruleforge.types import (
    FailureMetadata,
    Severity,
    ValidationIdentifier,
    ValidationResult,
)

ValidationRule = Callable[[Any, ValidationResult, ValidationIdentifier], None]
MetadataFactory = Callable[[ValidationIdentifier], FailureMetadata]
Enricher = Callable[[FailureMetadata], FailureMetadata]


class RuleExecutionError(Exception):
    """A named rule raised while validating."""

    def __init__(self, name: str, identifier: ValidationIdentifier, cause: Exception):
        self.name = name
        self.identifier = identifier
        self.cause = cause
        super().__init__(
            f"Error in validation rule '{name}' for identifier '{identifier}': {cause}"
        )


@dataclass
class ValidationState:
    """Snapshot handed to ``peek`` consumers after a rule runs."""

    value: Any
    result: ValidationResult
    identifier: ValidationIdentifier

    @property
    def has_error(self) -> bool:
        return self.result.has_error_for(self.identifier)

    @property
    def errors(self) -> list[FailureMetadata]:
        return self.result.errors_for(self.identifier)


# =============================================================================
# Rule Construction
# =============================================================================


def create_rule(check: Callable[[Any], bool], factory: MetadataFactory) -> ValidationRule:
    """Build a rule that records ``factory(identifier)`` when ``check`` fails."""

    def rule(value: Any, result: ValidationResult, identifier: ValidationIdentifier) -> None:
        if not check(value):
            result.add_failure(factory(identifier))

    return rule


def create_skip_null_rule(
    check: Callable[[Any], bool], factory: MetadataFactory
) -> ValidationRule:
    """Like ``create_rule`` but None values pass without being checked."""

    def rule(value: Any, result: ValidationResult, identifier: ValidationIdentifier) -> None:
        if value is None:
            return
        if not check(value):
            result.add_failure(factory(identifier))

    return rule


def fail(metadata: FailureMetadata) -> ValidationRule:
    """Rule that always records ``metadata``."""

    def rule(value: Any, result: ValidationResult, identifier: ValidationIdentifier) -> None:
        result.add_failure(metadata)

    return rule


def noop() -> ValidationRule:
    """Rule that never fails."""

    def rule(value: Any, result: ValidationResult, identifier: ValidationIdentifier) -> None:
        return None

    return rule


# =============================================================================
# Composition
# =============================================================================


def chain(first: ValidationRule, second: ValidationRule) -> ValidationRule:
    """Run ``second`` only if ``first`` left no failure for the identifier."""

    def rule(value: Any, result: ValidationResult, identifier: ValidationIdentifier) -> None:
        first(value, result, identifier)
        if not result.has_error_for(identifier):
            second(value, result, identifier)

    return rule


def chain_always(first: ValidationRule, second: ValidationRule) -> ValidationRule:
    """Run both rules unconditionally, in order."""

    def rule(value: Any, result: ValidationResult, identifier: ValidationIdentifier) -> None:
        first(value, result, identifier)
        second(value, result, identifier)

    return rule


def chain_if(
    first: ValidationRule,
    condition: Callable[[Any], bool],
    second: ValidationRule,
) -> ValidationRule:
    """Run ``second`` if ``first`` passed for the identifier and ``condition(value)`` holds."""

    def rule(value: Any, result: ValidationResult, identifier: ValidationIdentifier) -> None:
        first(value, result, identifier)
        if not result.has_error_for(identifier) and condition(value):
            second(value, result, identifier)

    return rule


def chain_if_no_errors_for(
    first: ValidationRule,
    second: ValidationRule,
    *identifiers: ValidationIdentifier,
) -> ValidationRule:
    """Run ``second`` only if none of ``identifiers`` has a failure after ``first``."""

    def rule(value: Any, result: ValidationResult, identifier: ValidationIdentifier) -> None:
        first(value, result, identifier)
        if not any(result.has_error_for(other) for other in identifiers):
            second(value, result, identifier)

    return rule


def skip_if(rule: ValidationRule, condition: Callable[[Any], bool]) -> ValidationRule:
    """Skip ``rule`` entirely when ``condition(value)`` is true."""

    def guarded(value: Any, result: ValidationResult, identifier: ValidationIdentifier) -> None:
        if not condition(value):
            rule(value, result, identifier)

    return guarded


def named(rule: ValidationRule, name: str) -> ValidationRule:
    """Wrap exceptions raised by ``rule`` in a RuleExecutionError carrying ``name``."""

    def wrapper(value: Any, result: ValidationResult, identifier: ValidationIdentifier) -> None:
        try:
            rule(value, result, identifier)
        except Exception as e:
            raise RuleExecutionError(name, identifier, e) from e

    return wrapper


def peek(rule: ValidationRule, consumer: Callable[[ValidationState], None]) -> ValidationRule:
    """Run ``rule`` then hand the resulting state to ``consumer``."""

    def wrapper(value: Any, result: ValidationResult, identifier: ValidationIdentifier) -> None:
        rule(value, result, identifier)
        consumer(ValidationState(value, result, identifier))

    return wrapper


# =============================================================================
# Metadata Enrichment
# =============================================================================


def with_metadata(rule: ValidationRule, enricher: Enricher) -> ValidationRule:
    """Apply ``enricher`` to every failure ``rule`` appends during one call.

    Failures already in the result before the call are left untouched; the
    new ones are replaced in place by the enricher's return value, so order
    and count never change.
    """
    if enricher is None:
        raise TypeError("Enricher must not be None")

    def enriched(value: Any, result: ValidationResult, identifier: ValidationIdentifier) -> None:
        start = len(result)
        rule(value, result, identifier)
        for index, failure in enumerate(result.failures[start:], start):
            updated = enricher(failure)
            if updated is None:
                raise TypeError("Enricher must return a FailureMetadata, got None")
            result.replace_failure(index, updated)

    return enriched


def enrich_rule(
    rule: ValidationRule,
    *,
    severity: Severity | None = None,
    category: str | None = None,
    group: str | None = None,
    blocking: bool | None = None,
) -> ValidationRule:
    """Stamp cross-cutting metadata onto the failures a rule produces.

    Only the overrides that are given are applied. With no overrides the
    rule itself is returned, unwrapped.
    """
    if severity is None and category is None and group is None and blocking is None:
        return rule

    def stamp(failure: FailureMetadata) -> FailureMetadata:
        if severity is not None:
            failure = failure.with_severity(severity)
        if category is not None:
            failure = failure.with_category(category)
        if group is not None:
            failure = failure.with_group(group)
        if blocking is not None:
            failure = failure.with_blocking(blocking)
        return failure

    return with_metadata(rule, stamp)


class RuleBuilder:
    """Fluent configuration of a rule's cross-cutting metadata.

    Example:
        rule = (
            configure(strings.not_blank())
            .with_severity(Severity.WARNING)
            .with_category("profile")
            .blocking(False)
            .build()
        )
    """

    def __init__(self, rule: ValidationRule):
        self._rule = rule
        self._severity: Severity | None = None
        self._category: str | None = None
        self._group: str | None = None
        self._blocking: bool | None = None

    def with_severity(self, severity: Severity) -> "RuleBuilder":
        self._severity = severity
        return self

    def with_category(self, category: str) -> "RuleBuilder":
        self._category = category
        return self

    def with_group(self, group: str) -> "RuleBuilder":
        self._group = group
        return self

    def blocking(self, blocking: bool) -> "RuleBuilder":
        self._blocking = blocking
        return self

    def build(self) -> ValidationRule:
        return enrich_rule(
            self._rule,
            severity=self._severity,
            category=self._category,
            group=self._group,
            blocking=self._blocking,
        )


def configure(rule: ValidationRule) -> RuleBuilder:
    """Start configuring metadata for ``rule``."""
    if rule is None:
        raise TypeError("Validation rule must not be None")
    return RuleBuilder(rule)
