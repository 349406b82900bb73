"""Checks that apply to values of any type."""

from collections.abc import Iterable
from typing import Any, Callable

from ruleforge import metadata, params
from ruleforge.codes import ValidationCode
from ruleforge.rules import ValidationRule, create_rule, create_skip_null_rule


def not_null() -> ValidationRule:
    return create_rule(
        lambda value: value is not None,
        lambda identifier: metadata.flag(identifier, ValidationCode.NOT_NULL),
    )


def must_be_null() -> ValidationRule:
    return create_rule(
        lambda value: value is None,
        lambda identifier: metadata.flag(identifier, ValidationCode.MUST_BE_NULL),
    )


def is_equal(expected: Any) -> ValidationRule:
    return create_rule(
        lambda value: value == expected,
        lambda identifier: metadata.reference(
            identifier, ValidationCode.IS_EQUAL, params.VALUE, expected, allow_none=True
        ),
    )


def is_not_equal(unexpected: Any) -> ValidationRule:
    return create_rule(
        lambda value: value != unexpected,
        lambda identifier: metadata.reference(
            identifier, ValidationCode.IS_NOT_EQUAL, params.VALUE, unexpected, allow_none=True
        ),
    )


def satisfies(condition: Callable[[Any], bool], description: str) -> ValidationRule:
    """Value must satisfy ``condition``; ``description`` is shown in the message."""
    if condition is None:
        raise ValueError("Condition predicate must not be null")
    metadata.require_description(description)
    return create_rule(
        condition,
        lambda identifier: metadata.predicate(identifier, ValidationCode.SATISFIES, description),
    )


def is_instance_of(cls: type) -> ValidationRule:
    if cls is None:
        raise ValueError("Class must not be null")
    return create_skip_null_rule(
        lambda value: isinstance(value, cls),
        lambda identifier: metadata.reference(
            identifier, ValidationCode.IS_INSTANCE_OF, params.CLASS_NAME, cls.__name__
        ),
    )


def one_of(allowed: Iterable[Any]) -> ValidationRule:
    """Value must be one of ``allowed``."""
    allowed = metadata.require_values(allowed)
    return create_skip_null_rule(
        lambda value: value in allowed,
        lambda identifier: metadata.membership(
            identifier, ValidationCode.ALLOWED_VALUES_ONE_OF, allowed
        ),
    )


def none_of(disallowed: Iterable[Any]) -> ValidationRule:
    disallowed = metadata.require_values(disallowed)
    return create_skip_null_rule(
        lambda value: value not in disallowed,
        lambda identifier: metadata.membership(identifier, ValidationCode.NONE_OF, disallowed),
    )
