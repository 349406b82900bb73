"""Numeric checks. None values pass; combine with ``common.not_null`` to require one."""

from ruleforge import metadata, params
from ruleforge.codes import ValidationCode
from ruleforge.rules import ValidationRule, create_skip_null_rule


def min_value(minimum: int | float) -> ValidationRule:
    metadata.require_limit(params.MIN, minimum)
    return create_skip_null_rule(
        lambda value: value >= minimum,
        lambda identifier: metadata.bound(identifier, ValidationCode.MIN, params.MIN, minimum),
    )


def max_value(maximum: int | float) -> ValidationRule:
    metadata.require_limit(params.MAX, maximum)
    return create_skip_null_rule(
        lambda value: value <= maximum,
        lambda identifier: metadata.bound(identifier, ValidationCode.MAX, params.MAX, maximum),
    )


def in_range(minimum: int | float, maximum: int | float) -> ValidationRule:
    """Inclusive range."""
    metadata.require_range(minimum, maximum)
    return create_skip_null_rule(
        lambda value: minimum <= value <= maximum,
        lambda identifier: metadata.bounds(
            identifier, ValidationCode.RANGE, params.MIN, minimum, params.MAX, maximum
        ),
    )


def positive() -> ValidationRule:
    return create_skip_null_rule(
        lambda value: value > 0,
        lambda identifier: metadata.flag(identifier, ValidationCode.POSITIVE),
    )


def negative() -> ValidationRule:
    return create_skip_null_rule(
        lambda value: value < 0,
        lambda identifier: metadata.flag(identifier, ValidationCode.NEGATIVE),
    )


def not_zero() -> ValidationRule:
    return create_skip_null_rule(
        lambda value: value != 0,
        lambda identifier: metadata.flag(identifier, ValidationCode.NOT_ZERO),
    )
