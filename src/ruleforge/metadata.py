"""Failure metadata factories, one per check shape.

Every built-in check describes its failure with one of these shapes:
- flag: no parameters (not_null, positive, is_weekday)
- bound: one limit (min_length, max_size)
- bounds: a min/max pair (range, size_range)
- reference: comparison against a reference value (before, is_equal)
- predicate: a described condition (satisfies, all_match)
- membership: a set of values (one_of, contains_all)

Contract violations are rejected here, at check construction, with
ValueError; rendering code can then assume well-formed metadata.
"""

from collections.abc import Iterable
from typing import Any

from ruleforge import params
from ruleforge.codes import ValidationCode
from ruleforge.types import FailureMetadata, ValidationIdentifier

IDENTIFIER_MUST_NOT_BE_NULL = "Identifier must not be null"


def _require_identifier(identifier: ValidationIdentifier | None) -> None:
    if identifier is None:
        raise ValueError(IDENTIFIER_MUST_NOT_BE_NULL)


def require_limit(key: str, limit: Any, *, non_negative: bool = False) -> None:
    if limit is None:
        raise ValueError(f"{key} must not be null")
    if non_negative and limit < 0:
        raise ValueError(f"{key} cannot be negative")


def require_range(minimum: Any, maximum: Any, *, non_negative: bool = False) -> None:
    if minimum is None or maximum is None:
        raise ValueError("Range bounds must not be null")
    if non_negative and (minimum < 0 or maximum < 0):
        raise ValueError("Range bounds cannot be negative")
    if minimum > maximum:
        raise ValueError(
            f"Minimum value must be less than or equal to maximum value "
            f"({minimum} > {maximum})"
        )


def require_description(description: str | None) -> None:
    if description is None:
        raise ValueError("Condition description must not be null")
    if not description.strip():
        raise ValueError("Condition description must not be blank")


def require_values(values: Iterable[Any] | None) -> list[Any]:
    if values is None:
        raise ValueError("Values must not be null")
    values = list(values)
    if not values:
        raise ValueError("At least one value is required")
    return values


def _code(code: ValidationCode | str) -> str:
    return code.value if isinstance(code, ValidationCode) else code


def format_values(values: Iterable[Any]) -> str:
    """Render a value set the way templates show it: "a, b, c"."""
    return ", ".join(str(v) for v in values)


def flag(identifier: ValidationIdentifier, code: ValidationCode | str) -> FailureMetadata:
    """Failure with no check-specific parameters."""
    _require_identifier(identifier)
    return FailureMetadata(identifier=identifier, error_code=_code(code))


def bound(
    identifier: ValidationIdentifier,
    code: ValidationCode | str,
    key: str,
    limit: Any,
    *,
    non_negative: bool = False,
    aliases: tuple[str, ...] = (),
) -> FailureMetadata:
    """Failure for a single limit.

    Args:
        key: Parameter name for the limit (e.g., "minLength")
        limit: The limit value
        non_negative: Reject negative limits (lengths, sizes)
        aliases: Extra parameter names that carry the same value
    """
    _require_identifier(identifier)
    require_limit(key, limit, non_negative=non_negative)

    parameters = {key: limit}
    for alias in aliases:
        parameters[alias] = limit
    return FailureMetadata(
        identifier=identifier, error_code=_code(code), message_parameters=parameters
    )


def bounds(
    identifier: ValidationIdentifier,
    code: ValidationCode | str,
    min_key: str,
    minimum: Any,
    max_key: str,
    maximum: Any,
    *,
    non_negative: bool = False,
) -> FailureMetadata:
    """Failure for a min/max pair. Rejects inverted ranges."""
    _require_identifier(identifier)
    require_range(minimum, maximum, non_negative=non_negative)
    return FailureMetadata(
        identifier=identifier,
        error_code=_code(code),
        message_parameters={min_key: minimum, max_key: maximum},
    )


def reference(
    identifier: ValidationIdentifier,
    code: ValidationCode | str,
    key: str,
    value: Any,
    *,
    allow_none: bool = False,
) -> FailureMetadata:
    """Failure for a comparison against a reference value."""
    _require_identifier(identifier)
    if value is None and not allow_none:
        raise ValueError(f"{key} must not be null")
    return FailureMetadata(
        identifier=identifier,
        error_code=_code(code),
        message_parameters={key: "null" if value is None else value},
    )


def predicate(
    identifier: ValidationIdentifier,
    code: ValidationCode | str,
    description: str,
) -> FailureMetadata:
    """Failure for a described condition. The description must not be blank."""
    _require_identifier(identifier)
    require_description(description)
    return FailureMetadata(
        identifier=identifier,
        error_code=_code(code),
        message_parameters={params.CONDITION: description},
    )


def membership(
    identifier: ValidationIdentifier,
    code: ValidationCode | str,
    values: Iterable[Any],
    key: str = params.ALLOWED_VALUES,
) -> FailureMetadata:
    """Failure for a value set. At least one value is required."""
    _require_identifier(identifier)
    values = require_values(values)
    return FailureMetadata(
        identifier=identifier,
        error_code=_code(code),
        message_parameters={key: format_values(values)},
    )
