"""Collection checks (lists, tuples, sets, dicts and other sized iterables)."""

from collections.abc import Iterable
from typing import Any, Callable

from ruleforge import metadata, params
from ruleforge.codes import ValidationCode
from ruleforge.rules import ValidationRule, create_rule, create_skip_null_rule


def _has_duplicates(values: Any) -> bool:
    seen: list[Any] = []
    for item in values:
        # Lists rather than sets so unhashable elements are supported
        if item in seen:
            return True
        seen.append(item)
    return False


def not_empty() -> ValidationRule:
    return create_rule(
        lambda value: value is not None and len(value) > 0,
        lambda identifier: metadata.flag(identifier, ValidationCode.NOT_EMPTY),
    )


def min_size(size: int) -> ValidationRule:
    metadata.require_limit(params.MIN_SIZE, size, non_negative=True)
    return create_skip_null_rule(
        lambda value: len(value) >= size,
        lambda identifier: metadata.bound(
            identifier, ValidationCode.MIN_SIZE, params.MIN_SIZE, size, non_negative=True
        ),
    )


def max_size(size: int) -> ValidationRule:
    metadata.require_limit(params.MAX_SIZE, size, non_negative=True)
    return create_skip_null_rule(
        lambda value: len(value) <= size,
        lambda identifier: metadata.bound(
            identifier, ValidationCode.MAX_SIZE, params.MAX_SIZE, size, non_negative=True
        ),
    )


def size_range(minimum: int, maximum: int) -> ValidationRule:
    metadata.require_range(minimum, maximum, non_negative=True)

    def rule(value, result, identifier) -> None:
        if value is None:
            return
        actual = len(value)
        if not minimum <= actual <= maximum:
            failure = metadata.bounds(
                identifier,
                ValidationCode.SIZE_RANGE,
                params.MIN_SIZE,
                minimum,
                params.MAX_SIZE,
                maximum,
                non_negative=True,
            )
            result.add_failure(failure.with_parameter(params.ACTUAL_SIZE, actual))

    return rule


def all_match(condition: Callable[[Any], bool], description: str) -> ValidationRule:
    if condition is None:
        raise ValueError("Condition predicate must not be null")
    metadata.require_description(description)
    return create_skip_null_rule(
        lambda value: all(condition(item) for item in value),
        lambda identifier: metadata.predicate(identifier, ValidationCode.ALL_MATCH, description),
    )


def no_duplicates() -> ValidationRule:
    return create_skip_null_rule(
        lambda value: not _has_duplicates(value),
        lambda identifier: metadata.flag(identifier, ValidationCode.NO_DUPLICATES),
    )


def contains_element(element: Any) -> ValidationRule:
    return create_skip_null_rule(
        lambda value: element in value,
        lambda identifier: metadata.reference(
            identifier,
            ValidationCode.COLLECTION_CONTAINS,
            params.ELEMENT,
            element,
            allow_none=True,
        ),
    )


def contains_all(elements: Iterable[Any]) -> ValidationRule:
    """Every one of ``elements`` must be present."""
    elements = metadata.require_values(elements)
    return create_skip_null_rule(
        lambda value: all(element in value for element in elements),
        lambda identifier: metadata.membership(
            identifier, ValidationCode.CONTAINS_ALL, elements, key=params.ELEMENTS
        ),
    )


def contains_none(elements: Iterable[Any]) -> ValidationRule:
    elements = metadata.require_values(elements)
    return create_skip_null_rule(
        lambda value: not any(element in value for element in elements),
        lambda identifier: metadata.membership(
            identifier, ValidationCode.CONTAINS_NONE, elements, key=params.ELEMENTS
        ),
    )
