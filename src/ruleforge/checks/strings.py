"""String checks.

Length checks measure the stripped string. All checks except ``not_blank``
let None through; combine with ``common.not_null`` to require a value.
"""

import re
from collections.abc import Iterable

from ruleforge import metadata, params
from ruleforge.codes import ValidationCode
from ruleforge.rules import ValidationRule, create_rule, create_skip_null_rule

NUMERIC_PATTERN = re.compile(r"\d+")
ALPHANUMERIC_PATTERN = re.compile(r"[a-zA-Z0-9]+")


# =============================================================================
# Presence and Length
# =============================================================================


def not_blank() -> ValidationRule:
    return create_rule(
        lambda value: value is not None and value.strip() != "",
        lambda identifier: metadata.flag(identifier, ValidationCode.NOT_BLANK),
    )


def min_length(length: int) -> ValidationRule:
    metadata.require_limit(params.MIN_LENGTH, length, non_negative=True)
    return create_skip_null_rule(
        lambda value: len(value.strip()) >= length,
        lambda identifier: metadata.bound(
            identifier,
            ValidationCode.MIN_LENGTH,
            params.MIN_LENGTH,
            length,
            non_negative=True,
            aliases=(params.MIN,),
        ),
    )


def max_length(length: int) -> ValidationRule:
    metadata.require_limit(params.MAX_LENGTH, length, non_negative=True)
    return create_skip_null_rule(
        lambda value: len(value.strip()) <= length,
        lambda identifier: metadata.bound(
            identifier,
            ValidationCode.MAX_LENGTH,
            params.MAX_LENGTH,
            length,
            non_negative=True,
            aliases=(params.MAX,),
        ),
    )


def exact_length(length: int) -> ValidationRule:
    metadata.require_limit(params.EXACT_LENGTH, length, non_negative=True)
    return create_skip_null_rule(
        lambda value: len(value.strip()) == length,
        lambda identifier: metadata.bound(
            identifier,
            ValidationCode.EXACT_LENGTH,
            params.EXACT_LENGTH,
            length,
            non_negative=True,
        ),
    )


# =============================================================================
# Content
# =============================================================================


def matches(pattern: str | re.Pattern) -> ValidationRule:
    """The whole value must match ``pattern``."""
    if pattern is None:
        raise ValueError("Pattern must not be null")
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    if not compiled.pattern.strip():
        raise ValueError("Pattern must not be blank")
    return create_skip_null_rule(
        lambda value: compiled.fullmatch(value) is not None,
        lambda identifier: metadata.reference(
            identifier, ValidationCode.MATCHES, params.PATTERN, compiled.pattern
        ),
    )


def one_of(allowed: Iterable[str], ignore_case: bool = False) -> ValidationRule:
    allowed = metadata.require_values(allowed)
    if ignore_case:
        folded = {a.casefold() for a in allowed}
        check = lambda value: value.casefold() in folded  # noqa: E731
        code = ValidationCode.ONE_OF_IGNORE_CASE
    else:
        check = lambda value: value in allowed  # noqa: E731
        code = ValidationCode.ONE_OF
    return create_skip_null_rule(
        check, lambda identifier: metadata.membership(identifier, code, allowed)
    )


def starts_with(prefix: str) -> ValidationRule:
    metadata.require_limit(params.PREFIX, prefix)
    return create_skip_null_rule(
        lambda value: value.startswith(prefix),
        lambda identifier: metadata.reference(
            identifier, ValidationCode.STARTS_WITH, params.PREFIX, prefix
        ),
    )


def ends_with(suffix: str) -> ValidationRule:
    metadata.require_limit(params.SUFFIX, suffix)
    return create_skip_null_rule(
        lambda value: value.endswith(suffix),
        lambda identifier: metadata.reference(
            identifier, ValidationCode.ENDS_WITH, params.SUFFIX, suffix
        ),
    )


def contains(substring: str) -> ValidationRule:
    metadata.require_limit(params.SUBSTRING, substring)
    return create_skip_null_rule(
        lambda value: substring in value,
        lambda identifier: metadata.reference(
            identifier, ValidationCode.CONTAINS, params.SUBSTRING, substring
        ),
    )


def numeric() -> ValidationRule:
    return create_skip_null_rule(
        lambda value: NUMERIC_PATTERN.fullmatch(value) is not None,
        lambda identifier: metadata.flag(identifier, ValidationCode.NUMERIC),
    )


def alphanumeric() -> ValidationRule:
    return create_skip_null_rule(
        lambda value: ALPHANUMERIC_PATTERN.fullmatch(value) is not None,
        lambda identifier: metadata.flag(identifier, ValidationCode.ALPHANUMERIC),
    )
