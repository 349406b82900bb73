"""Date and datetime checks.

Comparisons use the value's own type: compare dates with dates and
datetimes with datetimes (aware with aware). ``future``/``past`` read "now"
in the value's own terms: ``date.today()`` for dates and ``datetime.now(tz)``
for datetimes, using the value's tzinfo. An explicit clock overrides this.
"""

from datetime import date, datetime
from typing import Callable

from ruleforge import metadata, params
from ruleforge.codes import ValidationCode
from ruleforge.rules import ValidationRule, create_skip_null_rule

Clock = Callable[[], date | datetime]

# date.weekday(): Monday == 0 ... Sunday == 6
_WEEKEND = (5, 6)


def before(reference: date | datetime) -> ValidationRule:
    metadata.require_limit(params.REFERENCE_DATE, reference)
    return create_skip_null_rule(
        lambda value: value < reference,
        lambda identifier: metadata.reference(
            identifier, ValidationCode.BEFORE, params.REFERENCE_DATE, reference
        ),
    )


def after(reference: date | datetime) -> ValidationRule:
    metadata.require_limit(params.REFERENCE_DATE, reference)
    return create_skip_null_rule(
        lambda value: value > reference,
        lambda identifier: metadata.reference(
            identifier, ValidationCode.AFTER, params.REFERENCE_DATE, reference
        ),
    )


def in_range(minimum: date | datetime, maximum: date | datetime) -> ValidationRule:
    """Inclusive range."""
    metadata.require_range(minimum, maximum)
    return create_skip_null_rule(
        lambda value: minimum <= value <= maximum,
        lambda identifier: metadata.bounds(
            identifier,
            ValidationCode.DATE_TIME_IN_RANGE,
            params.MIN_DATE,
            minimum,
            params.MAX_DATE,
            maximum,
        ),
    )


def _now(value: date | datetime, clock: Clock | None) -> date | datetime:
    if clock is not None:
        return clock()
    if isinstance(value, datetime):
        return datetime.now(value.tzinfo)
    return date.today()


def future(clock: Clock | None = None) -> ValidationRule:
    return create_skip_null_rule(
        lambda value: value > _now(value, clock),
        lambda identifier: metadata.flag(identifier, ValidationCode.FUTURE),
    )


def past(clock: Clock | None = None) -> ValidationRule:
    return create_skip_null_rule(
        lambda value: value < _now(value, clock),
        lambda identifier: metadata.flag(identifier, ValidationCode.PAST),
    )


def is_weekday() -> ValidationRule:
    return create_skip_null_rule(
        lambda value: value.weekday() not in _WEEKEND,
        lambda identifier: metadata.flag(identifier, ValidationCode.IS_WEEKDAY).with_parameter(
            params.WEEKDAYS, "Monday-Friday"
        ),
    )


def is_weekend() -> ValidationRule:
    return create_skip_null_rule(
        lambda value: value.weekday() in _WEEKEND,
        lambda identifier: metadata.flag(identifier, ValidationCode.IS_WEEKEND).with_parameter(
            params.WEEKEND_DAYS, "Saturday-Sunday"
        ),
    )
