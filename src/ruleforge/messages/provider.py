"""Message providers for RuleForge.

A provider owns a code -> template table and renders messages for the
codes it supports. Compiled templates are cached by template string, so
codes sharing identical text share one compiled entry.
"""

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from ruleforge.messages.template import CompiledTemplate, SegmentType, compile_template

logger = logging.getLogger(__name__)

FALLBACK_TEMPLATE = "Validation failed for field '{field}'"

DEFAULT_TEMPLATES: dict[str, str] = {
    # Common
    "common.not_null": "Field '{field}' must not be null",
    "common.must_be_null": "Field '{field}' must be null",
    "common.is_equal": "Field '{field}' must be equal to '{value}'",
    "common.is_not_equal": "Field '{field}' must not be equal to '{value}'",
    "common.satisfies": "Field '{field}' must satisfy the condition: {condition}",
    "common.is_instance_of": "Field '{field}' must be an instance of {className}",
    "common.is_not_instance_of": "Field '{field}' must not be an instance of {className}",
    "common.is_same_as": "Field '{field}' must be the same object as {reference}",
    "common.is_not_same_as": "Field '{field}' must not be the same object as {reference}",
    # String
    "string.not_blank": "Field '{field}' must not be blank",
    "string.max_length": "Field '{field}' must not exceed {max} characters",
    "string.min_length": "Field '{field}' must be at least {min} characters long",
    "string.exact_length": "Field '{field}' must be exactly {exactLength} characters long",
    "string.matches": "Field '{field}' must match the pattern: {pattern}",
    "string.one_of": "Field '{field}' must be one of: {allowedValues}",
    "string.one_of_ignore_case": "Field '{field}' must be one of (case insensitive): {allowedValues}",
    "string.starts_with": "Field '{field}' must start with '{prefix}'",
    "string.ends_with": "Field '{field}' must end with '{suffix}'",
    "string.contains": "Field '{field}' must contain '{substring}'",
    "string.numeric": "Field '{field}' must contain only numeric characters",
    "string.alphanumeric": "Field '{field}' must contain only alphanumeric characters",
    "string.uppercase": "Field '{field}' must be in uppercase",
    "string.lowercase": "Field '{field}' must be in lowercase",
    "string.no_whitespace": "Field '{field}' must not contain whitespace",
    "string.no_leading_whitespace": "Field '{field}' must not start with whitespace",
    "string.no_trailing_whitespace": "Field '{field}' must not end with whitespace",
    "string.no_consecutive_whitespace": "Field '{field}' must not contain consecutive whitespace",
    "string.trimmed": "Field '{field}' must be trimmed",
    "string.proper_spacing": "Field '{field}' must have proper spacing",
    # Number
    "number.min": "Field '{field}' must be at least {min}",
    "number.max": "Field '{field}' must not exceed {max}",
    "number.range": "Field '{field}' must be between {min} and {max}",
    "number.positive": "Field '{field}' must be positive",
    "number.negative": "Field '{field}' must be negative",
    "number.not_zero": "Field '{field}' must not be zero",
    # Date/time
    "datetime.in_range": "Field '{field}' must be between {minDate} and {maxDate}",
    "datetime.before": "Field '{field}' must be before {referenceDate}",
    "datetime.after": "Field '{field}' must be after {referenceDate}",
    "datetime.before_or_equals": "Field '{field}' must be before or equal to {referenceDate}",
    "datetime.after_or_equals": "Field '{field}' must be after or equal to {referenceDate}",
    "datetime.future": "Field '{field}' must be in the future",
    "datetime.past": "Field '{field}' must be in the past",
    "datetime.present_or_future": "Field '{field}' must be in the present or future",
    "datetime.present_or_past": "Field '{field}' must be in the present or past",
    "datetime.equals": "Field '{field}' must be equal to {referenceDate}",
    "datetime.is_weekday": "Field '{field}' must be a weekday (Monday-Friday)",
    "datetime.is_weekend": "Field '{field}' must be a weekend day (Saturday-Sunday)",
    "datetime.in_month": "Field '{field}' must be in month {month}",
    "datetime.in_year": "Field '{field}' must be in year {year}",
    # Time of day
    "time.in_range": "Field '{field}' must be between {minTime} and {maxTime}",
    "time.before": "Field '{field}' must be before {referenceTime}",
    "time.after": "Field '{field}' must be after {referenceTime}",
    "time.before_or_equals": "Field '{field}' must be before or equal to {referenceTime}",
    "time.after_or_equals": "Field '{field}' must be after or equal to {referenceTime}",
    "time.equals": "Field '{field}' must be equal to {referenceTime}",
    "time.is_morning": "Field '{field}' must be in the morning ({timeRange})",
    "time.is_afternoon": "Field '{field}' must be in the afternoon ({timeRange})",
    "time.is_evening": "Field '{field}' must be in the evening ({timeRange})",
    "time.is_business_hours": "Field '{field}' must be during business hours ({timeRange})",
    "time.is_lunch_hour": "Field '{field}' must be during lunch hour ({timeRange})",
    "time.hours_between": "Field '{field}' hours must be between {minHour} and {maxHour}",
    "time.minutes_between": "Field '{field}' minutes must be between {minMinute} and {maxMinute}",
    "time.seconds_between": "Field '{field}' seconds must be between {minSecond} and {maxSecond}",
    "time.in_time_zone": "Field '{field}' must be in time zone {timeZone}",
    # Collection
    "collection.not_empty": "Field '{field}' must not be empty",
    "collection.is_empty": "Field '{field}' must be empty",
    "collection.min_size": "Field '{field}' must contain at least {minSize} elements",
    "collection.max_size": "Field '{field}' must not contain more than {maxSize} elements",
    "collection.exact_size": "Field '{field}' must contain exactly {exactSize} elements",
    "collection.size_range": "Field '{field}' must contain between {minSize} and {maxSize} elements",
    "collection.all_match": "All elements in '{field}' must satisfy: {condition}",
    "collection.any_match": "At least one element in '{field}' must satisfy: {condition}",
    "collection.none_match": "No elements in '{field}' may satisfy: {condition}",
    "collection.no_duplicates": "Field '{field}' must not contain duplicate elements",
    "collection.contains": "Field '{field}' must contain element: {element}",
    "collection.does_not_contain": "Field '{field}' must not contain element: {element}",
    "collection.contains_all": "Field '{field}' must contain all elements: {elements}",
    "collection.contains_none": "Field '{field}' must not contain any of: {elements}",
    # Allowed values
    "allowed.contains": "Field '{field}' must be contained in: {allowedValues}",
    "allowed.one_of": "Field '{field}' must be one of: {allowedValues}",
    "allowed.not_contains": "Field '{field}' must not be contained in: {allowedValues}",
    "allowed.none_of": "Field '{field}' must not be one of: {allowedValues}",
    "allowed.is_in_enum": "Field '{field}' must be a valid {className} value: {allowedValues}",
    "allowed.in_range": "Field '{field}' must be within the allowed range",
}


class MessageProvider(Protocol):
    """Protocol that all message providers must implement.

    Providers never raise from ``render``: unknown codes and missing
    parameters degrade to some message rather than an exception.
    """

    def supports(self, code: str) -> bool:
        """Return True if the provider has a template for ``code``."""
        ...

    def render(self, code: str, parameters: Mapping[str, Any] | None) -> str:
        """Render the message for ``code`` using ``parameters``."""
        ...


class TemplateCache:
    """Compiled templates keyed by raw template string.

    Not synchronized: concurrent ``get``/``evict`` calls need external
    locking or one cache per thread.
    """

    def __init__(self) -> None:
        self._compiled: dict[str, CompiledTemplate] = {}

    def get(self, template: str) -> CompiledTemplate:
        """Return the compiled form of ``template``, compiling on first use."""
        compiled = self._compiled.get(template)
        if compiled is None:
            compiled = compile_template(template)
            self._compiled[template] = compiled
            logger.debug("Compiled message template %r into %d segments", template, len(compiled))
        return compiled

    def evict(self, template: str) -> None:
        self._compiled.pop(template, None)

    def clear(self) -> None:
        self._compiled.clear()

    def __contains__(self, template: object) -> bool:
        return template in self._compiled

    def __len__(self) -> int:
        return len(self._compiled)


class DefaultMessageProvider:
    """Template-table message provider.

    Ships with one English template per catalog code. Applications can
    override or add templates at any time with ``set_template``.

    Example:
        provider = DefaultMessageProvider()
        provider.render("string.min_length", {"field": "name", "min": 3})
        # "Field 'name' must be at least 3 characters long"
    """

    def __init__(
        self,
        templates: Mapping[str, str] | None = None,
        include_defaults: bool = True,
    ):
        """Initialize the provider.

        Args:
            templates: Extra or overriding code -> template entries
            include_defaults: Seed the built-in English templates first
        """
        self._templates: dict[str, str] = dict(DEFAULT_TEMPLATES) if include_defaults else {}
        self._cache = TemplateCache()
        if templates:
            self.set_templates(templates)

    @property
    def cache(self) -> TemplateCache:
        return self._cache

    @property
    def templates(self) -> dict[str, str]:
        return dict(self._templates)

    def supports(self, code: str) -> bool:
        return code in self._templates

    def set_template(self, code: str, template: str) -> None:
        """Set the template for a code.

        Evicts any compiled entry for the new template string so it is
        recompiled on next use. Compiled entries for other template strings,
        including the one previously mapped to ``code``, are left alone.
        """
        self._templates[code] = template
        self._cache.evict(template)

    def set_templates(self, templates: Mapping[str, str]) -> None:
        for code, template in templates.items():
            self.set_template(code, template)

    def render(self, code: str, parameters: Mapping[str, Any] | None) -> str:
        template = self._templates.get(code)
        if template is None:
            logger.debug("No template for code '%s', using fallback", code)
            template = FALLBACK_TEMPLATE

        parameters = parameters or {}
        parts: list[str] = []
        for segment in self._cache.get(template):
            if segment.type is SegmentType.TEXT:
                parts.append(segment.value)
                continue
            value = parameters.get(segment.value)
            if value is not None:
                parts.append(str(value))
        return "".join(parts)
