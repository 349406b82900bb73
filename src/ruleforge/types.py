"""Core types for the RuleForge validation system.

This module defines the records shared by checks, the enrichment decorator
and the message registry:
- ValidationIdentifier: what was validated (field, path, index, custom)
- FailureMetadata: structured description of one validation failure
- ValidationResult: ordered accumulator of failures for one validation pass
- ScopedValidationResult: a result layered over an existing parent result
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable

from ruleforge import params


class Severity(Enum):
    """Validation failure severity.

    ERROR: The value is invalid
    WARNING: The value is suspicious but acceptable
    INFO: Advisory note only
    """

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class IdentifierKind(Enum):
    """How an identifier addresses the validated element."""

    FIELD = "field"
    PATH = "path"
    INDEX = "index"
    CUSTOM = "custom"


@dataclass(frozen=True)
class ValidationIdentifier:
    """Reference to the validated field or element.

    Attributes:
        value: Display form of the reference (e.g., "email", "address.city", "items[2]")
        kind: How the value should be interpreted
    """

    value: str
    kind: IdentifierKind = IdentifierKind.FIELD

    @classmethod
    def of_field(cls, value: str) -> "ValidationIdentifier":
        return cls(value, IdentifierKind.FIELD)

    @classmethod
    def of_path(cls, value: str) -> "ValidationIdentifier":
        return cls(value, IdentifierKind.PATH)

    @classmethod
    def of_index(cls, value: str) -> "ValidationIdentifier":
        return cls(value, IdentifierKind.INDEX)

    @classmethod
    def of_custom(cls, value: str) -> "ValidationIdentifier":
        return cls(value, IdentifierKind.CUSTOM)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FailureMetadata:
    """A single validation failure.

    Records are immutable; the ``with_*`` methods return an updated copy so a
    failure already handed to another result is never changed behind its back.

    Attributes:
        identifier: The validated element
        error_code: Dotted catalog code (e.g., "string.min_length") selecting the template
        message_parameters: Placeholder values; always contains the "field" entry
        severity: ERROR, WARNING or INFO
        category: Optional domain/business category
        validation_group: Optional group of related validations
        blocking: Whether the failure should halt downstream processing
        validation_time: When the failure was recorded (UTC)
        source: Optional component that produced the failure
        additional_error_code: Optional caller-defined code
    """

    identifier: ValidationIdentifier
    error_code: str
    message_parameters: dict[str, Any] = field(default_factory=dict, hash=False)
    severity: Severity = Severity.ERROR
    category: str | None = None
    validation_group: str | None = None
    blocking: bool = True
    validation_time: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    source: str | None = None
    additional_error_code: str | None = None

    def __post_init__(self) -> None:
        if self.identifier is None:
            raise ValueError("Identifier must not be null")
        if not self.error_code:
            raise ValueError("Error code must not be null or empty")
        seeded = {params.FIELD: str(self.identifier)}
        seeded.update(self.message_parameters or {})
        object.__setattr__(self, "message_parameters", seeded)

    def with_parameter(self, key: str, value: Any) -> "FailureMetadata":
        """Return a copy with one message parameter added or overwritten."""
        updated = dict(self.message_parameters)
        updated[key] = value
        return replace(self, message_parameters=updated)

    def with_severity(self, severity: Severity) -> "FailureMetadata":
        if severity is None:
            raise ValueError("Severity must not be null")
        updated = dict(self.message_parameters)
        updated[params.SEVERITY] = severity.name
        return replace(self, severity=severity, message_parameters=updated)

    def with_category(self, category: str | None) -> "FailureMetadata":
        updated = dict(self.message_parameters)
        if category is not None:
            updated[params.CATEGORY] = category
        return replace(self, category=category, message_parameters=updated)

    def with_group(self, group: str | None) -> "FailureMetadata":
        return replace(self, validation_group=group)

    def with_blocking(self, blocking: bool) -> "FailureMetadata":
        return replace(self, blocking=blocking)

    def with_source(self, source: str | None) -> "FailureMetadata":
        return replace(self, source=source)

    def with_additional_error_code(self, code: str | None) -> "FailureMetadata":
        return replace(self, additional_error_code=code)

    def enrich(
        self, enricher: Callable[["FailureMetadata"], "FailureMetadata"]
    ) -> "FailureMetadata":
        """Apply an enrichment function and return its result."""
        if enricher is None:
            raise ValueError("Enricher must not be null")
        return enricher(self)

    def to_dict(self) -> dict[str, Any]:
        return {
            "identifier": self.identifier.value,
            "identifierKind": self.identifier.kind.value,
            "code": self.error_code,
            "parameters": dict(self.message_parameters),
            "severity": self.severity.value,
            "category": self.category,
            "validationGroup": self.validation_group,
            "blocking": self.blocking,
            "validationTime": self.validation_time.isoformat(),
            "source": self.source,
            "additionalErrorCode": self.additional_error_code,
        }


class ValidationResult:
    """Failures accumulated during one validation pass.

    Failures keep insertion order. An index by identifier is maintained
    alongside so rule combinators can ask whether a given element failed.
    """

    def __init__(self) -> None:
        self._failures: list[FailureMetadata] = []
        self._by_identifier: dict[ValidationIdentifier, list[FailureMetadata]] = {}

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def failure(cls, metadata: FailureMetadata) -> "ValidationResult":
        result = cls()
        result.add_failure(metadata)
        return result

    def add_failure(self, metadata: FailureMetadata) -> None:
        self._failures.append(metadata)
        self._by_identifier.setdefault(metadata.identifier, []).append(metadata)

    def replace_failure(self, index: int, metadata: FailureMetadata) -> None:
        """Swap the failure at ``index`` for an updated record.

        The replacement must describe the same identifier; the identifier
        index is updated in place so ordering there is preserved too.
        """
        previous = self._failures[index]
        if metadata.identifier != previous.identifier:
            raise ValueError(
                f"Replacement failure is for '{metadata.identifier}', "
                f"expected '{previous.identifier}'"
            )
        if index < 0:
            index += len(self._failures)
        position = sum(
            1 for f in self._failures[:index] if f.identifier == previous.identifier
        )
        self._failures[index] = metadata
        self._by_identifier[previous.identifier][position] = metadata

    @property
    def failures(self) -> list[FailureMetadata]:
        return list(self._failures)

    def has_errors(self) -> bool:
        return bool(self._failures)

    def has_error_for(self, identifier: ValidationIdentifier) -> bool:
        return bool(self._by_identifier.get(identifier))

    def errors_for(self, identifier: ValidationIdentifier) -> list[FailureMetadata]:
        return list(self._by_identifier.get(identifier, []))

    def failures_by_identifier(
        self,
    ) -> dict[ValidationIdentifier, list[FailureMetadata]]:
        return {key: list(value) for key, value in self._by_identifier.items()}

    def blocking_failures(self) -> list[FailureMetadata]:
        return [f for f in self.failures if f.blocking]

    def __len__(self) -> int:
        return len(self._failures)

    def __repr__(self) -> str:
        return f"ValidationResult(failures={len(self._failures)})"


class ScopedValidationResult(ValidationResult):
    """A result that reads through to a parent result.

    Queries (``failures``, ``has_errors``, ``has_error_for``, ...) see the
    parent's failures followed by this scope's own. New failures are only
    ever added to this scope; the parent is never modified.

    Example:
        scoped = ScopedValidationResult(existing)
        rule(value, scoped, identifier)
        scoped.scoped_failures  # only what ``rule`` added
    """

    def __init__(self, parent: ValidationResult):
        if parent is None:
            raise ValueError("Parent result must not be null")
        super().__init__()
        self._parent = parent

    @property
    def parent(self) -> ValidationResult:
        return self._parent

    @property
    def failures(self) -> list[FailureMetadata]:
        return self._parent.failures + list(self._failures)

    @property
    def scoped_failures(self) -> list[FailureMetadata]:
        return list(self._failures)

    def replace_failure(self, index: int, metadata: FailureMetadata) -> None:
        """Replace a failure of this scope, indexed as in ``failures``.

        Raises:
            IndexError: If ``index`` addresses a failure owned by the parent.
        """
        offset = len(self._parent)
        if index < 0:
            index += len(self)
        if not offset <= index < len(self):
            raise IndexError(f"Failure {index} is not owned by this scope")
        super().replace_failure(index - offset, metadata)

    def has_errors(self) -> bool:
        return bool(self._failures) or self._parent.has_errors()

    def has_error_for(self, identifier: ValidationIdentifier) -> bool:
        return super().has_error_for(identifier) or self._parent.has_error_for(identifier)

    def errors_for(self, identifier: ValidationIdentifier) -> list[FailureMetadata]:
        return self._parent.errors_for(identifier) + super().errors_for(identifier)

    def failures_by_identifier(
        self,
    ) -> dict[ValidationIdentifier, list[FailureMetadata]]:
        merged = self._parent.failures_by_identifier()
        for key, value in self._by_identifier.items():
            merged.setdefault(key, []).extend(value)
        return merged

    def __len__(self) -> int:
        return len(self._parent) + len(self._failures)

    def __repr__(self) -> str:
        return (
            f"ScopedValidationResult(parent={len(self._parent)}, "
            f"scoped={len(self._failures)})"
        )
