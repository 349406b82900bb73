"""RuleForge: validation failure metadata and message generation.

Usage:
    from ruleforge import (
        MessageRegistry,
        Severity,
        ValidationIdentifier,
        ValidationResult,
        configure,
    )
    from ruleforge.checks import strings

    rule = configure(strings.min_length(3)).with_severity(Severity.WARNING).build()

    result = ValidationResult()
    rule("ab", result, ValidationIdentifier.of_field("name"))
    MessageRegistry().messages_for(result)
    # ["Field 'name' must be at least 3 characters long"]
"""

from ruleforge.codes import ValidationCode, all_codes, is_known_code
from ruleforge.config import MessageConfig, create_registry
from ruleforge.messages import (
    DEFAULT_TEMPLATES,
    FALLBACK_TEMPLATE,
    DefaultMessageProvider,
    MessageProvider,
    MessageRegistry,
    Segment,
    SegmentType,
    TemplateCache,
    TemplateFileError,
    compile_template,
)
from ruleforge.rules import (
    RuleBuilder,
    RuleExecutionError,
    ValidationRule,
    configure,
    enrich_rule,
    with_metadata,
)
from ruleforge.types import (
    FailureMetadata,
    IdentifierKind,
    ScopedValidationResult,
    Severity,
    ValidationIdentifier,
    ValidationResult,
)
from ruleforge.validator import PropertyValidator, Validator

__all__ = [
    # Types
    "FailureMetadata",
    "IdentifierKind",
    "ScopedValidationResult",
    "Severity",
    "ValidationIdentifier",
    "ValidationResult",
    # Fluent validation
    "PropertyValidator",
    "Validator",
    # Codes
    "ValidationCode",
    "all_codes",
    "is_known_code",
    # Rules
    "RuleBuilder",
    "RuleExecutionError",
    "ValidationRule",
    "configure",
    "enrich_rule",
    "with_metadata",
    # Messages
    "DEFAULT_TEMPLATES",
    "FALLBACK_TEMPLATE",
    "DefaultMessageProvider",
    "MessageProvider",
    "MessageRegistry",
    "Segment",
    "SegmentType",
    "TemplateCache",
    "TemplateFileError",
    "compile_template",
    # Setup
    "MessageConfig",
    "create_registry",
]
