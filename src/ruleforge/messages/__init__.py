"""Message generation for validation failures.

Usage:
    from ruleforge.messages import MessageRegistry

    registry = MessageRegistry()
    registry.message_for(failure)
"""

from ruleforge.messages.loader import (
    TemplateFileError,
    TemplateIssue,
    apply_template_file,
    load_template_file,
    validate_template_file,
)
from ruleforge.messages.provider import (
    DEFAULT_TEMPLATES,
    FALLBACK_TEMPLATE,
    DefaultMessageProvider,
    MessageProvider,
    TemplateCache,
)
from ruleforge.messages.registry import MessageRegistry
from ruleforge.messages.template import (
    CompiledTemplate,
    Segment,
    SegmentType,
    compile_template,
    placeholder_names,
)

__all__ = [
    # Templates
    "CompiledTemplate",
    "Segment",
    "SegmentType",
    "compile_template",
    "placeholder_names",
    # Providers
    "DEFAULT_TEMPLATES",
    "FALLBACK_TEMPLATE",
    "DefaultMessageProvider",
    "MessageProvider",
    "TemplateCache",
    # Registry
    "MessageRegistry",
    # Catalog files
    "TemplateFileError",
    "TemplateIssue",
    "apply_template_file",
    "load_template_file",
    "validate_template_file",
]
