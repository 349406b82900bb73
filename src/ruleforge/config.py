"""Message configuration and registry factory."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from ruleforge.messages.loader import apply_template_file
from ruleforge.messages.provider import DefaultMessageProvider
from ruleforge.messages.registry import MessageRegistry

_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() not in _FALSE_VALUES


@dataclass
class MessageConfig:
    """Message rendering configuration.

    Attributes:
        templates_path: Optional YAML template catalog applied over the defaults
        include_defaults: Seed the built-in English templates
        validate_schema: Check the catalog against the JSON Schema before loading
    """

    templates_path: Path | None = None
    include_defaults: bool = True
    validate_schema: bool = True

    @classmethod
    def from_env(cls) -> MessageConfig:
        """Create config from environment variables.

        - RULEFORGE_TEMPLATES_PATH: path to a YAML template catalog
        - RULEFORGE_INCLUDE_DEFAULTS: "false"/"0"/"no"/"off" disables built-in templates
        - RULEFORGE_VALIDATE_TEMPLATES: "false"/"0"/"no"/"off" skips schema validation
        """
        path = os.environ.get("RULEFORGE_TEMPLATES_PATH")
        return cls(
            templates_path=Path(path) if path else None,
            include_defaults=_env_flag("RULEFORGE_INCLUDE_DEFAULTS", True),
            validate_schema=_env_flag("RULEFORGE_VALIDATE_TEMPLATES", True),
        )


def create_registry(config: MessageConfig | None = None) -> MessageRegistry:
    """Create a message registry from configuration.

    Args:
        config: Message configuration; read from the environment when omitted.

    Returns:
        A MessageRegistry whose default provider holds the configured templates.

    Raises:
        TemplateFileError: If the configured catalog cannot be loaded.
    """
    if config is None:
        config = MessageConfig.from_env()

    provider = DefaultMessageProvider(include_defaults=config.include_defaults)
    if config.templates_path is not None:
        apply_template_file(
            provider, config.templates_path, validate=config.validate_schema
        )
    return MessageRegistry(provider)
