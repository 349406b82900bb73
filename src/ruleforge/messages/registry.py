"""Message registry for RuleForge.

Routes each validation code to the provider that renders it, with a
default provider as the universal fallback.
"""

import logging
from collections.abc import Mapping
from typing import Any

from ruleforge import params
from ruleforge.codes import ValidationCode
from ruleforge.messages.provider import DefaultMessageProvider, MessageProvider
from ruleforge.types import FailureMetadata, ValidationIdentifier, ValidationResult

logger = logging.getLogger(__name__)


class MessageRegistry:
    """Code -> provider routing table.

    Registration is last-write-wins: ``register`` overwrites the entry of
    every catalog code the provider supports, and ``set_provider_for_code``
    overwrites a single entry. No priority is inferred from specificity.
    Codes with no entry are rendered by the default provider.

    Example:
        registry = MessageRegistry()
        registry.register(BrandedProvider())          # takes every code it supports
        registry.set_provider_for_code("string.matches", RegexHelpProvider())

        registry.get_message("string.matches", identifier, {"pattern": "^[a-z]+$"})
    """

    def __init__(self, provider: MessageProvider | None = None):
        """Initialize the registry.

        Args:
            provider: Default provider; a DefaultMessageProvider when omitted.
                It is registered for every catalog code it supports.
        """
        self._providers: dict[str, MessageProvider] = {}
        self._default_provider: MessageProvider = (
            provider if provider is not None else DefaultMessageProvider()
        )
        self.register(self._default_provider)

    @property
    def default_provider(self) -> MessageProvider:
        return self._default_provider

    def register(self, provider: MessageProvider) -> None:
        """Route every catalog code the provider supports to it.

        Codes the provider does not support keep their current entry.
        """
        claimed = 0
        for code in ValidationCode:
            if provider.supports(code.value):
                self._providers[code.value] = provider
                claimed += 1
        logger.debug(
            "Registered %s for %d of %d catalog codes",
            type(provider).__name__,
            claimed,
            len(ValidationCode),
        )

    def set_provider_for_code(self, code: str, provider: MessageProvider) -> None:
        """Route one code to a provider, regardless of what it supports."""
        self._providers[code] = provider

    def set_default_provider(self, provider: MessageProvider) -> None:
        """Replace the fallback provider and register it.

        Explicit per-code routes survive unless the new provider supports
        the same code, in which case the registration overwrites them.
        """
        self._default_provider = provider
        self.register(provider)

    def provider_for(self, code: str) -> MessageProvider:
        provider = self._providers.get(code)
        if provider is None:
            logger.debug("No provider routed for code '%s', using default", code)
            return self._default_provider
        return provider

    def get_message(
        self,
        code: str,
        identifier: ValidationIdentifier | None,
        parameters: Mapping[str, Any] | None,
    ) -> str:
        """Render the message for a code.

        Args:
            code: Validation code (e.g., "number.range")
            identifier: The validated element; seeds "field" when the
                parameters do not carry it
            parameters: Placeholder values

        Returns:
            The rendered message. Never raises for unknown codes or
            missing parameters.
        """
        values: dict[str, Any] = {}
        if identifier is not None:
            values[params.FIELD] = str(identifier)
        if parameters:
            values.update(parameters)
        return self.provider_for(code).render(code, values)

    def message_for(self, failure: FailureMetadata) -> str:
        return self.get_message(
            failure.error_code, failure.identifier, failure.message_parameters
        )

    def messages_for(self, result: ValidationResult) -> list[str]:
        """Render every failure of a result, in failure order."""
        return [self.message_for(failure) for failure in result.failures]
