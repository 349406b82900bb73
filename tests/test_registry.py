"""Tests for the message registry."""

import logging

import pytest

from ruleforge.codes import ValidationCode
from ruleforge.messages.provider import DefaultMessageProvider
from ruleforge.messages.registry import MessageRegistry
from ruleforge.metadata import bound
from ruleforge.types import FailureMetadata, ValidationIdentifier, ValidationResult


class StaticProvider:
    """Provider that renders a fixed label for the codes it supports."""

    def __init__(self, label: str, codes: set[str]):
        self.label = label
        self.codes = codes
        self.calls: list[tuple[str, dict]] = []

    def supports(self, code: str) -> bool:
        return code in self.codes

    def render(self, code, parameters):
        self.calls.append((code, dict(parameters or {})))
        return f"{self.label}:{code}"


@pytest.fixture
def field():
    return ValidationIdentifier.of_field("email")


# =============================================================================
# Construction
# =============================================================================


class TestConstruction:
    def test_falsy_provider_is_kept(self):
        class EmptyProvider(StaticProvider):
            def __len__(self):
                return 0

        provider = EmptyProvider("x", set())
        registry = MessageRegistry(provider)
        assert registry.default_provider is provider

    def test_default_provider_is_built_in(self, field):
        registry = MessageRegistry()
        assert isinstance(registry.default_provider, DefaultMessageProvider)
        assert registry.get_message("string.not_blank", field, {}) == (
            "Field 'email' must not be blank"
        )

    def test_custom_provider_is_registered_and_default(self, field):
        provider = StaticProvider("custom", {"string.not_blank"})
        registry = MessageRegistry(provider)
        assert registry.default_provider is provider
        assert registry.provider_for("string.not_blank") is provider
        assert registry.get_message("unknown.code", field, {}) == "custom:unknown.code"


# =============================================================================
# Registration
# =============================================================================


class TestRegister:
    def test_register_claims_supported_codes(self):
        registry = MessageRegistry()
        branded = StaticProvider("brand", {"string.not_blank", "number.min"})
        registry.register(branded)
        assert registry.provider_for("string.not_blank") is branded
        assert registry.provider_for("number.min") is branded
        assert registry.provider_for("number.max") is registry.default_provider

    def test_unsupported_codes_keep_their_mapping(self):
        registry = MessageRegistry()
        first = StaticProvider("first", {"number.max"})
        registry.set_provider_for_code("number.max", first)
        registry.register(StaticProvider("second", {"number.min"}))
        assert registry.provider_for("number.max") is first

    def test_register_only_sweeps_catalog_codes(self):
        registry = MessageRegistry()
        custom = StaticProvider("custom", {"billing.iban"})
        registry.register(custom)
        assert registry.provider_for("billing.iban") is registry.default_provider

    def test_last_registration_wins(self):
        registry = MessageRegistry()
        first = StaticProvider("first", {"number.min"})
        second = StaticProvider("second", {"number.min"})
        registry.register(first)
        registry.register(second)
        assert registry.provider_for("number.min") is second

    def test_register_overrides_earlier_explicit_route(self):
        registry = MessageRegistry()
        explicit = StaticProvider("explicit", set())
        registry.set_provider_for_code("number.min", explicit)
        later = StaticProvider("later", {"number.min"})
        registry.register(later)
        assert registry.provider_for("number.min") is later

    def test_register_logs_claim_count(self, caplog):
        registry = MessageRegistry()
        with caplog.at_level(logging.DEBUG, logger="ruleforge.messages.registry"):
            registry.register(StaticProvider("brand", {"number.min", "number.max"}))
        assert "2 of" in caplog.text


class TestSetProviderForCode:
    def test_explicit_route_ignores_supports(self, field):
        registry = MessageRegistry()
        provider = StaticProvider("explicit", set())
        registry.set_provider_for_code("string.matches", provider)
        assert registry.get_message("string.matches", field, {}) == "explicit:string.matches"

    def test_explicit_route_for_custom_code(self, field):
        registry = MessageRegistry()
        provider = StaticProvider("billing", set())
        registry.set_provider_for_code("billing.iban", provider)
        assert registry.get_message("billing.iban", field, {}) == "billing:billing.iban"

    def test_explicit_route_after_register_wins(self):
        registry = MessageRegistry()
        registry.register(StaticProvider("bulk", {"number.min"}))
        explicit = StaticProvider("explicit", set())
        registry.set_provider_for_code("number.min", explicit)
        assert registry.provider_for("number.min") is explicit


class TestSetDefaultProvider:
    def test_replaces_fallback(self, field):
        registry = MessageRegistry()
        fallback = StaticProvider("fallback", set())
        registry.set_default_provider(fallback)
        assert registry.default_provider is fallback
        assert registry.get_message("custom.code", field, {}) == "fallback:custom.code"

    def test_registers_supported_codes(self):
        registry = MessageRegistry()
        replacement = StaticProvider("new", {"number.min"})
        registry.set_default_provider(replacement)
        assert registry.provider_for("number.min") is replacement

    def test_previous_routes_survive_for_unsupported_codes(self):
        original = DefaultMessageProvider()
        registry = MessageRegistry(original)
        registry.set_default_provider(StaticProvider("new", {"number.min"}))
        assert registry.provider_for("number.max") is original

    def test_explicit_override_survives_unless_touched(self):
        registry = MessageRegistry()
        explicit = StaticProvider("explicit", set())
        registry.set_provider_for_code("string.matches", explicit)
        registry.set_provider_for_code("number.min", explicit)

        registry.set_default_provider(StaticProvider("new", {"number.min"}))

        assert registry.provider_for("string.matches") is explicit
        assert registry.provider_for("number.min") is not explicit


# =============================================================================
# Message Lookup
# =============================================================================


class TestGetMessage:
    def test_unregistered_code_falls_back(self, field):
        registry = MessageRegistry()
        assert registry.get_message("custom.unknown", field, {"field": "X"}) == (
            "Validation failed for field 'X'"
        )

    def test_field_seeded_from_identifier(self, field):
        registry = MessageRegistry()
        assert registry.get_message("custom.unknown", field, None) == (
            "Validation failed for field 'email'"
        )

    def test_parameters_field_wins_over_identifier(self, field):
        registry = MessageRegistry()
        message = registry.get_message("string.not_blank", field, {"field": "E-mail"})
        assert message == "Field 'E-mail' must not be blank"

    def test_no_identifier(self):
        registry = MessageRegistry()
        assert registry.get_message("number.positive", None, {"field": "n"}) == (
            "Field 'n' must be positive"
        )

    def test_delegates_parameters_to_provider(self, field):
        provider = StaticProvider("p", {"number.min"})
        registry = MessageRegistry(provider)
        registry.get_message("number.min", field, {"min": 5})
        assert provider.calls == [("number.min", {"field": "email", "min": 5})]


class TestFailureMessages:
    def test_message_for_failure(self):
        failure = bound(
            ValidationIdentifier.of_field("age"),
            ValidationCode.MIN_LENGTH,
            "minLength",
            3,
            aliases=("min",),
        )
        assert MessageRegistry().message_for(failure) == (
            "Field 'age' must be at least 3 characters long"
        )

    def test_messages_for_result_in_order(self):
        result = ValidationResult()
        result.add_failure(
            FailureMetadata(ValidationIdentifier.of_field("a"), "string.not_blank")
        )
        result.add_failure(
            FailureMetadata(ValidationIdentifier.of_field("b"), "number.positive")
        )
        assert MessageRegistry().messages_for(result) == [
            "Field 'a' must not be blank",
            "Field 'b' must be positive",
        ]
