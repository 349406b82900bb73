"""Reusable validation checks.

Each function returns a stateless rule ``rule(value, result, identifier)``
that records catalog-coded failures. Checks validate their own arguments
when built, so a misconfigured check fails at startup, not mid-validation.

Usage:
    from ruleforge.checks import strings, numbers

    rule = chain(strings.not_blank(), strings.max_length(80))
"""

from ruleforge.checks import collection, common, dates, numbers, strings

__all__ = ["collection", "common", "dates", "numbers", "strings"]
