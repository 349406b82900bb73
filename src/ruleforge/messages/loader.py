"""
messages/loader.py: YAML template catalogs for RuleForge message providers.

A catalog maps validation codes to message templates:

    templates:
      string.min_length: "Name needs at least {min} characters"
      billing.iban_checksum: "'{field}' is not a valid IBAN"

Catalogs are validated against ``schemas/templates.schema.json`` before use.

Usage:
    from ruleforge.messages.loader import apply_template_file, validate_template_file

    issues = validate_template_file(Path("messages/en.yaml"))
    for issue in issues:
        print(issue)

    apply_template_file(provider, Path("messages/en.yaml"))
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from ruleforge.codes import is_known_code
from ruleforge.messages.provider import DefaultMessageProvider

logger = logging.getLogger(__name__)

_SCHEMA_PATH = Path(__file__).parent / "schemas" / "templates.schema.json"


@dataclass
class TemplateIssue:
    """A single problem found in a template catalog."""

    file: Path
    message: str
    path: str = ""          # location within the document, e.g. "templates/string.min_length"

    def __str__(self) -> str:
        loc = f" at {self.path}" if self.path else ""
        return f"[ERROR] {self.file}{loc}: {self.message}"


class TemplateFileError(Exception):
    """A template catalog could not be loaded."""

    def __init__(self, file: Path, issues: list[TemplateIssue]):
        self.file = file
        self.issues = issues
        summary = "; ".join(issue.message for issue in issues)
        super().__init__(f"Invalid template catalog {file}: {summary}")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_schema() -> dict[str, Any]:
    with _SCHEMA_PATH.open() as fh:
        return json.load(fh)


def _json_path(error: ValidationError) -> str:
    return "/".join(str(p) for p in error.absolute_path)


def _read_catalog(yaml_path: Path) -> tuple[Any, list[TemplateIssue]]:
    try:
        with Path(yaml_path).open() as fh:
            raw = yaml.safe_load(fh)
    except OSError as exc:
        return None, [TemplateIssue(file=yaml_path, message=f"Cannot read file: {exc}")]
    except yaml.YAMLError as exc:
        return None, [TemplateIssue(file=yaml_path, message=f"YAML parse error: {exc}")]

    if raw is None:
        return None, [
            TemplateIssue(file=yaml_path, message="File is empty or contains only whitespace")
        ]
    return raw, []


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate_template_file(yaml_path: Path) -> list[TemplateIssue]:
    """
    Validate a template catalog against the bundled JSON Schema.

    Returns:
        A list of :class:`TemplateIssue` objects (empty on success).
    """
    raw, issues = _read_catalog(yaml_path)
    if issues:
        return issues

    validator = Draft202012Validator(_load_schema())
    for error in sorted(validator.iter_errors(raw), key=lambda e: list(e.path)):
        issues.append(
            TemplateIssue(file=yaml_path, message=error.message, path=_json_path(error))
        )
    return issues


def load_template_file(yaml_path: Path, *, validate: bool = True) -> dict[str, str]:
    """
    Load a template catalog.

    Args:
        yaml_path: Path to the YAML catalog.
        validate:  Check the document against the JSON Schema first.

    Returns:
        Mapping of validation code to template string.

    Raises:
        TemplateFileError: If the file is unreadable, empty, or invalid.
    """
    if validate:
        issues = validate_template_file(yaml_path)
        if issues:
            logger.warning(
                "Template catalog %s has %d issue(s); first: %s",
                yaml_path,
                len(issues),
                issues[0].message,
            )
            raise TemplateFileError(yaml_path, issues)

    raw, issues = _read_catalog(yaml_path)
    if issues:
        logger.warning("Cannot load template catalog %s: %s", yaml_path, issues[0].message)
        raise TemplateFileError(yaml_path, issues)
    if not isinstance(raw, dict) or not isinstance(raw.get("templates"), dict):
        raise TemplateFileError(
            yaml_path,
            [TemplateIssue(file=yaml_path, message="Missing 'templates' mapping")],
        )

    templates = {str(code): str(template) for code, template in raw["templates"].items()}
    for code in templates:
        if not is_known_code(code):
            logger.debug("Template catalog %s defines custom code '%s'", yaml_path, code)
    return templates


def apply_template_file(
    provider: DefaultMessageProvider,
    yaml_path: Path,
    *,
    validate: bool = True,
) -> int:
    """
    Load a template catalog into a provider.

    Returns:
        Number of templates applied.
    """
    templates = load_template_file(yaml_path, validate=validate)
    provider.set_templates(templates)
    logger.debug("Applied %d template(s) from %s", len(templates), yaml_path)
    return len(templates)
