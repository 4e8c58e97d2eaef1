"""
Rule Validation - Checks rule declarations before they are compiled.

Validates that:
1. Every item is text or a (source, destination) pair of text
2. Transformations consume at least one codepoint when they emit output
3. The rule can actually reach a terminal vertex

Malformed items are declaration errors, not parse failures; they are
reported here and never reach the graph builder.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable

from .rule_dsl import Literal, Transform, Rule, RawRuleItem


class RuleValidationError(Exception):
    """Raised when rule validation fails."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Rule validation failed with {len(errors)} error(s)")


@dataclass
class ValidationResult:
    """Result of validation, with errors and warnings."""
    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def validate_rule(items: Iterable[RawRuleItem] | Rule) -> ValidationResult:
    """
    Validate one rule, given as a Rule or as raw items.

    Returns ValidationResult with errors and warnings.
    """
    errors: list[str] = []
    warnings: list[str] = []

    if isinstance(items, Rule):
        raw_items = list(items.items)
    elif isinstance(items, (str, bytes)):
        return ValidationResult(
            valid=False,
            errors=["rule must be a list of items, not a single string"],
        )
    else:
        try:
            raw_items = list(items)
        except TypeError:
            return ValidationResult(
                valid=False,
                errors=[f"rule must be a list of items, got {type(items).__name__}"],
            )

    if not raw_items:
        warnings.append("rule is empty and will never accept any input")
        return ValidationResult(valid=True, warnings=warnings)

    for i, item in enumerate(raw_items):
        errors.extend(_validate_item(i, item, warnings))

    if not errors and not _has_steps(raw_items[-1]):
        warnings.append(
            "last item consumes no input; rule can never reach a terminal vertex"
        )

    return ValidationResult(valid=not errors, errors=errors, warnings=warnings)


def validate_rules(rules: Iterable[Iterable[RawRuleItem] | Rule]) -> ValidationResult:
    """Validate several rules, prefixing messages with the rule index."""
    errors: list[str] = []
    warnings: list[str] = []

    for i, rule in enumerate(rules):
        result = validate_rule(rule)
        errors.extend(f"rule {i}: {e}" for e in result.errors)
        warnings.extend(f"rule {i}: {w}" for w in result.warnings)

    return ValidationResult(valid=not errors, errors=errors, warnings=warnings)


def _validate_item(index: int, item: RawRuleItem, warnings: list[str]) -> list[str]:
    """Validate a single rule item."""
    errors: list[str] = []
    prefix = f"item {index}"

    if isinstance(item, Literal):
        item = item.text
    elif isinstance(item, Transform):
        item = (item.source, item.destination)

    if isinstance(item, str):
        if not item:
            warnings.append(f"{prefix}: empty literal has no effect")
        return errors

    if not isinstance(item, (tuple, list)):
        errors.append(
            f"{prefix}: expected text or a (source, destination) pair, "
            f"got {type(item).__name__}"
        )
        return errors

    if len(item) != 2:
        errors.append(f"{prefix}: transformation must have exactly 2 parts, got {len(item)}")
        return errors

    source, destination = item
    if not isinstance(source, str):
        errors.append(f"{prefix}: transformation source must be text")
    if not isinstance(destination, str):
        errors.append(f"{prefix}: transformation destination must be text")
    if errors:
        return errors

    if not source and destination:
        errors.append(
            f"{prefix}: transformation with empty source cannot emit "
            f"{destination!r} without consuming input"
        )
    elif not source:
        warnings.append(f"{prefix}: empty transformation has no effect")

    return errors


def _has_steps(item: RawRuleItem) -> bool:
    """Whether an item consumes at least one codepoint."""
    if isinstance(item, Literal):
        return bool(item.text)
    if isinstance(item, Transform):
        return bool(item.source)
    if isinstance(item, str):
        return bool(item)
    return bool(item[0])
