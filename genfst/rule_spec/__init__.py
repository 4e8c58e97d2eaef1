"""Rule specification - declarative rule items and their validation."""

from .rule_dsl import (
    Rule,
    RuleItem,
    RawRuleItem,
    Literal,
    Transform,
    coerce_item,
)
from .validation import (
    validate_rule,
    validate_rules,
    RuleValidationError,
    ValidationResult,
)

__all__ = [
    "Rule",
    "RuleItem",
    "RawRuleItem",
    "Literal",
    "Transform",
    "coerce_item",
    "validate_rule",
    "validate_rules",
    "RuleValidationError",
    "ValidationResult",
]
