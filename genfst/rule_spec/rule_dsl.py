"""
Rule DSL - Declarative transducing rules.

A rule is an ordered list of items:
- Literal("act"): copy the text verbatim, codepoint for codepoint
- Transform("ing", ""): read the source, write the destination
  (lengths may differ)

The raw form used throughout the public API is a plain list:

    ["play", ("s", "^s")]

strings are literals and 2-item pairs are transformations. Rule.from_items()
converts the raw form; validation of malformed items lives in validation.py.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterable, Union


@dataclass(frozen=True)
class Literal:
    """Text copied to the output unchanged."""
    text: str

    def to_raw(self) -> str:
        return self.text


@dataclass(frozen=True)
class Transform:
    """Source text rewritten to destination text."""
    source: str
    destination: str

    def to_raw(self) -> tuple[str, str]:
        return (self.source, self.destination)


RuleItem = Union[Literal, Transform]

# str | tuple[str, str] | list[str] as accepted by the public API
RawRuleItem = Any


@dataclass(frozen=True)
class Rule:
    """
    An ordered sequence of rule items.

    Usage:
        rule = Rule.from_items(["act", ("ed", "^ed")])
        rule.input_text   # "acted"
        rule.output_text  # "act^ed"
    """
    items: tuple[RuleItem, ...] = ()

    @classmethod
    def from_items(cls, items: Iterable[RawRuleItem]) -> Rule:
        """
        Build a rule from raw items.

        Raises TypeError for items that are neither text nor a pair.
        """
        return cls(items=tuple(coerce_item(item) for item in items))

    @classmethod
    def of(cls, *items: RawRuleItem) -> Rule:
        """Factory for rules written inline: Rule.of("act", ("s", "^s"))."""
        return cls.from_items(items)

    @property
    def input_text(self) -> str:
        """The input this rule accepts."""
        return "".join(
            item.text if isinstance(item, Literal) else item.source
            for item in self.items
        )

    @property
    def output_text(self) -> str:
        """The output this rule produces for input_text."""
        return "".join(
            item.text if isinstance(item, Literal) else item.destination
            for item in self.items
        )

    def to_raw(self) -> list[RawRuleItem]:
        return [item.to_raw() for item in self.items]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


def coerce_item(item: RawRuleItem) -> RuleItem:
    """Convert one raw item into a Literal or Transform."""
    if isinstance(item, (Literal, Transform)):
        return item
    if isinstance(item, str):
        return Literal(item)
    if isinstance(item, (tuple, list)) and len(item) == 2:
        source, destination = item
        if isinstance(source, str) and isinstance(destination, str):
            return Transform(source, destination)
    raise TypeError(f"Invalid rule item: {item!r}")
