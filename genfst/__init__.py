"""
GenFST - Generic Finite-State Transducer

A rules-driven transducer mapping input strings to output strings.
The package provides:
- A rule DSL of literal text and (source, destination) transformations
- A compiler folding rules into one shared transition graph
- An exhaustive, non-deterministic traversal engine
- A REST API and CLI over the same two core operations
"""

__version__ = "0.5.0"

from .fst import (
    FSTStats,
    new,
    rule,
    compile_rules,
    parse,
    parse_batch,
    can_parse,
    stats,
)
from .engine_core import ParseResult, ResultKind, TransitionGraph
from .rule_spec import Rule, Literal, Transform, RuleValidationError

__all__ = [
    "__version__",
    "FSTStats",
    "new",
    "rule",
    "compile_rules",
    "parse",
    "parse_batch",
    "can_parse",
    "stats",
    "ParseResult",
    "ResultKind",
    "TransitionGraph",
    "Rule",
    "Literal",
    "Transform",
    "RuleValidationError",
]
