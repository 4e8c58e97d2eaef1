"""
GenFST - A generic finite-state transducer driven by declarative rules.

A finite-state transducer reads an input tape and writes a related output
tape. Here the machine is described by rules: ordered lists of literal text
and (source, destination) transformations. Rules accumulate into one shared
graph, and parsing walks that graph for every way to consume the input.

Example - a tiny morphological parser for English verbs:

    fst = new()
    rule(fst, ["play", ("s", "^s")])
    rule(fst, ["act", ("s", "^s")])
    rule(fst, ["act", ("ed", "^ed")])
    rule(fst, ["act", ("ing", "")])

    parse(fst, "plays").output   # "play^s"
    parse(fst, "acting").output  # "act"

Core operations are new(), rule() and parse(). parse_batch(), can_parse()
and stats() are thin helpers over them.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Iterable
import logging

from .engine_core import TransitionGraph, Transducer, ParseResult
from .rule_compiler import GraphBuilder
from .rule_spec import Rule, RawRuleItem, validate_rule, RuleValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FSTStats:
    """Size of a transducer's graph."""
    vertex_count: int
    edge_count: int
    terminal_vertices: int

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


def new() -> TransitionGraph:
    """Create a new, empty transducer (a graph holding only the root)."""
    return TransitionGraph()


def rule(fst: TransitionGraph, items: Rule | Iterable[RawRuleItem]) -> TransitionGraph:
    """
    Add a transducing rule to the fst.

    A rule is a list of `str | (str, str)`. For example
    `rule(fst, ["play", ("s", "^s")])` outputs "play" verbatim and turns
    "s" into "^s": fed "plays", the transducer outputs "play^s".

    Raises RuleValidationError if an item is malformed.
    """
    # materialize generators; validation and building both iterate
    if not isinstance(items, (Rule, str, list)) and hasattr(items, "__iter__"):
        items = list(items)

    validation = validate_rule(items)
    if not validation.valid:
        raise RuleValidationError(validation.errors)
    for warning in validation.warnings:
        logger.warning("rule %r: %s", items, warning)

    return GraphBuilder(fst).add_rule(items)


def compile_rules(rules: Iterable[Rule | Iterable[RawRuleItem]]) -> TransitionGraph:
    """Build a fresh transducer from several rules, in order."""
    fst = new()
    for r in rules:
        rule(fst, r)
    return fst


def parse(fst: TransitionGraph, text: str) -> ParseResult:
    """
    Parse the input by transducing it with the given fst.

    Returns a ParseResult that is:
    - success with the single output when exactly one transduction exists
    - ambiguous with every output when several exist
    - failure ("not possible") when none exists
    """
    return Transducer(fst).parse(text)


def parse_batch(fst: TransitionGraph, inputs: Iterable[str]) -> list[ParseResult]:
    """Parse several inputs independently, preserving their order."""
    transducer = Transducer(fst)
    return [transducer.parse(text) for text in inputs]


def can_parse(fst: TransitionGraph, text: str) -> bool:
    """True if parsing succeeds, ambiguous or not."""
    return parse(fst, text).accepted


def stats(fst: TransitionGraph) -> FSTStats:
    """Vertex, edge and terminal vertex counts of the fst."""
    return FSTStats(
        vertex_count=fst.vertex_count,
        edge_count=fst.edge_count,
        terminal_vertices=len(fst.terminal_vertices()),
    )
