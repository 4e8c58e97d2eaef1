"""
Graph Builder - Folds rules into the shared transition graph.

The builder:
1. Starts every rule at the root
2. Turns literal items into identity steps and transformations into
   aligned steps
3. Feeds each step through one edge-creation primitive
4. Marks the target terminal only for the last step of the last item

Identical literal prefixes from different rules land on the same vertex
chain; outputs that diverge at the same input position fork into sibling
edges from a shared vertex.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable
import logging

from ..engine_core.graph import TransitionGraph, Vertex, Edge, EdgeLabel
from ..rule_spec import Rule, Literal, RawRuleItem
from .aligner import AlignmentStep, align, identity

logger = logging.getLogger(__name__)


@dataclass
class BuildCursor:
    """Position of the builder while threading one rule."""
    vertex: Vertex
    prefix: str = ""


@dataclass
class GraphBuilder:
    """
    Compiles rules into a TransitionGraph.

    Usage:
        builder = GraphBuilder(graph)
        builder.add_rule(Rule.of("act", ("ed", "^ed")))
        builder.add_rule(["act", ("s", "^s")])
    """
    graph: TransitionGraph

    def add_rule(self, rule: Rule | Iterable[RawRuleItem]) -> TransitionGraph:
        """
        Thread one rule through the graph, starting at the root.

        Returns the (mutated) graph.
        """
        if not isinstance(rule, Rule):
            rule = Rule.from_items(rule)

        cursor = BuildCursor(vertex=self.graph.root)
        added = 0
        last_item = len(rule.items) - 1

        for i, item in enumerate(rule.items):
            for step in self._steps_for(item):
                closing = step.closing and i == last_item
                if self._add_step(cursor, step, closing):
                    added += 1

        logger.debug(
            "compiled rule %r: %d new edge(s), ends at %s",
            rule.input_text,
            added,
            cursor.vertex.status.value,
        )
        return self.graph

    def add_rules(self, rules: Iterable[Rule | Iterable[RawRuleItem]]) -> TransitionGraph:
        """Fold several rules in registration order."""
        for rule in rules:
            self.add_rule(rule)
        return self.graph

    def _steps_for(self, item) -> list[AlignmentStep]:
        if isinstance(item, Literal):
            return identity(item.text)
        return align(item.source, item.destination)

    def _add_step(self, cursor: BuildCursor, step: AlignmentStep, closing: bool) -> bool:
        """
        Edge-creation primitive.

        Creates (or reuses) the edge for one step and advances the cursor.
        Returns True if a new edge was inserted.
        """
        new_prefix = cursor.prefix + step.input
        target = Vertex.for_step(new_prefix, step.output, closing)
        edge = Edge(
            source=cursor.vertex,
            target=target,
            label=EdgeLabel(input=step.input, output=step.output),
        )
        inserted = self.graph.add_edge(edge)

        cursor.vertex = target
        cursor.prefix = new_prefix
        return inserted


def build(graph: TransitionGraph, rule: Rule | Iterable[RawRuleItem]) -> TransitionGraph:
    """
    Convenience function: graph in, rule in, graph out.
    """
    return GraphBuilder(graph).add_rule(rule)
