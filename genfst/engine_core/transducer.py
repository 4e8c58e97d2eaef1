"""
Transducer - Exhaustive traversal of a transition graph.

Given an input string, explores every path from the root that consumes
the whole input, and collects the output of each path that ends on a
terminal vertex.

Design principles:
- Pure function of (graph, input): the graph is never mutated
- Every matching edge is explored; dead branches contribute nothing
- No memoization or pruning: cost is exponential in the number of
  ambiguous branch points along the input. Rule graphs are expected
  to be small and shallow.
- Outputs come back in discovery order and are not deduplicated
"""

from __future__ import annotations
from dataclasses import dataclass
import logging

from .graph import TransitionGraph, Vertex
from .result import ParseResult, classify

logger = logging.getLogger(__name__)


@dataclass
class Transducer:
    """
    Runs input strings against a built graph.

    Stateless apart from the graph reference; safe to share between
    threads once the graph is built.
    """
    graph: TransitionGraph

    def transduce(self, text: str, start: Vertex | None = None) -> list[str]:
        """
        Return every output reachable by a path consuming all of `text`
        and ending on a terminal vertex.

        Depth-first with an explicit stack. Edges are pushed in reverse so
        they are popped in insertion order, which keeps the result order
        identical to a left-to-right recursive walk.
        """
        start = start or self.graph.root
        outputs: list[str] = []

        # (position in text, vertex, output so far)
        stack: list[tuple[int, Vertex, str]] = [(0, start, "")]
        while stack:
            position, vertex, produced = stack.pop()

            if position == len(text):
                if vertex.is_terminal:
                    outputs.append(produced)
                continue

            edges = self.graph.out_edges(vertex, text[position])
            for edge in reversed(edges):
                stack.append((position + 1, edge.target, produced + edge.label.output))

        return outputs

    def parse(self, text: str) -> ParseResult:
        """Transduce and classify."""
        result = classify(self.transduce(text))
        logger.debug("parse %r -> %s", text, result.kind.value)
        return result


def transduce(graph: TransitionGraph, text: str) -> list[str]:
    """
    Convenience function to transduce one input.
    """
    return Transducer(graph).transduce(text)
