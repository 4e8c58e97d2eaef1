"""
Engine Core - Transition graph, traversal and parse results.

The engine is the runtime that:
1. Holds the transition graph built from rules
2. Walks it exhaustively for an input string
3. Classifies the outputs into success, ambiguous or failure
"""

from .graph import (
    TransitionGraph,
    Vertex,
    VertexStatus,
    Edge,
    EdgeLabel,
    ROOT,
    SIGNATURE_SEPARATOR,
)
from .result import ParseResult, ResultKind, classify, NOT_POSSIBLE
from .transducer import Transducer, transduce

__all__ = [
    "TransitionGraph",
    "Vertex",
    "VertexStatus",
    "Edge",
    "EdgeLabel",
    "ROOT",
    "SIGNATURE_SEPARATOR",
    "ParseResult",
    "ResultKind",
    "classify",
    "NOT_POSSIBLE",
    "Transducer",
    "transduce",
]
