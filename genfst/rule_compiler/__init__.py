"""
Rule Compiler - Compiles declarative rules into the transition graph.

The rule compiler:
1. Aligns each transformation into single-codepoint edit steps
2. Threads every rule from the root, sharing common prefixes
3. Leaves a graph that is only read afterwards
"""

from .aligner import AlignmentStep, align, identity
from .compiler import GraphBuilder, BuildCursor, build

__all__ = [
    "AlignmentStep",
    "align",
    "identity",
    "GraphBuilder",
    "BuildCursor",
    "build",
]
