"""
Parse Results - Discriminated outcome of running a transducer.

A parse is one of:
- success: exactly one output
- ambiguous: two or more outputs, in discovery order
- failure: no accepting path ("not possible")
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


NOT_POSSIBLE = "not possible"


class ResultKind(Enum):
    """Kinds of parse outcome."""
    SUCCESS = "success"
    AMBIGUOUS = "ambiguous"
    FAILURE = "failure"


@dataclass
class ParseResult:
    """
    Result of parsing one input.

    `output` is set only on success, `outputs` holds every candidate
    (one on success, several when ambiguous, none on failure).
    """
    kind: ResultKind
    output: str | None = None
    outputs: list[str] = field(default_factory=list)
    error: str | None = None

    @classmethod
    def success(cls, output: str) -> ParseResult:
        return cls(kind=ResultKind.SUCCESS, output=output, outputs=[output])

    @classmethod
    def ambiguous(cls, outputs: list[str]) -> ParseResult:
        return cls(kind=ResultKind.AMBIGUOUS, outputs=list(outputs))

    @classmethod
    def failure(cls, error: str = NOT_POSSIBLE) -> ParseResult:
        return cls(kind=ResultKind.FAILURE, error=error)

    @property
    def accepted(self) -> bool:
        """True for success and ambiguous results."""
        return self.kind != ResultKind.FAILURE

    @property
    def is_ambiguous(self) -> bool:
        return self.kind == ResultKind.AMBIGUOUS

    def as_tuple(self) -> tuple[str, Any]:
        """
        Tagged tuple form: ("ok", output), ("ambiguous", outputs)
        or ("error", reason).
        """
        if self.kind == ResultKind.SUCCESS:
            return ("ok", self.output)
        if self.kind == ResultKind.AMBIGUOUS:
            return ("ambiguous", list(self.outputs))
        return ("error", self.error)


def classify(outputs: list[str]) -> ParseResult:
    """Map a transducer's output list to a ParseResult."""
    if not outputs:
        return ParseResult.failure(NOT_POSSIBLE)
    if len(outputs) == 1:
        return ParseResult.success(outputs[0])
    return ParseResult.ambiguous(outputs)
