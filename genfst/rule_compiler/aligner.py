"""
Rule Aligner - Splits a transformation into single-codepoint steps.

Every step consumes exactly one input codepoint, because every edge of
the transducer must advance the input tape. Three cases:

- equal lengths:        zip codepoint for codepoint
- source longer:        zip the first len(destination) codepoints, then
                        each remaining source codepoint maps to ""
- source shorter:       zip the first len(source) - 1 codepoints, then the
                        last source codepoint carries the whole remainder
                        of the destination

Only the last step of an item is marked closing.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class AlignmentStep:
    """One edit step: consume `input`, emit `output`."""
    input: str
    output: str
    closing: bool = False


def align(source: str, destination: str) -> list[AlignmentStep]:
    """
    Align a (source, destination) pair into edit steps.

    Concatenated inputs equal `source` and concatenated outputs equal
    `destination`. Raises ValueError if `source` is empty but
    `destination` is not, since such an insertion consumes no input.
    """
    if not source:
        if destination:
            raise ValueError(
                f"Cannot align empty source with destination {destination!r}"
            )
        return []

    if len(source) > len(destination):
        pairs = list(zip(source, destination))
        pairs.extend((cp, "") for cp in source[len(destination):])
    elif len(source) < len(destination):
        head = len(source) - 1
        pairs = list(zip(source[:head], destination[:head]))
        pairs.append((source[head:], destination[head:]))
    else:
        pairs = list(zip(source, destination))

    last = len(pairs) - 1
    return [
        AlignmentStep(input=cp_in, output=cp_out, closing=i == last)
        for i, (cp_in, cp_out) in enumerate(pairs)
    ]


def identity(text: str) -> list[AlignmentStep]:
    """Identity alignment for literal text."""
    last = len(text) - 1
    return [
        AlignmentStep(input=cp, output=cp, closing=i == last)
        for i, cp in enumerate(text)
    ]
