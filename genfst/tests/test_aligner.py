"""
Tests for the rule aligner.

Tests:
- Equal, longer and shorter source alignments
- Reconstruction of source and destination
- Closing flag placement
- Degenerate lengths
"""

import pytest

from genfst.rule_compiler.aligner import AlignmentStep, align, identity


def _inputs(steps):
    return "".join(s.input for s in steps)


def _outputs(steps):
    return "".join(s.output for s in steps)


class TestAlignmentCases:
    """Tests for the three length relations."""

    def test_equal_lengths_zip(self):
        """Equal lengths align one codepoint to one codepoint."""
        steps = align("ate", "eat")
        assert steps == [
            AlignmentStep("a", "e", False),
            AlignmentStep("t", "a", False),
            AlignmentStep("e", "t", True),
        ]

    def test_source_longer_deletes_tail(self):
        """Extra source codepoints map to empty output."""
        steps = align("ing", "e")
        assert steps == [
            AlignmentStep("i", "e", False),
            AlignmentStep("n", "", False),
            AlignmentStep("g", "", True),
        ]

    def test_source_shorter_last_codepoint_absorbs_remainder(self):
        """The last source codepoint carries the rest of the destination."""
        steps = align("ed", "^ed")
        assert steps == [
            AlignmentStep("e", "^", False),
            AlignmentStep("d", "ed", True),
        ]

    @pytest.mark.parametrize("source,destination", [
        ("ate", "eat"),
        ("ing", ""),
        ("ing", "e"),
        ("ed", "^ed"),
        ("s", "^s"),
        ("better", "good^er"),
        ("running", "run^ing"),
        ("x", "xyz"),
        ("h\u00e9llo", "h\u00e9"),
    ])
    def test_reconstructs_source_and_destination(self, source, destination):
        """Concatenated inputs and outputs rebuild both sides."""
        steps = align(source, destination)
        assert _inputs(steps) == source
        assert _outputs(steps) == destination
        assert all(len(s.input) == 1 for s in steps)

    @pytest.mark.parametrize("source,destination", [
        ("ate", "eat"),
        ("ing", ""),
        ("ed", "^ed"),
    ])
    def test_only_last_step_closing(self, source, destination):
        """Exactly one step, the last, is closing."""
        steps = align(source, destination)
        assert [s.closing for s in steps] == [False] * (len(steps) - 1) + [True]


class TestDegenerateAlignments:
    """Tests for edge-case lengths."""

    def test_empty_destination(self):
        """Pure deletion: every step outputs nothing."""
        steps = align("ing", "")
        assert [s.output for s in steps] == ["", "", ""]

    def test_single_codepoint_source(self):
        """A one-codepoint source takes the whole destination."""
        steps = align("s", "^s")
        assert steps == [AlignmentStep("s", "^s", True)]

    def test_both_empty(self):
        """Nothing to align."""
        assert align("", "") == []

    def test_empty_source_rejected(self):
        """An insertion with no input to consume cannot be aligned."""
        with pytest.raises(ValueError):
            align("", "abc")


class TestIdentity:
    """Tests for literal identity alignment."""

    def test_identity(self):
        steps = identity("act")
        assert [(s.input, s.output) for s in steps] == [("a", "a"), ("c", "c"), ("t", "t")]
        assert steps[-1].closing
        assert not any(s.closing for s in steps[:-1])

    def test_identity_empty(self):
        assert identity("") == []
