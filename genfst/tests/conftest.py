"""
Pytest fixtures for GenFST tests.
"""

import pytest

from genfst import fst as genfst
from genfst.engine_core import TransitionGraph
from genfst.api.service import APIService


MORPHOLOGY_RULES = [
    ["play", ("s", "^s")],
    ["act", ("s", "^s")],
    ["act", ("ed", "^ed")],
    ["act", ("ing", "")],
]


@pytest.fixture
def empty_fst() -> TransitionGraph:
    """A transducer with no rules."""
    return genfst.new()


@pytest.fixture
def morphology_fst() -> TransitionGraph:
    """Small English verb inflection parser."""
    return genfst.compile_rules(MORPHOLOGY_RULES)


@pytest.fixture
def ambiguous_fst() -> TransitionGraph:
    """Two rules reading "acting" differently, plus one unambiguous rule."""
    fst = genfst.new()
    genfst.rule(fst, ["act", ("ing", "")])
    genfst.rule(fst, ["act", ("ing", "e")])
    genfst.rule(fst, [("ate", "eat")])
    return fst


@pytest.fixture
def service() -> APIService:
    """A fresh API service."""
    return APIService()
