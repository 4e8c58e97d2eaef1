"""
Tests for the graph builder and transition graph.

Tests:
- Edge-creation primitive and vertex identity
- Prefix sharing between rules
- Deterministic compilation
- Terminal vs transitional vertices
- Idempotent edge insertion
"""

from genfst.engine_core.graph import (
    TransitionGraph,
    Vertex,
    VertexStatus,
    Edge,
    EdgeLabel,
    ROOT,
)
from genfst.rule_compiler import GraphBuilder, build
from genfst.rule_spec import Rule


def _v(prefix, output, status=VertexStatus.TRANSITIONAL):
    return Vertex(prefix, output, status)


class TestTransitionGraph:
    """Tests for the graph container."""

    def test_new_graph_has_only_root(self):
        """A fresh graph holds exactly the root and no edges."""
        graph = TransitionGraph()
        assert graph.vertices() == [ROOT]
        assert graph.edge_count == 0
        assert graph.root.status == VertexStatus.INITIAL

    def test_add_edge_is_idempotent(self):
        """Adding the same edge twice stores it once."""
        graph = TransitionGraph()
        edge = Edge(ROOT, _v("a", "a"), EdgeLabel("a", "a"))

        assert graph.add_edge(edge) is True
        assert graph.add_edge(edge) is False
        assert graph.edge_count == 1
        assert graph.out_edges(ROOT) == [edge]

    def test_out_edges_filtered_by_symbol(self):
        """Filtering by input codepoint keeps insertion order."""
        graph = TransitionGraph()
        e1 = Edge(ROOT, _v("a", "x"), EdgeLabel("a", "x"))
        e2 = Edge(ROOT, _v("b", "b"), EdgeLabel("b", "b"))
        e3 = Edge(ROOT, _v("a", "y"), EdgeLabel("a", "y"))
        for e in (e1, e2, e3):
            graph.add_edge(e)

        assert graph.out_edges(ROOT, "a") == [e1, e3]
        assert graph.out_edges(ROOT, "b") == [e2]
        assert graph.out_edges(ROOT, "z") == []
        assert graph.out_edges(_v("unknown", "")) == []

    def test_status_is_part_of_identity(self):
        """Same prefix and output, different status: different vertices."""
        assert _v("act", "t") != _v("act", "t", VertexStatus.TERMINAL)
        assert _v("act", "t") == _v("act", "t")
        assert len({_v("act", "t"), _v("act", "t", VertexStatus.TERMINAL)}) == 2

    def test_identity_does_not_go_through_signature(self):
        """Vertices with the same display signature stay distinct."""
        after_output = Vertex.for_step("a", ":b", closing=False)
        after_input = Vertex.for_step("a:", "b", closing=False)

        assert after_output.signature == after_input.signature == "a::b"
        assert after_output != after_input


class TestGraphBuilder:
    """Tests for folding rules into the graph."""

    def test_literal_rule_builds_chain(self):
        """A literal rule is a chain ending on a terminal vertex."""
        graph = build(TransitionGraph(), ["act"])

        assert graph.edge_count == 3
        assert [e.label for e in graph.out_edges(ROOT)] == [EdgeLabel("a", "a")]
        assert graph.terminal_vertices() == [_v("act", "t", VertexStatus.TERMINAL)]

    def test_signature_uses_last_fragment(self):
        """Signatures hold cumulative input but only the last output fragment."""
        graph = build(TransitionGraph(), ["act", ("ed", "^ed")])
        signatures = {v.signature for v in graph.vertices()}

        assert {"a:a", "ac:c", "act:t", "acte:^", "acted:ed"} <= signatures

    def test_prefix_sharing(self):
        """Rules sharing a literal prefix share one vertex chain."""
        graph = TransitionGraph()
        build(graph, ["act", ("s", "^s")])
        build(graph, ["act", ("ed", "^ed")])

        # shared a-c-t chain, then s / e-d
        assert graph.edge_count == 6
        assert graph.vertex_count == 7
        assert len(graph.out_edges(ROOT)) == 1

        fork = _v("act", "t")
        assert [e.label.input for e in graph.out_edges(fork)] == ["s", "e"]

    def test_diverging_outputs_fork(self):
        """Different outputs for the same input become sibling edges."""
        graph = TransitionGraph()
        build(graph, ["act", ("ing", "")])
        build(graph, ["act", ("ing", "e")])

        fork = graph.out_edges(_v("act", "t"), "i")
        assert [e.label.output for e in fork] == ["", "e"]
        assert graph.edge_count == 8
        assert graph.vertex_count == 8

    def test_terminality_differs_by_rule(self):
        """A rule ending where another continues yields a separate vertex."""
        graph = TransitionGraph()
        build(graph, ["act"])
        build(graph, ["act", "s"])

        after_c = graph.out_edges(_v("ac", "c"), "t")
        assert {e.target.status for e in after_c} == {
            VertexStatus.TERMINAL,
            VertexStatus.TRANSITIONAL,
        }
        assert graph.edge_count == 5

    def test_only_last_item_closes(self):
        """Closing steps of earlier items do not make terminals."""
        graph = build(TransitionGraph(), [("ab", "xy"), ("cd", "zw")])
        assert len(graph.terminal_vertices()) == 1
        assert graph.terminal_vertices()[0].signature == "abcd:w"

    def test_registering_same_rule_twice_adds_nothing(self):
        """Edge insertion is idempotent across rules."""
        graph = build(TransitionGraph(), ["play", ("s", "^s")])
        before = (graph.vertex_count, graph.edge_count)
        build(graph, ["play", ("s", "^s")])
        assert (graph.vertex_count, graph.edge_count) == before

    def test_deterministic_compilation(self):
        """Same rules in the same order give identical graphs."""
        rules = [
            ["play", ("s", "^s")],
            ["act", ("ing", "")],
            ["act", ("ing", "e")],
            [("better", "good^er")],
        ]
        g1 = GraphBuilder(TransitionGraph()).add_rules(rules)
        g2 = GraphBuilder(TransitionGraph()).add_rules(rules)

        assert g1.vertices() == g2.vertices()
        assert g1.edges() == g2.edges()

    def test_accepts_rule_objects(self):
        """Rule instances and raw lists compile the same."""
        g1 = build(TransitionGraph(), Rule.of("act", ("s", "^s")))
        g2 = build(TransitionGraph(), ["act", ("s", "^s")])
        assert g1.edges() == g2.edges()

    def test_empty_rule_adds_nothing(self):
        graph = build(TransitionGraph(), [])
        assert graph.edge_count == 0
        assert graph.vertex_count == 1
