"""Tests for the connection admission check."""
import pytest

from flowgraph.engine.connections import is_valid_connection
from flowgraph.engine.graph import Edge, Node


@pytest.fixture
def chain():
    nodes = [
        Node(id="t", type="trigger"),
        Node(id="A", type="action"),
        Node(id="B", type="action"),
        Node(id="C", type="action"),
    ]
    edges = [
        Edge(id="e1", source="A", target="B"),
        Edge(id="e2", source="B", target="C"),
    ]
    return nodes, edges


class TestConnectionCheck:
    @pytest.mark.parametrize("node_id", ["A", "t", "does-not-exist"])
    def test_self_connection(self, chain, node_id):
        check = is_valid_connection(node_id, node_id, None, *chain)
        assert not check.valid
        assert "itself" in check.reason

    def test_existing_connection(self, chain):
        check = is_valid_connection("A", "B", None, *chain)
        assert not check.valid
        assert "already exists" in check.reason

    def test_same_pair_other_handle_allowed(self, chain):
        check = is_valid_connection("A", "B", "yes", *chain)
        assert check.valid

    def test_missing_node(self, chain):
        check = is_valid_connection("A", "ghost", None, *chain)
        assert not check.valid
        assert "not found" in check.reason.lower()

    def test_trigger_target(self, chain):
        check = is_valid_connection("A", "t", None, *chain)
        assert not check.valid
        assert "trigger" in check.reason.lower()

    def test_legacy_trigger_target(self):
        nodes = [Node(id="a", type="action"), Node(id="s", type="dispatch-status-trigger")]
        check = is_valid_connection("a", "s", None, nodes, [])
        assert not check.valid
        assert "trigger" in check.reason.lower()

    def test_closing_edge_creates_cycle(self, chain):
        check = is_valid_connection("C", "A", None, *chain)
        assert not check.valid
        assert "cycle" in check.reason.lower()

    def test_loop_to_loop_back_edge_allowed(self):
        nodes = [Node(id="l1", type="loop"), Node(id="l2", type="forEach")]
        edges = [Edge(id="e1", source="l1", target="l2")]
        check = is_valid_connection("l2", "l1", None, nodes, edges)
        assert check.valid

    def test_valid(self, chain):
        check = is_valid_connection("t", "A", None, *chain)
        assert check.valid
        assert check.reason is None

    def test_does_not_mutate_edges(self, chain):
        nodes, edges = chain
        is_valid_connection("C", "A", None, nodes, edges)
        assert len(edges) == 2
