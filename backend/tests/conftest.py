"""Shared test fixtures for flowgraph backend tests."""
import sys
from pathlib import Path

import pytest

# Ensure flowgraph package is importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from flowgraph.engine.graph import Edge, Node


@pytest.fixture(scope="session", autouse=True)
def register_rules():
    """Discover and register all config rules once per test session."""
    from flowgraph.nodes.registry import RuleRegistry
    RuleRegistry.discover("flowgraph.nodes")


@pytest.fixture
def linear_workflow():
    """trigger -> send email -> update record."""
    nodes = [
        Node(id="t1", type="trigger", label="Offer accepted"),
        Node(
            id="email", type="send-email", label="Notify customer",
            config={"emailData": {"subject": "Your offer"}},
        ),
        Node(id="update", type="action", label="Create sale"),
    ]
    edges = [
        Edge(id="e1", source="t1", target="email"),
        Edge(id="e2", source="email", target="update"),
    ]
    return nodes, edges


@pytest.fixture
def condition_workflow():
    """trigger -> if-else with yes/no branches."""
    nodes = [
        Node(id="t1", type="sale-status-trigger", label="Sale in progress"),
        Node(id="cond", type="if-else", label="Has services"),
        Node(id="yes_action", type="action", label="Create service order"),
        Node(id="no_action", type="action", label="Close sale"),
    ]
    edges = [
        Edge(id="e1", source="t1", target="cond"),
        Edge(id="e2", source="cond", target="yes_action", source_handle="yes"),
        Edge(id="e3", source="cond", target="no_action", source_handle="no"),
    ]
    return nodes, edges
