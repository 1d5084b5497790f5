"""Admission check for a single edge proposed while the user drags a connection."""
from dataclasses import dataclass
from typing import Sequence

from .cycles import has_unintentional_cycles
from .graph import Edge, Node, loop_node_ids

PROPOSED_EDGE_ID = "__proposed__"


@dataclass(frozen=True)
class ConnectionCheck:
    valid: bool
    reason: str | None = None


def is_valid_connection(
    source: str,
    target: str,
    source_handle: str | None,
    nodes: Sequence[Node],
    edges: Sequence[Edge],
) -> ConnectionCheck:
    """Decide whether ``source -> target`` may be added. First failing check wins."""
    if source == target:
        return ConnectionCheck(False, "Cannot connect a node to itself")

    for edge in edges:
        if (edge.source, edge.target, edge.source_handle) == (source, target, source_handle):
            return ConnectionCheck(False, "Connection already exists")

    by_id = {n.id: n for n in nodes}
    source_node = by_id.get(source)
    target_node = by_id.get(target)
    if source_node is None or target_node is None:
        return ConnectionCheck(False, "Node not found")

    if target_node.is_trigger_like:
        return ConnectionCheck(False, "Triggers cannot receive incoming connections")

    proposed = Edge(id=PROPOSED_EDGE_ID, source=source, target=target, source_handle=source_handle)
    if has_unintentional_cycles(nodes, [*edges, proposed], loop_node_ids(nodes)):
        return ConnectionCheck(False, "Connection would create a cycle")

    return ConnectionCheck(True)
