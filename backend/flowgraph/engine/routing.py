"""Branch routing: which successors the runtime follows after a node ran."""
from typing import Sequence

from .graph import Edge, Node

_BRANCH_ALIASES = {"true": "yes", "false": "no"}


def _is_condition(node: Node) -> bool:
    return "condition" in node.type or "if-" in node.type


def _edge_matches(edge: Edge, value: str) -> bool:
    handle = (edge.source_handle or "").lower()
    label = (edge.label or "").lower()
    return value in (handle, label)


def next_nodes(
    node: Node,
    edges: Sequence[Edge],
    selected_branch: str | None = None,
    selected_case: str | None = None,
) -> list[str]:
    """Return target ids of the outgoing edges to follow, in edge order.

    Condition nodes follow the selected yes/no branch; if no edge matches a
    "yes" they follow every edge. Switch nodes follow the selected case plus
    any "default" edge. Everything else follows all outgoing edges.
    """
    outgoing = [e for e in edges if e.source == node.id]

    if _is_condition(node):
        branch = (selected_branch or "yes").lower()
        branch = _BRANCH_ALIASES.get(branch, branch)
        targets = [e.target for e in outgoing if _edge_matches(e, branch)]
        if not targets and branch == "yes":
            targets = [e.target for e in outgoing]
        return targets

    if "switch" in node.type:
        case = (selected_case or "default").lower()
        return [
            e.target for e in outgoing
            if _edge_matches(e, case) or _edge_matches(e, "default")
        ]

    return [e.target for e in outgoing]
