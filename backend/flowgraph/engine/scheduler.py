"""Execution scheduling: level-order topological sort into parallel steps."""
from typing import Sequence

from .graph import Edge, GraphIndex, Node
from .validator import WorkflowValidationError, validate_workflow


def get_execution_steps(nodes: Sequence[Node], edges: Sequence[Edge]) -> list[list[str]]:
    """Kahn's algorithm returning node IDs grouped into steps.

    Nodes in one step have no dependency on each other. Nodes Kahn never
    reaches (cycle members and anything downstream of them) are appended as
    a final, unordered step; cyclic graphs are not rejected here.
    """
    index = GraphIndex(nodes, edges)
    if not len(index):
        return []

    in_degree = list(index.in_degree)
    visited = [False] * len(index)
    frontier = [i for i, deg in enumerate(in_degree) if deg == 0]
    for i in frontier:
        visited[i] = True

    steps: list[list[str]] = []
    while frontier:
        steps.append([index.nodes[i].id for i in frontier])
        next_frontier: list[int] = []
        for node in frontier:
            for succ in index.successors[node]:
                in_degree[succ] -= 1
                if in_degree[succ] == 0 and not visited[succ]:
                    visited[succ] = True
                    next_frontier.append(succ)
        frontier = next_frontier

    leftover = [index.nodes[i].id for i, seen in enumerate(visited) if not seen]
    if leftover:
        steps.append(leftover)
    return steps


def execution_order(nodes: Sequence[Node], edges: Sequence[Edge]) -> list[str]:
    """Steps flattened into one sequential order."""
    return [node_id for step in get_execution_steps(nodes, edges) for node_id in step]


def plan_execution(nodes: Sequence[Node], edges: Sequence[Edge]) -> list[list[str]]:
    """Validate, then schedule. Raises WorkflowValidationError on a blocking error."""
    result = validate_workflow(nodes, edges)
    if not result.is_valid:
        raise WorkflowValidationError(result.errors)
    return get_execution_steps(nodes, edges)
