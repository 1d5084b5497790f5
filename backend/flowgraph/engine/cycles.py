"""Cycle detection with the loop-node exemption."""
from typing import Iterable

from .graph import Edge, GraphIndex, Node


def filter_loop_edges(edges: Iterable[Edge], loop_node_ids: set[str]) -> list[Edge]:
    """Drop edges whose source and target are both loop-type nodes.

    Only loop-to-loop edges are exempt. A loop body node pointing back at its
    loop header is still checked.
    """
    return [
        e for e in edges
        if not (e.source in loop_node_ids and e.target in loop_node_ids)
    ]


def has_cycle(index: GraphIndex) -> bool:
    """Iterative DFS over every component of an indexed graph."""
    visited = [False] * len(index)
    on_stack = [False] * len(index)

    for root in range(len(index)):
        if visited[root]:
            continue
        visited[root] = on_stack[root] = True
        # (node, position in its successor list)
        stack: list[tuple[int, int]] = [(root, 0)]
        while stack:
            node, pos = stack[-1]
            succs = index.successors[node]
            if pos == len(succs):
                on_stack[node] = False
                stack.pop()
                continue
            stack[-1] = (node, pos + 1)
            nxt = succs[pos]
            if on_stack[nxt]:
                return True
            if not visited[nxt]:
                visited[nxt] = on_stack[nxt] = True
                stack.append((nxt, 0))

    return False


def has_unintentional_cycles(
    nodes: Iterable[Node], edges: Iterable[Edge], loop_node_ids: set[str]
) -> bool:
    return has_cycle(GraphIndex(nodes, filter_loop_edges(edges, loop_node_ids)))
