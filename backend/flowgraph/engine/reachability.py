"""Forward reachability from a set of start nodes."""
from collections import deque
from typing import Iterable

from .graph import Edge, GraphIndex, Node


def reachable_from(
    nodes: Iterable[Node], edges: Iterable[Edge], start_ids: Iterable[str]
) -> set[str]:
    """BFS along edge direction, returning the ids of every node reached."""
    index = GraphIndex(nodes, edges)
    seen = [False] * len(index)
    queue: deque[int] = deque()
    for node_id in start_ids:
        i = index.position.get(node_id)
        if i is not None and not seen[i]:
            seen[i] = True
            queue.append(i)

    while queue:
        i = queue.popleft()
        for succ in index.successors[i]:
            if not seen[succ]:
                seen[succ] = True
                queue.append(succ)

    return {index.nodes[i].id for i, hit in enumerate(seen) if hit}
