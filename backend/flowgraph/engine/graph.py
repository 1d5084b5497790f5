"""Workflow graph data structures shared by the validator and the scheduler."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Mapping


class NodeKind(str, Enum):
    TRIGGER = "trigger"
    WEBHOOK = "webhook"
    SCHEDULED = "scheduled"
    ACTION = "action"
    IF_ELSE = "if-else"
    SWITCH = "switch"
    PARALLEL = "parallel"
    LOOP = "loop"
    WHILE = "while"
    FOR_EACH = "forEach"
    OTHER = "other"

    @classmethod
    def parse(cls, node_type: str | None) -> "NodeKind":
        """Map a raw editor type string onto a kind, falling back to OTHER."""
        try:
            return cls(node_type)
        except ValueError:
            return cls.OTHER


TRIGGER_KINDS = frozenset({NodeKind.TRIGGER, NodeKind.WEBHOOK, NodeKind.SCHEDULED})
LOOP_KINDS = frozenset({NodeKind.LOOP, NodeKind.WHILE, NodeKind.FOR_EACH})


@dataclass(frozen=True)
class Node:
    id: str
    type: str = ""  # raw type string, kept for substring rules
    label: str = ""
    is_trigger: bool = False
    config: Mapping[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.parse(self.type)

    @property
    def display_name(self) -> str:
        return self.label or self.id

    @property
    def is_trigger_like(self) -> bool:
        # Legacy editors emit types like "offer-status-trigger", so any type
        # containing "trigger" counts.
        return (
            self.kind in TRIGGER_KINDS
            or self.is_trigger
            or "trigger" in self.type
        )

    @property
    def is_loop(self) -> bool:
        return self.kind in LOOP_KINDS


@dataclass(frozen=True)
class Edge:
    id: str
    source: str
    target: str
    source_handle: str | None = None  # "yes" / "no" / switch case
    target_handle: str | None = None
    label: str | None = None


class GraphIndex:
    """Per-call arena over a (nodes, edges) snapshot.

    Nodes are addressed by their position in ``nodes``; edges whose endpoints
    are not in the snapshot are dropped from the adjacency lists.
    """

    def __init__(self, nodes: Iterable[Node], edges: Iterable[Edge]):
        self.nodes: list[Node] = list(nodes)
        self.edges: list[Edge] = list(edges)
        self.position: dict[str, int] = {}
        for i, node in enumerate(self.nodes):
            self.position.setdefault(node.id, i)

        self.successors: list[list[int]] = [[] for _ in self.nodes]
        self.in_degree: list[int] = [0] * len(self.nodes)
        for edge in self.edges:
            src = self.position.get(edge.source)
            tgt = self.position.get(edge.target)
            if src is None or tgt is None:
                continue
            self.successors[src].append(tgt)
            self.in_degree[tgt] += 1

    def __len__(self) -> int:
        return len(self.nodes)

    def get(self, node_id: str) -> Node | None:
        i = self.position.get(node_id)
        return None if i is None else self.nodes[i]


def trigger_ids(nodes: Iterable[Node]) -> list[str]:
    return [n.id for n in nodes if n.is_trigger_like]


def loop_node_ids(nodes: Iterable[Node]) -> set[str]:
    return {n.id for n in nodes if n.is_loop}
