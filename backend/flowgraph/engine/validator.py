"""Workflow validation: cycles, reachability, branch completeness, node config."""
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Sequence

from ..nodes.registry import RuleRegistry
from .cycles import has_unintentional_cycles
from .graph import Edge, Node, NodeKind, loop_node_ids, trigger_ids
from .reachability import reachable_from

logger = logging.getLogger(__name__)

DEFAULT_HANDLE = "default"


class WorkflowValidationError(Exception):
    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Workflow validation failed: {errors}")


@dataclass
class ValidationResult:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def validate_workflow(nodes: Sequence[Node], edges: Sequence[Edge]) -> ValidationResult:
    """Run every structural and configuration check over a graph snapshot.

    Errors block activation; warnings are advisory. An empty graph stops
    after the first error.
    """
    result = ValidationResult()
    if not nodes:
        result.errors.append("Workflow must contain at least one node")
        return result

    triggers = trigger_ids(nodes)
    if not triggers:
        result.warnings.append(
            "Workflow has no trigger node; add at least one trigger to start it"
        )

    result.errors.extend(_check_trigger_inputs(nodes, edges))
    result.warnings.extend(_check_orphans(nodes, edges))

    if has_unintentional_cycles(nodes, edges, loop_node_ids(nodes)):
        result.errors.append("Workflow contains unintentional cycles")

    result.warnings.extend(_check_branches(nodes, edges))

    if triggers:
        reachable = reachable_from(nodes, edges, triggers)
        unreachable = sum(1 for n in nodes if n.id not in reachable)
        if unreachable:
            result.warnings.append(
                f"{unreachable} node(s) are not reachable from any trigger"
            )

    for node in nodes:
        if node.config:
            result.errors.extend(RuleRegistry.validate(node))

    result.warnings.extend(_check_duplicate_edges(edges))

    logger.debug(
        "Validated workflow: %d nodes, %d edges, %d errors, %d warnings",
        len(nodes), len(edges), len(result.errors), len(result.warnings),
    )
    return result


def _check_trigger_inputs(nodes: Sequence[Node], edges: Sequence[Edge]) -> list[str]:
    node_ids = {n.id for n in nodes}
    targets = {e.target for e in edges if e.source in node_ids}
    return [
        f'Trigger "{n.display_name}" cannot have incoming connections'
        for n in nodes if n.is_trigger_like and n.id in targets
    ]


def _check_orphans(nodes: Sequence[Node], edges: Sequence[Edge]) -> list[str]:
    if len(nodes) <= 1:
        return []
    connected = {e.source for e in edges} | {e.target for e in edges}
    orphans = [n.display_name for n in nodes if n.id not in connected]
    if not orphans:
        return []
    return [f"Isolated nodes with no connections: {', '.join(orphans)}"]


def _check_branches(nodes: Sequence[Node], edges: Sequence[Edge]) -> list[str]:
    warnings: list[str] = []
    outgoing: dict[str, list[Edge]] = {}
    for edge in edges:
        outgoing.setdefault(edge.source, []).append(edge)

    for node in nodes:
        out = outgoing.get(node.id, [])
        name = node.display_name
        if node.kind == NodeKind.IF_ELSE:
            handles = {e.source_handle for e in out}
            has_yes, has_no = "yes" in handles, "no" in handles
            if not (has_yes or has_no):
                warnings.append(f'Condition "{name}" has no outputs connected')
            elif not has_yes:
                warnings.append(f'Condition "{name}" is missing Yes branch')
            elif not has_no:
                warnings.append(f'Condition "{name}" is missing No branch')
        elif node.kind == NodeKind.SWITCH and len(out) < 2:
            warnings.append(f'Switch "{name}" should have at least 2 outputs')
        elif node.kind == NodeKind.PARALLEL and len(out) < 2:
            warnings.append(f'Parallel "{name}" should have at least 2 branches')

    return warnings


def edge_key(edge: Edge) -> str:
    return (
        f"{edge.source}:{edge.source_handle or DEFAULT_HANDLE}"
        f"->{edge.target}:{edge.target_handle or DEFAULT_HANDLE}"
    )


def _check_duplicate_edges(edges: Sequence[Edge]) -> list[str]:
    warnings: list[str] = []
    seen: Counter[str] = Counter()
    for edge in edges:
        key = edge_key(edge)
        if seen[key]:
            warnings.append(f"Duplicate connection detected: {key}")
        seen[key] += 1
    return warnings
