"""REST API routes."""
import logging

from fastapi import APIRouter, HTTPException

from ..config import settings
from ..engine.connections import is_valid_connection
from ..engine.graph import Edge, Node
from ..engine.routing import next_nodes
from ..engine.scheduler import execution_order, plan_execution
from ..engine.validator import WorkflowValidationError, validate_workflow
from ..nodes.base import RuleDefinition
from ..nodes.registry import RuleRegistry
from ..models.schemas import (
    ConnectionRequest, ConnectionResponse, GraphSchema,
    NextNodesRequest, NextNodesResponse,
    StepsResponse, ValidationResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def _schema_to_graph(schema: GraphSchema) -> tuple[list[Node], list[Edge]]:
    if len(schema.nodes) > settings.max_graph_nodes:
        raise HTTPException(
            status_code=413,
            detail=f"Workflow exceeds {settings.max_graph_nodes} nodes",
        )
    nodes = [
        Node(
            id=n.id,
            # business type in data wins over the editor's presentation type
            type=n.data.type or n.type or "",
            label=n.data.label or "",
            is_trigger=n.data.is_trigger,
            config=n.data.config or {},
        )
        for n in schema.nodes
    ]
    edges = [
        Edge(
            id=e.id, source=e.source, target=e.target,
            source_handle=e.source_handle, target_handle=e.target_handle,
            label=e.label,
        )
        for e in schema.edges
    ]
    return nodes, edges


@router.get("/health")
async def health():
    return {"status": "ok", "app": settings.app_name}


@router.post("/workflows/validate", response_model=ValidationResponse)
async def validate(graph: GraphSchema):
    """Full structural and configuration check of a workflow snapshot."""
    nodes, edges = _schema_to_graph(graph)
    result = validate_workflow(nodes, edges)
    return ValidationResponse(
        is_valid=result.is_valid, errors=result.errors, warnings=result.warnings,
    )


@router.post("/workflows/connections/check", response_model=ConnectionResponse)
async def check_connection(request: ConnectionRequest):
    """Called by the editor while a connection is being dragged."""
    nodes, edges = _schema_to_graph(request)
    check = is_valid_connection(
        request.source, request.target, request.source_handle, nodes, edges,
    )
    return ConnectionResponse(valid=check.valid, reason=check.reason)


@router.post("/workflows/steps", response_model=StepsResponse)
async def steps(graph: GraphSchema):
    """Validate and schedule; only valid workflows get steps."""
    nodes, edges = _schema_to_graph(graph)
    try:
        planned = plan_execution(nodes, edges)
    except WorkflowValidationError as e:
        logger.info("Refusing to schedule workflow: %s", e.errors)
        raise HTTPException(
            status_code=422,
            detail={"message": "Workflow is not valid", "errors": e.errors},
        )
    return StepsResponse(steps=planned, order=execution_order(nodes, edges))


@router.post("/workflows/next-nodes", response_model=NextNodesResponse)
async def route_next(request: NextNodesRequest):
    nodes, edges = _schema_to_graph(request)
    node = next((n for n in nodes if n.id == request.node_id), None)
    if node is None:
        raise HTTPException(status_code=404, detail="Node not found")
    return NextNodesResponse(
        node_ids=next_nodes(
            node, edges,
            selected_branch=request.selected_branch,
            selected_case=request.selected_case,
        ),
    )


def _rule_to_dict(defn: RuleDefinition) -> dict[str, str]:
    return {
        "name": defn.name,
        "displayName": defn.display_name,
        "description": defn.description,
    }


@router.get("/workflows/rules")
async def list_rules():
    """Return all registered node config rules, keyed by name."""
    defs = RuleRegistry.all_definitions()
    return {name: _rule_to_dict(defn) for name, defn in defs.items()}


@router.get("/workflows/rules/{name}")
async def get_rule(name: str):
    try:
        rule_cls = RuleRegistry.get(name)
    except KeyError:
        raise HTTPException(status_code=404, detail="Rule not found")
    return _rule_to_dict(rule_cls.get_definition(name))
