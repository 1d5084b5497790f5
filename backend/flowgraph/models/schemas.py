"""Pydantic schemas for API request/response models.

Field names follow the editor's camelCase JSON; unknown keys (position,
style, ...) are ignored.
"""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class NodeDataSchema(CamelModel):
    type: str | None = None
    label: str | None = None
    is_trigger: bool = Field(False, alias="isTrigger")
    config: dict[str, Any] | None = None


class NodeSchema(CamelModel):
    id: str
    type: str | None = None   # editor presentation type, e.g. "n8nNode"
    data: NodeDataSchema = Field(default_factory=NodeDataSchema)


class EdgeSchema(CamelModel):
    id: str
    source: str
    target: str
    source_handle: str | None = Field(None, alias="sourceHandle")
    target_handle: str | None = Field(None, alias="targetHandle")
    label: str | None = None


class GraphSchema(CamelModel):
    nodes: list[NodeSchema] = []
    edges: list[EdgeSchema] = []


class ConnectionRequest(GraphSchema):
    source: str
    target: str
    source_handle: str | None = Field(None, alias="sourceHandle")


class NextNodesRequest(GraphSchema):
    node_id: str = Field(alias="nodeId")
    selected_branch: str | None = Field(None, alias="selectedBranch")
    selected_case: str | None = Field(None, alias="selectedCase")


class ValidationResponse(CamelModel):
    is_valid: bool = Field(alias="isValid")
    errors: list[str] = []
    warnings: list[str] = []


class ConnectionResponse(CamelModel):
    valid: bool
    reason: str | None = None


class StepsResponse(BaseModel):
    steps: list[list[str]]
    order: list[str]


class NextNodesResponse(CamelModel):
    node_ids: list[str] = Field(alias="nodeIds")
