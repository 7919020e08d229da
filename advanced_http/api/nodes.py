# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Nodes API — List registered nodes and execute one over a batch of items.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from advanced_http.api.errors import NodeExecutionAPIError, NodeNotFoundError
from advanced_http.core.context import NodeNotFound, get_platform_context
from advanced_http.core.errors import NodeOperationError

router = APIRouter(prefix="/nodes", tags=["nodes"])


class NodeInfo(BaseModel):
    node_id: str
    node_type: str
    name: str
    description: str = ""


class NodeDetail(BaseModel):
    node_id: str
    name: str
    description: str = ""
    param_schema: Dict[str, Any] = Field(default_factory=dict)


class ExecuteRequest(BaseModel):
    items: List[Dict[str, Any]] = Field(
        default_factory=lambda: [{"json": {}}],
        description="Input items, each {json: {...}}",
    )
    params: Dict[str, Any] = Field(default_factory=dict)
    continue_on_fail: bool = False


class ExecuteResponse(BaseModel):
    node_id: str
    items: List[Dict[str, Any]]
    error_count: int = 0


def _trace_id(request: Request) -> Optional[str]:
    return getattr(request.state, "trace_id", None)


@router.get("", response_model=List[NodeInfo])
async def list_nodes():
    """List all registered nodes."""
    ctx = get_platform_context()
    return [NodeInfo(**n) for n in ctx.node_registry.list_all()]


@router.get("/{node_id}", response_model=NodeDetail)
async def get_node(node_id: str, request: Request):
    ctx = get_platform_context()
    node = ctx.node_registry.get(node_id)
    if node is None:
        raise NodeNotFoundError(node_id, trace_id=_trace_id(request))
    return NodeDetail(**node.get_info())


@router.post("/{node_id}/execute", response_model=ExecuteResponse)
async def execute_node(node_id: str, req: ExecuteRequest, request: Request):
    """Run a node; one output record per input item, paired by index."""
    ctx = get_platform_context()
    try:
        records = await ctx.execute_node(
            node_id, req.items, req.params, continue_on_fail=req.continue_on_fail,
        )
    except NodeNotFound:
        raise NodeNotFoundError(node_id, trace_id=_trace_id(request))
    except NodeOperationError as e:
        raise NodeExecutionAPIError(e, trace_id=_trace_id(request))

    return ExecuteResponse(
        node_id=node_id,
        items=[r.to_dict() for r in records],
        error_count=sum(1 for r in records if r.is_error),
    )
