# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
API Error Handling — Unified error structure.
"""

from __future__ import annotations

import uuid
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from advanced_http.core.errors import NodeOperationError


class APIError(Exception):
    """Base API error with structured response."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None,
        trace_id: Optional[str] = None,
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.trace_id = trace_id or str(uuid.uuid4())
        super().__init__(message)


class NodeNotFoundError(APIError):
    def __init__(self, node_id: str, trace_id: str = None):
        super().__init__(
            code="NODE_NOT_FOUND",
            message=f"Node '{node_id}' not found",
            status_code=404,
            trace_id=trace_id,
        )


class NodeExecutionAPIError(APIError):
    """An item failed and the caller did not ask to continue on failure."""

    def __init__(self, error: NodeOperationError, trace_id: str = None):
        details: Dict[str, Any] = {"item_index": error.item_index}
        if error.status_code:
            details["upstream_status_code"] = error.status_code
        super().__init__(
            code=error.code,
            message=error.message,
            status_code=422,
            details=details,
            trace_id=trace_id,
        )


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Global exception handler for APIError."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "code": exc.code,
            "message": exc.message,
            "trace_id": exc.trace_id,
            "details": exc.details,
        },
    )
