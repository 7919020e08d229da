# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Observability API — Health check and metrics.
"""

from __future__ import annotations

from fastapi import APIRouter

from advanced_http.core.config import settings
from advanced_http.core.context import get_platform_context
from advanced_http.core.metrics import platform_metrics

router = APIRouter(tags=["observability"])


@router.get("/health")
async def health_check():
    """Health check with registered node count."""
    ctx = get_platform_context()
    return {
        "status": "ok",
        "version": "0.1.0",
        "env": settings.AHTTP_ENV,
        "nodes": len(ctx.node_registry),
        "metrics": platform_metrics.snapshot(),
    }


@router.get("/api/metrics")
async def get_metrics():
    """Return current request/node metrics."""
    return platform_metrics.snapshot()
