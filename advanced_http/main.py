# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Advanced HTTP Application Entry Point.

FastAPI app with lifespan, middleware, API routers,
and automatic builtin node registration.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from advanced_http.core.config import settings
from advanced_http.core.context import PlatformContext, init_platform_context
from advanced_http.core.logging import setup_logging
from advanced_http.core.metrics import platform_metrics
from advanced_http.api.errors import APIError, api_error_handler
from advanced_http.api.middleware import TraceMiddleware
from advanced_http.api.nodes import router as nodes_router
from advanced_http.api.observability import router as observability_router

# Built-in nodes
from advanced_http.nodes.http_request import AdvancedHTTPRequestNode

logger = logging.getLogger("ahttp.main")


def register_builtin_nodes(ctx: PlatformContext) -> None:
    """Register all built-in nodes."""
    nodes = [
        AdvancedHTTPRequestNode(),
    ]
    for node in nodes:
        ctx.node_registry.register_builtin(node.node_id, node)
    platform_metrics.set_gauge("nodes_registered", len(ctx.node_registry))
    logger.info("Registered %d builtin nodes", len(nodes))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage startup/shutdown of service resources."""
    setup_logging(settings.LOG_LEVEL)
    ctx = init_platform_context()
    register_builtin_nodes(ctx)
    logger.info("[AdvancedHTTP] Service ready (env=%s)", settings.AHTTP_ENV)
    yield
    logger.info("[AdvancedHTTP] Shutdown complete")


app = FastAPI(
    title="Advanced HTTP",
    description="Workflow HTTP request node with typed dynamic data",
    version="0.1.0",
    lifespan=lifespan,
)

# ── Middleware ───────────────────────────────────────────────
app.add_middleware(TraceMiddleware)

# ── Error Handlers ──────────────────────────────────────────
app.add_exception_handler(APIError, api_error_handler)

# ── Routes ──────────────────────────────────────────────────
app.include_router(nodes_router, prefix="/api")
app.include_router(observability_router)
