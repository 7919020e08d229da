# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Platform Context — Singleton that holds the node registry.

Initialized at startup, used by API routes to find and run nodes.
"""

from __future__ import annotations

import time
from typing import Any, Dict, List, Optional

from advanced_http.core.metrics import platform_metrics
from advanced_http.kernel.node_registry import NodeRegistry
from advanced_http.nodes.base import InputItem, OutputRecord


class NodeNotFound(LookupError):
    pass


class PlatformContext:
    """
    Holds all runtime references for the service.
    Created once at startup, used by all API handlers.
    """

    def __init__(self) -> None:
        self.node_registry = NodeRegistry()

    async def execute_node(
        self,
        node_ref: str,
        items: List[Any],
        params: Dict[str, Any],
        continue_on_fail: bool = False,
    ) -> List[OutputRecord]:
        """
        Run a registered node over a batch of items.

        Node errors propagate unchanged (already tagged with item_index);
        metrics record the execution either way.
        """
        node = self.node_registry.get(node_ref)
        if node is None:
            raise NodeNotFound(node_ref)

        platform_metrics.inc(f"node_exec:{node.node_id}")
        start = time.time()
        try:
            return await node.execute(
                [InputItem.from_raw(raw) for raw in items],
                params,
                continue_on_fail=continue_on_fail,
            )
        except Exception:
            platform_metrics.inc(f"node_error:{node.node_id}")
            raise
        finally:
            elapsed = (time.time() - start) * 1000
            platform_metrics.observe(f"node_latency:{node.node_id}", elapsed)


# ── Global singleton ────────────────────────────────────────

_ctx: Optional[PlatformContext] = None


def init_platform_context() -> PlatformContext:
    global _ctx
    _ctx = PlatformContext()
    return _ctx


def get_platform_context() -> PlatformContext:
    if _ctx is None:
        raise RuntimeError("PlatformContext not initialized. Call init_platform_context() first.")
    return _ctx
