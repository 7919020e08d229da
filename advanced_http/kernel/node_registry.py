# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Node Registry — Registry of in-process nodes, addressed by node_id.

Resolves `builtin://xxx` or a bare `xxx` → BaseNode instance
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from advanced_http.nodes.base import BaseNode

logger = logging.getLogger("ahttp.node_registry")

BUILTIN_PREFIX = "builtin://"


class NodeRegistry:
    def __init__(self) -> None:
        self._builtin: Dict[str, BaseNode] = {}

    def register_builtin(self, node_id: str, node: BaseNode) -> None:
        """Register (or replace) an in-process node."""
        if node_id in self._builtin:
            logger.warning("Replacing registered node: %s", node_id)
        self._builtin[node_id] = node
        logger.info("Registered builtin node: %s (%s)", node_id, node.name)

    def get(self, node_ref: str) -> Optional[BaseNode]:
        """Look up by id; ``builtin://`` references are accepted too."""
        if node_ref.startswith(BUILTIN_PREFIX):
            node_ref = node_ref[len(BUILTIN_PREFIX):]
        return self._builtin.get(node_ref)

    def list_all(self) -> List[Dict[str, Any]]:
        return [
            {
                "node_id": nid,
                "node_type": "builtin",
                "name": node.name,
                "description": node.description,
            }
            for nid, node in self._builtin.items()
        ]

    def __len__(self) -> int:
        return len(self._builtin)

    def __contains__(self, node_id: str) -> bool:
        return self.get(node_id) is not None
