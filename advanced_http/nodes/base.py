# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
BaseNode — Abstract base class for all built-in nodes.

Every node receives the batch of input items plus its parameters and
returns exactly one OutputRecord per item, paired by index.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class InputItem:
    """One workflow record handed to a node. Treated as read-only."""

    json: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_raw(cls, raw: Any) -> InputItem:
        """Accept either ``{"json": {...}}`` or a bare JSON object."""
        if isinstance(raw, InputItem):
            return raw
        if isinstance(raw, dict) and isinstance(raw.get("json"), dict):
            return cls(json=raw["json"])
        return cls(json=raw if isinstance(raw, dict) else {})


@dataclass
class OutputRecord:
    """Result (or captured error) for the input item at ``paired_item``."""

    json: Dict[str, Any]
    paired_item: int

    @property
    def is_error(self) -> bool:
        return "error" in self.json

    def to_dict(self) -> Dict[str, Any]:
        return {"json": self.json, "pairedItem": self.paired_item}


class BaseNode(ABC):
    """
    Abstract base class for all built-in nodes.

    Subclasses must set class-level attributes and implement execute().
    """

    node_id: str = ""
    name: str = ""
    description: str = ""
    param_schema: Dict[str, Any] = {}

    @abstractmethod
    async def execute(
        self,
        items: List[InputItem],
        params: Dict[str, Any],
        continue_on_fail: bool = False,
    ) -> List[OutputRecord]:
        """
        Execute the node logic for every item, in order.

        With continue_on_fail, item errors become error records instead of
        aborting the batch.
        """
        ...

    def get_info(self) -> Dict[str, Any]:
        """Return node metadata for registry listing."""
        return {
            "node_id": self.node_id,
            "name": self.name,
            "description": self.description,
            "param_schema": self.param_schema,
        }
