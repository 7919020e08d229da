# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Typed-value descriptors — the ``{"type": ..., "value": ...}`` mini-language.

A descriptor tells the coercer how to interpret a raw field coming from
upstream workflow data, e.g. ``{"type": "integer", "value": "25"}``.
Detection is purely shape-based: a mapping with a non-empty string ``type``
and a ``value`` key (JSON null counts as a value).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional


class ValueType(str, Enum):
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"

    @classmethod
    def parse(cls, raw: str) -> Optional[ValueType]:
        """Case-insensitive lookup; None for names outside the six kinds."""
        try:
            return cls(raw.lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class TypedValue:
    """A detected descriptor: the declared type name and its raw value."""

    type_name: str
    value: Any

    @property
    def kind(self) -> Optional[ValueType]:
        return ValueType.parse(self.type_name)


def detect_descriptor(node: Any) -> Optional[TypedValue]:
    """Return a TypedValue when ``node`` has descriptor shape, else None."""
    if not isinstance(node, Mapping):
        return None
    type_name = node.get("type")
    if not isinstance(type_name, str) or not type_name:
        return None
    if "value" not in node:
        return None
    return TypedValue(type_name=type_name, value=node["value"])
