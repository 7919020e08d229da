# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Typed-value conversion — turns one detected descriptor into a native value.
"""

from __future__ import annotations

import json
import math
from typing import Any, Callable, Dict

from advanced_http.coercion.descriptor import TypedValue, ValueType
from advanced_http.core.errors import CoercionError


def to_string(value: Any) -> str:
    """Stringify a JSON value the way it reads in the source payload."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return str(value)


def _to_integer(value: Any) -> int:
    if isinstance(value, bool):
        raise CoercionError(f"Invalid integer value: {to_string(value)}", "integer", value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text, 10)
        except ValueError:
            pass
        # Decimal text truncates like a float value
        try:
            parsed = float(text)
        except ValueError:
            parsed = None
        if parsed is not None and math.isfinite(parsed):
            return int(parsed)
    raise CoercionError(f"Invalid integer value: {to_string(value)}", "integer", value)


def _to_number(value: Any) -> float:
    result = None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        result = float(value)
    elif isinstance(value, str):
        try:
            result = float(value.strip())
        except ValueError:
            result = None
    if result is None or not math.isfinite(result):
        raise CoercionError(f"Invalid number value: {to_string(value)}", "number", value)
    return result


def _to_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.lower() == "true"
    if value is None:
        return False
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, (list, dict)):
        return len(value) > 0
    return bool(value)


def _parse_json_text(value: str, expected: type, type_name: str) -> Any:
    try:
        parsed = json.loads(value)
    except ValueError:
        parsed = None
    if not isinstance(parsed, expected):
        raise CoercionError(f"Invalid {type_name} value: {value}", type_name, value)
    return parsed


def _to_array(value: Any) -> list:
    if isinstance(value, str):
        return _parse_json_text(value, list, "array")
    if isinstance(value, list):
        return value
    return []


def _to_object(value: Any) -> dict:
    if isinstance(value, str):
        return _parse_json_text(value, dict, "object")
    if isinstance(value, dict):
        return value
    return {}


_CONVERTERS: Dict[ValueType, Callable[[Any], Any]] = {
    ValueType.STRING: to_string,
    ValueType.INTEGER: _to_integer,
    ValueType.NUMBER: _to_number,
    ValueType.BOOLEAN: _to_boolean,
    ValueType.ARRAY: _to_array,
    ValueType.OBJECT: _to_object,
}


def convert_value(typed: TypedValue) -> Any:
    """
    Convert a descriptor's raw value to its declared type.

    Raises CoercionError when the value cannot be represented as the
    declared type or the type name is unknown.
    """
    kind = typed.kind
    if kind is None:
        raise CoercionError(f"Unknown type: {typed.type_name}", typed.type_name, typed.value)
    return _CONVERTERS[kind](typed.value)
