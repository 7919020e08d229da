# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Object coercion — deep walk over arbitrary JSON applying descriptors.

Only mapping values are checked for descriptor shape; list elements are
always walked as plain values. New containers are returned, the input is
never mutated.
"""

from __future__ import annotations

from typing import Any

from advanced_http.coercion.converter import convert_value
from advanced_http.coercion.descriptor import detect_descriptor
from advanced_http.core.errors import CoercionError


def coerce_object(value: Any) -> Any:
    """
    Return ``value`` with every nested descriptor replaced by its native value.

    A failure anywhere aborts the whole walk; the raised CoercionError names
    the offending field path, e.g. ``Error converting field "user.age": ...``.
    """
    if isinstance(value, list):
        return [_coerce_child(f"[{i}]", item) for i, item in enumerate(value)]
    if isinstance(value, dict):
        return {key: _coerce_field(key, child) for key, child in value.items()}
    return value


def _coerce_field(key: str, child: Any) -> Any:
    typed = detect_descriptor(child)
    if typed is None:
        return _coerce_child(key, child)
    try:
        return convert_value(typed)
    except CoercionError as e:
        raise e.with_parent(key) from e


def _coerce_child(segment: str, child: Any) -> Any:
    if not isinstance(child, (dict, list)):
        return child
    try:
        return coerce_object(child)
    except CoercionError as e:
        raise e.with_parent(segment) from e
