# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Header assembly — static name/value pairs and dynamic header merging.

Credential-sourced headers (``api_keys.headers``) always win over headers
supplied by workflow data, so upstream data cannot replace a secret-bearing
header.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional

from advanced_http.coercion.converter import to_string
from advanced_http.core.errors import PayloadError


def _as_header_map(headers: Any, source: str) -> Dict[str, str]:
    if headers is None:
        return {}
    if not isinstance(headers, Mapping):
        raise PayloadError(f"{source} must be a JSON object")
    return {str(name): to_string(value) for name, value in headers.items()}


def merge_headers(
    query_headers: Optional[Mapping[str, Any]] = None,
    api_headers: Optional[Mapping[str, Any]] = None,
) -> Dict[str, str]:
    """Union of both mappings; ``api_headers`` overwrite on duplicate keys."""
    merged = _as_header_map(query_headers, "query.headers")
    merged.update(_as_header_map(api_headers, "api_keys.headers"))
    return merged


def headers_from_parameters(parameters: Iterable[Any]) -> Dict[str, str]:
    """Build headers from ordered name/value pairs, skipping empty names."""
    headers: Dict[str, str] = {}
    for param in parameters:
        name = getattr(param, "name", None)
        if name is None and isinstance(param, Mapping):
            name = param.get("name")
            value = param.get("value", "")
        else:
            value = getattr(param, "value", "")
        if name:
            headers[name] = to_string(value)
    return headers
