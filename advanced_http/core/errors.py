# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Node Errors — Item-scoped failures raised while building or sending a request.

Every error carries a stable ``code`` and a ``status_code`` (the HTTP status
when a response was obtained, otherwise 0). The node loop stamps
``item_index`` before deciding whether to capture or re-raise.
"""

from __future__ import annotations

from typing import Any, List, Optional


class NodeOperationError(Exception):
    """Base class for all failures scoped to a single input item."""

    code: str = "NODE_ERROR"

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        item_index: Optional[int] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.item_index = item_index
        super().__init__(message)


class InvalidUrlError(NodeOperationError):
    code = "INVALID_URL"

    def __init__(self, url: Any):
        self.url = url
        super().__init__(f"Invalid URL: {url}")


class CoercionError(NodeOperationError):
    """A typed-value descriptor could not be converted."""

    code = "COERCION_ERROR"

    def __init__(
        self,
        reason: str,
        type_name: Optional[str] = None,
        value: Any = None,
        path: Optional[List[str]] = None,
    ):
        self.reason = reason
        self.type_name = type_name
        self.value = value
        self.path = list(path or [])
        super().__init__(self._render())

    def _render(self) -> str:
        if not self.path:
            return self.reason
        return f'Error converting field "{format_path(self.path)}": {self.reason}'

    def with_parent(self, segment: str) -> CoercionError:
        """Return a copy with ``segment`` prepended to the field path."""
        return CoercionError(
            self.reason,
            type_name=self.type_name,
            value=self.value,
            path=[segment] + self.path,
        )


class NetworkError(NodeOperationError):
    """Raised by a RequestExecutor when the call fails or returns >= 400."""

    code = "NETWORK_ERROR"

    def __init__(self, message: str, status_code: int = 0, body: Any = None):
        self.body = body
        super().__init__(message, status_code=status_code)


class PayloadError(NodeOperationError):
    """Query, headers or body could not be interpreted as JSON of the right shape."""

    code = "INVALID_PAYLOAD"


class UnsupportedMethodError(NodeOperationError):
    code = "UNSUPPORTED_METHOD"

    def __init__(self, method: Any):
        self.method = method
        super().__init__(f"Unsupported method: {method}")


class InvalidParameterError(NodeOperationError):
    code = "INVALID_PARAMETER"


def format_path(path: List[str]) -> str:
    """Join key segments with dots; list indices (``[n]``) attach directly."""
    out = ""
    for segment in path:
        if segment.startswith("[") or not out:
            out += segment
        else:
            out += "." + segment
    return out
