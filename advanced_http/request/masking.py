# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Sensitive data masking for full-response output and diagnostic logs.

Never applied to the headers actually sent on the wire.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping

SENSITIVE_HEADERS = (
    "authorization",
    "x-api-key",
    "x-auth-token",
    "x-access-token",
    "api-key",
    "apikey",
    "token",
    "bearer",
    "cookie",
    "set-cookie",
    "x-csrf-token",
    "x-xsrf-token",
)

REDACTED = "[REDACTED]"
REDACTED_BODY = "[BODY CONTAINS SENSITIVE DATA - REDACTED]"
SENSITIVE_BODY_MARKERS = ("password", "secret", "token")

# Values longer than this keep their first/last 3 characters visible
PARTIAL_REVEAL_MIN_LENGTH = 10


def is_sensitive_header(name: str) -> bool:
    lowered = name.lower()
    return any(marker in lowered for marker in SENSITIVE_HEADERS)


def mask_value(value: Any) -> str:
    text = str(value)
    if len(text) > PARTIAL_REVEAL_MIN_LENGTH:
        return f"{text[:3]}...{text[-3:]}"
    return REDACTED


def mask_sensitive_headers(headers: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``headers`` with block-listed values masked."""
    return {
        name: mask_value(value) if is_sensitive_header(name) else value
        for name, value in headers.items()
    }


def sanitize_request_for_logging(options: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Copy transport options for a log line.

    Headers are masked; a JSON body that mentions passwords, secrets or
    tokens anywhere is replaced wholesale.
    """
    sanitized = dict(options)
    if sanitized.get("headers"):
        sanitized["headers"] = mask_sensitive_headers(sanitized["headers"])
    body = sanitized.get("json")
    if isinstance(body, (dict, list)):
        body_text = json.dumps(body, default=str)
        if any(marker in body_text for marker in SENSITIVE_BODY_MARKERS):
            sanitized["json"] = REDACTED_BODY
    return sanitized
