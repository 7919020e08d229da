# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""URL validation — absolute http(s) URLs only, purely syntactic."""

from __future__ import annotations

from typing import Any

import httpx

ALLOWED_SCHEMES = ("http", "https")


def is_valid_url(url: Any) -> bool:
    """True for absolute ``http``/``https`` URLs that name a host."""
    if not isinstance(url, str) or not url or any(ch.isspace() for ch in url):
        return False
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError, ValueError):
        return False
    return parsed.scheme in ALLOWED_SCHEMES and bool(parsed.host)
