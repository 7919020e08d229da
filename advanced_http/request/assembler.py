# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Request Assembler — builds one RequestDescriptor per input item.

Two mutually exclusive modes, chosen by ``useDynamicData``:

  STATIC   headers and body come from the node configuration
  DYNAMIC  method, URL, headers and body come from ``item.json["query"]``,
           with ``item.json["api_keys"]["headers"]`` merged over the
           query headers and typed-value descriptors applied to the body

The resolved URL is validated before anything is handed to an executor.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional

from advanced_http.coercion.coercer import coerce_object
from advanced_http.core.config import HttpNodeSettings, settings as default_settings
from advanced_http.core.errors import InvalidUrlError, PayloadError, UnsupportedMethodError
from advanced_http.request.headers import headers_from_parameters, merge_headers
from advanced_http.request.models import (
    BODY_METHODS,
    HttpMethod,
    NodeConfig,
    RequestDescriptor,
)
from advanced_http.request.url import is_valid_url

logger = logging.getLogger("ahttp.assembler")


def parse_json_field(value: Any, field_name: str) -> Any:
    """Parse a JSON-encoded string; other values are returned as given."""
    if not isinstance(value, str):
        return value
    text = value.strip()
    if not text:
        return {}
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise PayloadError(f"Invalid JSON in {field_name}: {e}") from e


class RequestAssembler:
    """Turns node configuration plus one item's JSON into a RequestDescriptor."""

    def __init__(self, settings: Optional[HttpNodeSettings] = None):
        self._settings = settings or default_settings

    def assemble(self, config: NodeConfig, item_json: Optional[Mapping[str, Any]] = None) -> RequestDescriptor:
        descriptor = self._base_descriptor(config)
        if config.use_dynamic_data:
            self._apply_dynamic(descriptor, item_json or {})
        else:
            self._apply_static(descriptor, config)

        if not is_valid_url(descriptor.url):
            raise InvalidUrlError(descriptor.url)
        return descriptor

    # ── Options ─────────────────────────────────────────────────

    def _base_descriptor(self, config: NodeConfig) -> RequestDescriptor:
        opts = config.options
        s = self._settings

        timeout = opts.timeout if opts.timeout and opts.timeout > 0 else s.DEFAULT_TIMEOUT_MS
        return RequestDescriptor(
            method=config.method,
            url=config.url,
            timeout=timeout,
            follow_redirects=_pick(opts.follow_redirect, s.DEFAULT_FOLLOW_REDIRECT),
            max_redirects=_pick(opts.max_redirects, s.DEFAULT_MAX_REDIRECTS),
            reject_unauthorized=_pick(opts.validate_ssl, s.DEFAULT_VALIDATE_SSL),
            full_response=_pick(opts.full_response, s.DEFAULT_FULL_RESPONSE),
        )

    # ── STATIC ──────────────────────────────────────────────────

    def _apply_static(self, descriptor: RequestDescriptor, config: NodeConfig) -> None:
        headers = headers_from_parameters(config.headers)
        if headers:
            descriptor.headers = headers
        if descriptor.method in BODY_METHODS:
            descriptor.body = parse_json_field(config.body, "body")

    # ── DYNAMIC ─────────────────────────────────────────────────

    def _apply_dynamic(self, descriptor: RequestDescriptor, item_json: Mapping[str, Any]) -> None:
        raw_query = item_json.get("query")
        if raw_query is None or raw_query == "":
            # Nothing to derive; static method/URL, no headers or body
            return

        query = parse_json_field(raw_query, "query")
        if not isinstance(query, Mapping):
            raise PayloadError("query must be a JSON object")

        if query.get("method"):
            descriptor.method = _resolve_method(query["method"])
        if query.get("url"):
            descriptor.url = query["url"]

        api_keys = item_json.get("api_keys")
        api_headers = api_keys.get("headers") if isinstance(api_keys, Mapping) else None
        headers = merge_headers(query.get("headers"), api_headers)
        if headers:
            descriptor.headers = headers

        if descriptor.method in BODY_METHODS:
            descriptor.body = coerce_object(query.get("body") or {})

        logger.debug(
            "Dynamic request resolved: %s %s (headers=%d)",
            descriptor.method.value, descriptor.url, len(headers),
        )


def _pick(value: Any, default: Any) -> Any:
    return default if value is None else value


def _resolve_method(raw: Any) -> HttpMethod:
    if not isinstance(raw, str):
        raise UnsupportedMethodError(raw)
    try:
        return HttpMethod(raw.upper())
    except ValueError:
        raise UnsupportedMethodError(raw) from None
