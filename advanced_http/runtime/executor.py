# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Request Executor — Performs the network call for a RequestDescriptor.

The node only depends on the RequestExecutor interface; HttpxRequestExecutor
is the production implementation. It owns TLS validation, redirect
following and timeout enforcement.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx

from advanced_http.core.errors import NetworkError
from advanced_http.request.models import RequestDescriptor

logger = logging.getLogger("ahttp.executor")


@dataclass
class HttpResponse:
    """Normalized response returned by every executor."""

    status_code: int
    body: Any = None
    headers: Dict[str, str] = field(default_factory=dict)
    url: str = ""


class RequestExecutor(ABC):
    """Opaque network capability used by the HTTP request node."""

    @abstractmethod
    async def execute(self, descriptor: RequestDescriptor) -> HttpResponse:
        """
        Send the request.

        Raises NetworkError(message, status_code) when no usable response
        was obtained; status_code is 0 if the server never answered.
        """
        ...


def parse_body(resp: httpx.Response) -> Any:
    """JSON when the payload parses, otherwise the decoded text."""
    if not resp.content:
        return ""
    try:
        return resp.json()
    except ValueError:
        return resp.text


class HttpxRequestExecutor(RequestExecutor):
    """Sends requests with a short-lived httpx.AsyncClient per call."""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        # Tests inject httpx.MockTransport here
        self._transport = transport

    def _client(self, descriptor: RequestDescriptor) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=descriptor.timeout / 1000.0,
            verify=descriptor.reject_unauthorized,
            follow_redirects=descriptor.follow_redirects,
            max_redirects=descriptor.max_redirects,
            transport=self._transport,
        )

    async def execute(self, descriptor: RequestDescriptor) -> HttpResponse:
        kwargs: Dict[str, Any] = {}
        if descriptor.headers:
            kwargs["headers"] = descriptor.headers
        if descriptor.has_body and descriptor.body is not None:
            kwargs["json"] = descriptor.body

        method = descriptor.method.value
        try:
            async with self._client(descriptor) as client:
                resp = await client.request(method, descriptor.url, **kwargs)
        except httpx.TimeoutException as e:
            logger.warning("Request timed out: %s %s — %s", method, descriptor.url, e)
            raise NetworkError(
                f"Request timed out after {descriptor.timeout:g}ms", status_code=0,
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Request failed: %s %s — %s", method, descriptor.url, e)
            raise NetworkError(str(e) or type(e).__name__, status_code=0) from e

        body = parse_body(resp)
        if resp.status_code >= 400:
            raise NetworkError(
                f"Request failed with status code {resp.status_code}",
                status_code=resp.status_code,
                body=body,
            )

        return HttpResponse(
            status_code=resp.status_code,
            body=body,
            headers=dict(resp.headers),
            url=str(resp.url),
        )
