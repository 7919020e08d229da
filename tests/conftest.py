# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Shared test fixtures for all Advanced HTTP tests.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from advanced_http.core.context import init_platform_context
from advanced_http.nodes.http_request import AdvancedHTTPRequestNode
from advanced_http.runtime.executor import HttpResponse, RequestExecutor


@pytest.fixture
def mock_response() -> HttpResponse:
    return HttpResponse(
        status_code=200,
        body={"success": True},
        headers={"Content-Type": "application/json"},
        url="https://api.example.com",
    )


@pytest.fixture
def mock_executor(mock_response):
    """A RequestExecutor whose execute() is an AsyncMock returning mock_response."""
    executor = MagicMock(spec=RequestExecutor)
    executor.execute = AsyncMock(return_value=mock_response)
    return executor


@pytest.fixture
def http_node(mock_executor) -> AdvancedHTTPRequestNode:
    return AdvancedHTTPRequestNode(executor=mock_executor)


@pytest.fixture
def platform_ctx(http_node):
    """Initialize PlatformContext with the HTTP node wired to mock_executor."""
    ctx = init_platform_context()
    ctx.node_registry.register_builtin(http_node.node_id, http_node)
    return ctx

