# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.
"""Unit tests for HttpxRequestExecutor — driven through httpx.MockTransport."""

import json

import httpx
import pytest

from advanced_http.core.errors import NetworkError
from advanced_http.request.models import HttpMethod, RequestDescriptor
from advanced_http.runtime.executor import HttpxRequestExecutor


def make_descriptor(**overrides) -> RequestDescriptor:
    fields = dict(
        method=HttpMethod.GET,
        url="https://api.example.com/items",
        timeout=30000,
        follow_redirects=True,
        max_redirects=5,
        reject_unauthorized=True,
        full_response=False,
    )
    fields.update(overrides)
    return RequestDescriptor(**fields)


class TestSuccessfulRequests:
    @pytest.mark.asyncio
    async def test_json_response(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"items": [1, 2]}, headers={"X-Request-Id": "r1"})

        executor = HttpxRequestExecutor(transport=httpx.MockTransport(handler))
        resp = await executor.execute(make_descriptor())
        assert resp.status_code == 200
        assert resp.body == {"items": [1, 2]}
        assert resp.headers["x-request-id"] == "r1"
        assert resp.url == "https://api.example.com/items"

    @pytest.mark.asyncio
    async def test_text_and_empty_bodies(self):
        responses = iter([httpx.Response(200, text="plain text"), httpx.Response(204)])
        executor = HttpxRequestExecutor(transport=httpx.MockTransport(lambda r: next(responses)))
        assert (await executor.execute(make_descriptor())).body == "plain text"
        assert (await executor.execute(make_descriptor())).body == ""

    @pytest.mark.asyncio
    async def test_sends_headers_and_json_body(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["headers"] = dict(request.headers)
            seen["body"] = json.loads(request.content)
            return httpx.Response(201, json={"created": True})

        executor = HttpxRequestExecutor(transport=httpx.MockTransport(handler))
        resp = await executor.execute(make_descriptor(
            method=HttpMethod.POST,
            headers={"X-API-Key": "secret"},
            body={"name": "test", "age": 25},
        ))
        assert resp.status_code == 201
        assert seen["method"] == "POST"
        assert seen["headers"]["x-api-key"] == "secret"
        assert seen["body"] == {"name": "test", "age": 25}

    @pytest.mark.asyncio
    async def test_get_sends_no_body(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["content"] = request.content
            return httpx.Response(200, json={})

        executor = HttpxRequestExecutor(transport=httpx.MockTransport(handler))
        await executor.execute(make_descriptor(body={"ignored": True}))
        assert seen["content"] == b""

    @pytest.mark.asyncio
    async def test_post_without_body_sends_no_content(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["content"] = request.content
            return httpx.Response(200, json={})

        executor = HttpxRequestExecutor(transport=httpx.MockTransport(handler))
        await executor.execute(make_descriptor(method=HttpMethod.POST, body=None))
        assert seen["content"] == b""

    @pytest.mark.asyncio
    async def test_follows_redirects_and_reports_final_url(self):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/old":
                return httpx.Response(302, headers={"Location": "https://api.example.com/new"})
            return httpx.Response(200, json={"path": request.url.path})

        executor = HttpxRequestExecutor(transport=httpx.MockTransport(handler))
        resp = await executor.execute(make_descriptor(url="https://api.example.com/old"))
        assert resp.body == {"path": "/new"}
        assert resp.url == "https://api.example.com/new"

    @pytest.mark.asyncio
    async def test_redirect_not_followed_when_disabled(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(302, headers={"Location": "https://api.example.com/new"})

        executor = HttpxRequestExecutor(transport=httpx.MockTransport(handler))
        resp = await executor.execute(make_descriptor(follow_redirects=False))
        assert resp.status_code == 302


class TestFailures:
    @pytest.mark.asyncio
    async def test_error_status_raises_with_code(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"detail": "missing"})

        executor = HttpxRequestExecutor(transport=httpx.MockTransport(handler))
        with pytest.raises(NetworkError) as exc:
            await executor.execute(make_descriptor())
        assert exc.value.status_code == 404
        assert exc.value.body == {"detail": "missing"}
        assert str(exc.value) == "Request failed with status code 404"

    @pytest.mark.asyncio
    async def test_connection_error_has_zero_status(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        executor = HttpxRequestExecutor(transport=httpx.MockTransport(handler))
        with pytest.raises(NetworkError, match="Connection refused") as exc:
            await executor.execute(make_descriptor())
        assert exc.value.status_code == 0

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        executor = HttpxRequestExecutor(transport=httpx.MockTransport(handler))
        with pytest.raises(NetworkError, match="timed out after 1500ms") as exc:
            await executor.execute(make_descriptor(timeout=1500))
        assert exc.value.status_code == 0

    @pytest.mark.asyncio
    async def test_too_many_redirects(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(302, headers={"Location": "https://api.example.com/loop"})

        executor = HttpxRequestExecutor(transport=httpx.MockTransport(handler))
        with pytest.raises(NetworkError) as exc:
            await executor.execute(make_descriptor(max_redirects=2))
        assert exc.value.status_code == 0
