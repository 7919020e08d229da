# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""Advanced HTTP Request Node — typed dynamic payloads, masked full responses."""

import logging
import time
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from advanced_http.core.errors import InvalidParameterError, NodeOperationError
from advanced_http.core.metrics import platform_metrics
from advanced_http.nodes.base import BaseNode, InputItem, OutputRecord
from advanced_http.request.assembler import RequestAssembler
from advanced_http.request.masking import mask_sensitive_headers, sanitize_request_for_logging
from advanced_http.request.models import NodeConfig, RequestDescriptor
from advanced_http.runtime.executor import HttpResponse, HttpxRequestExecutor, RequestExecutor

logger = logging.getLogger("ahttp.nodes.http_request")


class AdvancedHTTPRequestNode(BaseNode):
    node_id = "advanced_http"
    name = "Advanced HTTP Request"
    description = "Makes HTTP requests with typed dynamic data conversion and validation"
    param_schema = {
        "method": "DELETE|GET|HEAD|OPTIONS|PATCH|POST|PUT (default: GET)",
        "url": "Target URL (http/https)",
        "useDynamicData": "Build the request from item.json.query (default: false)",
        "headers": "Static headers: list of {name, value}",
        "body": "Static JSON body for POST/PUT/PATCH (object or JSON string)",
        "options": "{timeout (ms), followRedirect, maxRedirects, fullResponse, validateSSL}",
    }

    def __init__(
        self,
        executor: Optional[RequestExecutor] = None,
        assembler: Optional[RequestAssembler] = None,
    ):
        self._executor = executor or HttpxRequestExecutor()
        self._assembler = assembler or RequestAssembler()

    async def execute(self, items, params, continue_on_fail=False):
        records: List[OutputRecord] = []

        for index, raw_item in enumerate(items):
            item = InputItem.from_raw(raw_item)
            try:
                result = await self._execute_item(item, params, index)
            except Exception as e:
                if isinstance(e, NodeOperationError):
                    e.item_index = index
                code = getattr(e, "code", type(e).__name__)
                platform_metrics.record_failure(code)
                logger.warning(
                    "Item %d failed (%s): %s", index, code, e,
                    extra={"node_id": self.node_id, "item_index": index},
                )
                if continue_on_fail:
                    records.append(OutputRecord(json=error_json(e), paired_item=index))
                    continue
                raise
            records.append(OutputRecord(json=result, paired_item=index))

        return records

    async def _execute_item(self, item: InputItem, params: Dict[str, Any], index: int) -> Dict[str, Any]:
        try:
            config = NodeConfig.model_validate(params or {})
        except ValidationError as e:
            raise InvalidParameterError(f"Invalid node parameters: {e}") from e

        descriptor = self._assembler.assemble(config, item.json)

        logger.info(
            "HTTP request: %s %s", descriptor.method.value, descriptor.url,
            extra={"node_id": self.node_id, "item_index": index},
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Request options: %s", sanitize_request_for_logging(descriptor.to_options()))

        start = time.perf_counter()
        response = await self._executor.execute(descriptor)
        elapsed = (time.perf_counter() - start) * 1000
        platform_metrics.record_request(descriptor.method.value, response.status_code, elapsed)

        return shape_response(descriptor, response)


def shape_response(descriptor: RequestDescriptor, response: HttpResponse) -> Dict[str, Any]:
    """Full response with masked headers, or the bare body under ``data``."""
    if descriptor.full_response:
        return {
            "statusCode": response.status_code,
            "headers": mask_sensitive_headers(response.headers or {}),
            "body": response.body,
            "url": response.url or descriptor.url,
            "method": descriptor.method.value,
        }
    return {"data": response.body}


def error_json(error: Exception) -> Dict[str, Any]:
    return {
        "error": str(error) or "Unknown error",
        "statusCode": getattr(error, "status_code", 0) or 0,
    }
