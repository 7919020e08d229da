# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Request Models — Node configuration surface and the finalized request.

``NodeConfig`` validates the parameters handed to the node by the host
(camelCase aliases match the host's parameter names). ``RequestDescriptor``
is the fully resolved request passed to a RequestExecutor.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class HttpMethod(str, Enum):
    DELETE = "DELETE"
    GET = "GET"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    PATCH = "PATCH"
    POST = "POST"
    PUT = "PUT"


BODY_METHODS = frozenset({HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH})


class HeaderParameter(BaseModel):
    name: str = ""
    value: Any = ""


class RequestOptions(BaseModel):
    """Optional per-node settings; None means "use the configured default"."""

    timeout: Optional[float] = Field(default=None, description="Timeout in milliseconds")
    follow_redirect: Optional[bool] = Field(default=None, alias="followRedirect")
    max_redirects: Optional[int] = Field(default=None, alias="maxRedirects", ge=0)
    full_response: Optional[bool] = Field(default=None, alias="fullResponse")
    validate_ssl: Optional[bool] = Field(default=None, alias="validateSSL")

    model_config = {"populate_by_name": True, "extra": "ignore"}


class NodeConfig(BaseModel):
    """Static configuration of one HTTP request node."""

    method: HttpMethod = HttpMethod.GET
    url: str = ""
    use_dynamic_data: bool = Field(default=False, alias="useDynamicData")
    headers: List[HeaderParameter] = Field(default_factory=list)
    body: Any = Field(default_factory=dict)
    options: RequestOptions = Field(default_factory=RequestOptions)

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @field_validator("method", mode="before")
    @classmethod
    def method_upper(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    @field_validator("headers", mode="before")
    @classmethod
    def unwrap_header_collection(cls, v: Any) -> Any:
        """Accept both ``[{name, value}]`` and ``{"parameter": [{name, value}]}``."""
        if v is None:
            return []
        if isinstance(v, dict):
            return v.get("parameter") or []
        return v

    @field_validator("options", mode="before")
    @classmethod
    def options_default(cls, v: Any) -> Any:
        return {} if v is None else v


@dataclass
class RequestDescriptor:
    """A validated outbound request, ready for a RequestExecutor."""

    method: HttpMethod
    url: str
    timeout: float
    follow_redirects: bool
    max_redirects: int
    reject_unauthorized: bool
    full_response: bool
    headers: Optional[Dict[str, str]] = None
    body: Any = None

    @property
    def has_body(self) -> bool:
        return self.method in BODY_METHODS

    def to_options(self) -> Dict[str, Any]:
        """Transport options mapping (the shape logged and handed to transports)."""
        options: Dict[str, Any] = {
            "method": self.method.value,
            "url": self.url,
            "timeout": self.timeout,
            "followRedirect": self.follow_redirects,
            "maxRedirects": self.max_redirects,
            "rejectUnauthorized": self.reject_unauthorized,
            "resolveWithFullResponse": self.full_response,
        }
        if self.headers:
            options["headers"] = dict(self.headers)
        if self.has_body and self.body is not None:
            options["json"] = self.body
        return options
