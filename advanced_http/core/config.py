# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Advanced HTTP Configuration — Environment-driven settings.

All configuration is loaded from environment variables (or .env file).
Node options that are left unset fall back to the DEFAULT_* values here.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings
from pydantic import Field


class HttpNodeSettings(BaseSettings):
    """Service-wide configuration loaded from environment."""

    # --- Request defaults ---
    DEFAULT_TIMEOUT_MS: int = Field(
        default=30000,
        description="Request timeout in milliseconds when the node sets none",
    )
    DEFAULT_FOLLOW_REDIRECT: bool = Field(
        default=True,
        description="Follow HTTP redirects unless the node disables it",
    )
    DEFAULT_MAX_REDIRECTS: int = Field(
        default=5,
        description="Maximum redirects followed per request",
    )
    DEFAULT_VALIDATE_SSL: bool = Field(
        default=True,
        description="Reject invalid TLS certificates",
    )
    DEFAULT_FULL_RESPONSE: bool = Field(
        default=False,
        description="Return status, headers and body instead of the body only",
    )

    # --- Platform ---
    LOG_LEVEL: str = Field(default="INFO")
    AHTTP_ENV: str = Field(
        default="dev",
        description="Environment: dev | prod",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


# Global singleton
settings = HttpNodeSettings()
