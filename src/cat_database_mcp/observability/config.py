"""Configuration for Logfire observability."""

import os
from typing import Literal

from pydantic import BaseModel, Field


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


def _send_mode() -> bool | Literal["if-token-present"]:
    raw = os.getenv("LOGFIRE_SEND")
    if raw is None:
        return "if-token-present"
    return raw.lower() == "true"


class ObservabilityConfig(BaseModel):
    """Configuration for Logfire observability."""

    # Connection
    token: str = Field(default_factory=lambda: os.getenv("LOGFIRE_TOKEN", ""))
    service_name: str = "cat-database-mcp"
    environment: str = Field(default_factory=lambda: os.getenv("ENVIRONMENT", "development"))

    # Behavior
    enabled: bool = Field(default_factory=lambda: _env_flag("LOGFIRE_ENABLED", "true"))
    # Console output goes to stderr; stdout belongs to the stdio transport
    console_output: bool = Field(default_factory=lambda: _env_flag("LOGFIRE_CONSOLE", "false"))
    send_to_logfire: bool | Literal["if-token-present"] = Field(default_factory=_send_mode)
