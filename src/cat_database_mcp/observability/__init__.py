"""Logfire observability for the Cat Database MCP Server."""

import logging
import sys

import logfire

from .config import ObservabilityConfig

logger = logging.getLogger(__name__)


def initialize_observability(
    config: ObservabilityConfig | None = None,
    service_version: str | None = None,
) -> None:
    """Initialize Logfire with configuration."""
    config = config or ObservabilityConfig()

    if not config.enabled:
        logger.debug("Observability disabled via configuration")
        return

    logfire.configure(
        token=config.token or None,
        service_name=config.service_name,
        service_version=service_version,
        environment=config.environment,
        send_to_logfire=config.send_to_logfire,
        console=logfire.ConsoleOptions(output=sys.stderr) if config.console_output else False,
    )
    logger.debug("Logfire configured for environment %s", config.environment)


__all__ = [
    "ObservabilityConfig",
    "initialize_observability",
]
