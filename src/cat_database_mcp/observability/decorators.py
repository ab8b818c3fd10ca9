"""Decorators for tracing MCP components."""

import functools
import time
from collections.abc import Callable
from typing import Any

import logfire

from .metrics import record_tool_call


def trace_tool_call(func: Callable) -> Callable:
    """Trace a dispatcher ``call_tool(name, arguments)`` method.

    Opens a span per call carrying the tool name, outcome and duration, and
    records the call in the tool metrics. Exceptions are re-raised unchanged.
    """

    @functools.wraps(func)
    def wrapper(self, name: str, arguments: Any = None):
        with logfire.span(
            "tool.call {tool_name}",
            tool_name=name,
            tool_category=_categorize_tool(name),
        ) as span:
            start = time.perf_counter()
            _add_attributes(span, "input", arguments)

            try:
                result = func(self, name, arguments)
            except Exception as e:
                duration_ms = (time.perf_counter() - start) * 1000
                outcome = _error_outcome(e)
                span.set_attribute("tool.success", False)
                span.set_attribute("tool.outcome", outcome)
                span.set_attribute("tool.error", str(e))
                record_tool_call(name, outcome, duration_ms)
                raise

            duration_ms = (time.perf_counter() - start) * 1000
            span.set_attribute("tool.success", True)
            span.set_attribute("tool.outcome", "success")
            span.set_attribute("tool.duration_ms", duration_ms)
            span.set_attribute("result.content_blocks", len(result.content))
            record_tool_call(name, "success", duration_ms)
            return result

    return wrapper


def _categorize_tool(tool_name: str) -> str:
    """Categorize tools for better organization."""
    if tool_name.startswith("search"):
        return "discovery"
    if tool_name.startswith("list") or tool_name.endswith("_cats"):
        return "listing"
    if tool_name.startswith("get"):
        return "lookup"
    return "general"


def _error_outcome(error: Exception) -> str:
    code = getattr(error, "code", None)
    taxonomy = getattr(code, "taxonomy", None)
    return taxonomy or "error"


def _add_attributes(span, prefix: str, data: Any):
    """Add scalar argument values to the span."""
    if not isinstance(data, dict):
        return
    for key, value in data.items():
        if isinstance(value, str | int | float | bool):
            span.set_attribute(f"{prefix}.{key}", value)
