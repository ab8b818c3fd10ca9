"""Custom metrics for the Cat Database MCP Server."""

import logfire

# MCP Protocol Metrics
tool_call_counter = logfire.metric_counter(
    "mcp.tools.calls", unit="1", description="Tool invocations by tool name and outcome"
)

tool_call_duration = logfire.metric_histogram(
    "mcp.tools.duration_ms", unit="ms", description="Tool invocation duration"
)


def record_tool_call(tool_name: str, outcome: str, duration_ms: float) -> None:
    """Record one finished tool call; ``outcome`` is ``success`` or a taxonomy code."""
    attributes = {"tool": tool_name, "outcome": outcome}
    tool_call_counter.add(1, attributes)
    tool_call_duration.record(duration_ms, attributes)
